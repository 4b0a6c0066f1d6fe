#!/usr/bin/env python3
"""Delete activity log entries older than the retention window.

Meant to run from a scheduler (cron, a Kubernetes CronJob). The window is
``ANALYTICS__ACTIVITY_RETENTION_DAYS`` (90 days by default).
"""

import asyncio
import sys

import logfire

from folio.config import Settings
from folio.domain.service import AnalyticsService
from folio.util.di.container import create_container
from folio.util.logging import setup_logging
from folio.util.observability import configure_logfire


async def purge() -> int:
    container = create_container()
    try:
        # The request scope commits the session when it closes
        async with container() as request_container:
            analytics_service = await request_container.get(AnalyticsService)
            return await analytics_service.purge_expired_activity()
    finally:
        await container.close()


def main() -> int:
    """Purge expired activity and log the outcome to Logfire."""
    settings = Settings()

    setup_logging(settings)
    configure_logfire(settings)

    try:
        deleted = asyncio.run(purge())
        logfire.info(
            "Activity purge finished",
            deleted=deleted,
            retention_days=settings.analytics.activity_retention_days,
        )
        return 0

    except Exception as e:
        logfire.error(
            "Activity purge failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
