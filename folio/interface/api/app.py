"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from folio.config import Settings
from folio.interface.api.error import register_exception_handlers
from folio.interface.api.routes import (
    admin,
    analytics,
    auth,
    collaborators,
    comments,
    follow,
    health,
    notifications,
    projects,
    ranking,
    reports,
    users,
)
from folio.util.di.container import create_container, setup_di
from folio.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container; tests pass one with in-memory persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Folio API",
        description="Backend API for Folio - share projects, follow makers and climb the rankings",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
            "http://localhost:5173",  # Vite default
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "User-Agent",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_exception_handlers(app_instance, settings)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(projects.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(collaborators.router)
    app_instance.include_router(follow.router)
    app_instance.include_router(notifications.router)
    app_instance.include_router(ranking.router)
    app_instance.include_router(analytics.router)
    app_instance.include_router(reports.router)
    app_instance.include_router(admin.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
