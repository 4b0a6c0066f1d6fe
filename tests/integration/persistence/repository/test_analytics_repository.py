"""Integration tests for the PostgreSQL engagement and relationship repositories.

These run against a migrated database (``DATABASE__URL``) and are selected
with ``pytest -m integration``.
"""

from datetime import date
from uuid import uuid4

import pytest

from folio.domain.repository import AnalyticsRepository, RelationshipRepository
from folio.domain.service import AuthService, ProjectService
from tests.conftest import register_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_username(prefix: str) -> str:
    return f"{prefix}_{uuid4().hex[:8]}"


class TestAnalyticsRepositoryIntegration:
    """Counter upserts must accumulate instead of overwriting."""

    @pytest.mark.asyncio
    async def test_counters_accumulate(self, integration_env):
        auth_service = await integration_env.get(AuthService)
        project_service = await integration_env.get(ProjectService)
        analytics_repository = await integration_env.get(AnalyticsRepository)

        owner = await register_user(auth_service, unique_username("owner"))
        viewer = await register_user(auth_service, unique_username("viewer"))
        project = await project_service.create(owner, title="Counter Test")
        today = date.today()

        await analytics_repository.record_view(project.id, viewer.id, today)
        await analytics_repository.record_view(project.id, viewer.id, today)
        await analytics_repository.record_view(project.id, None, today)
        await analytics_repository.record_like(project.id, today)
        await analytics_repository.record_unlike(project.id)
        await analytics_repository.record_unlike(project.id)

        stats = (await analytics_repository.find_engagement([project.id]))[
            project.id
        ].stats
        daily = await analytics_repository.find_daily([project.id], today)

        assert stats.views == 3
        assert stats.likes == 0
        assert await analytics_repository.count_unique_viewers([project.id]) == 1
        assert [d.stats.views for d in daily] == [3]


class TestRelationshipRepositoryIntegration:
    """Unique constraints make relationship inserts idempotent."""

    @pytest.mark.asyncio
    async def test_duplicate_follow_reports_false(self, integration_env):
        auth_service = await integration_env.get(AuthService)
        relationship_repository = await integration_env.get(RelationshipRepository)

        alice = await register_user(auth_service, unique_username("alice"))
        bob = await register_user(auth_service, unique_username("bob"))

        assert await relationship_repository.add_follow(alice.id, bob.id) is True
        assert await relationship_repository.add_follow(alice.id, bob.id) is False
        assert await relationship_repository.find_followers(bob.id) == [alice.id]
        assert await relationship_repository.count_followers([bob.id]) == {
            bob.id: 1
        }
