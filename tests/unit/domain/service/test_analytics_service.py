"""Unit tests for AnalyticsService."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from folio.domain.error import NotAuthorizedError
from folio.domain.model import ActivityEntry
from folio.domain.repository import ActivityRepository
from folio.domain.service import (
    AnalyticsService,
    AuthService,
    CommentService,
    ProjectService,
)
from folio.domain.value import ActivityAction, ActivityId
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestEngagement:
    """Tests for the engagement counters."""

    @pytest.mark.asyncio
    async def test_view_like_and_comments_score(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        comment_service = await unit_env.get(CommentService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        fan = await register_user(auth_service, "fan")
        project = await project_service.create(owner, title="Launch")

        await project_service.view(project.id, fan)
        await project_service.like(project.id, fan)
        await comment_service.add(project.id, fan, "Great work")
        await comment_service.add(project.id, fan, "Really great")

        stats = (await analytics_service.get_engagement([project.id]))[
            project.id
        ].stats

        assert (stats.views, stats.likes, stats.comments) == (1, 1, 2)
        assert stats.popularity_score == 41

    @pytest.mark.asyncio
    async def test_owner_views_are_not_counted(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        project = await project_service.create(owner, title="Launch")

        await project_service.view(project.id, owner)
        await project_service.view(project.id, None)

        stats = (await analytics_service.get_engagement([project.id]))[
            project.id
        ].stats
        assert stats.views == 1

    @pytest.mark.asyncio
    async def test_unlike_decrements(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        fan = await register_user(auth_service, "fan")
        project = await project_service.create(owner, title="Launch")

        assert await project_service.like(project.id, fan) == 1
        assert await project_service.unlike(project.id, fan) == 0

        stats = (await analytics_service.get_engagement([project.id]))[
            project.id
        ].stats
        assert stats.likes == 0


class TestOwnerReports:
    """Tests for dashboards and per-project analytics."""

    @pytest.mark.asyncio
    async def test_dashboard_has_one_bucket_per_day(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        project = await project_service.create(owner, title="Launch")
        await project_service.view(project.id, None)
        await project_service.view(project.id, None)

        dashboard = await analytics_service.get_dashboard(owner.id)

        assert dashboard.total_projects == 1
        assert dashboard.totals.views == 2
        assert len(dashboard.daily_views) == 30
        assert dashboard.daily_views[-1][1] == 2
        assert sum(views for _, views in dashboard.daily_views) == 2
        assert dashboard.top_projects[0][0].id == project.id
        assert dashboard.recent_activity[0].action == ActivityAction.PROJECT_CREATED

    @pytest.mark.asyncio
    async def test_audience_engagement_rate(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        fan = await register_user(auth_service, "fan")
        project = await project_service.create(owner, title="Launch")
        for _ in range(4):
            await project_service.view(project.id, None)
        await project_service.like(project.id, fan)

        audience = await analytics_service.get_audience(owner.id)

        assert audience.total_views == 4
        assert audience.avg_engagement_rate == 25.0

    @pytest.mark.asyncio
    async def test_project_analytics_requires_owner(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        stranger = await register_user(auth_service, "stranger")
        project = await project_service.create(owner, title="Launch")

        with pytest.raises(NotAuthorizedError):
            await analytics_service.get_project_analytics(project, stranger)


class TestActivityLog:
    """Tests for the activity log."""

    @pytest.mark.asyncio
    async def test_filter_by_action(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_service = await unit_env.get(AnalyticsService)

        owner = await register_user(auth_service, "creator")
        project = await project_service.create(owner, title="Launch")
        await project_service.update(project.id, owner, title="Launch v2")

        entries, total = await analytics_service.get_activity(
            owner.id, limit=10, skip=0, action=ActivityAction.PROJECT_UPDATED
        )

        assert total == 1
        assert entries[0].project_id == project.id

    @pytest.mark.asyncio
    async def test_purge_drops_only_expired_entries(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        analytics_service = await unit_env.get(AnalyticsService)
        activity_repository = await unit_env.get(ActivityRepository)

        user = await register_user(auth_service, "creator")
        now = datetime.now()
        await activity_repository.save(
            ActivityEntry(
                id=ActivityId(uuid4()),
                user_id=user.id,
                action=ActivityAction.PROFILE_UPDATED,
                created_at=now - timedelta(days=91),
            )
        )
        await analytics_service.log_activity(user.id, ActivityAction.PROFILE_UPDATED)

        deleted = await analytics_service.purge_expired_activity(now)
        _, total = await analytics_service.get_activity(user.id, limit=10, skip=0)

        assert deleted == 1
        assert total == 1
