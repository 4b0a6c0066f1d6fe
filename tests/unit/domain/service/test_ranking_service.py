"""Unit tests for RankingService."""

from datetime import date, timedelta

import pytest

from folio.domain.repository import AnalyticsRepository
from folio.domain.service import (
    AuthService,
    ProjectService,
    RankingService,
    RelationshipService,
    UserService,
)
from tests.conftest import register_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed_users_with_views(env, views_by_username: dict[str, int]) -> None:
    """Register one user per entry, each owning one project with that many views."""
    auth_service = await env.get(AuthService)
    project_service = await env.get(ProjectService)
    analytics_repository = await env.get(AnalyticsRepository)

    for username, views in views_by_username.items():
        user = await register_user(auth_service, username)
        project = await project_service.create(user, title=f"{username} project")
        for _ in range(views):
            await analytics_repository.record_view(project.id, None, date.today())


class TestClamp:
    """Tests for pagination normalization."""

    @pytest.mark.asyncio
    async def test_defaults(self, unit_env):
        ranking_service = await unit_env.get(RankingService)

        assert ranking_service.clamp(None, None) == (0, 20)

    @pytest.mark.asyncio
    async def test_out_of_range_values_are_clamped(self, unit_env):
        ranking_service = await unit_env.get(RankingService)

        assert ranking_service.clamp(-5, 0) == (0, 1)
        assert ranking_service.clamp(3, 1000) == (3, 100)


class TestGlobalRanking:
    """Tests for the all-time user ranking."""

    @pytest.mark.asyncio
    async def test_orders_by_score_descending(self, unit_env):
        await seed_users_with_views(unit_env, {"low": 1, "high": 9, "mid": 4})
        ranking_service = await unit_env.get(RankingService)

        page = await ranking_service.global_ranking()

        assert [e.user.username.root for e in page.entries] == ["high", "mid", "low"]
        assert [e.rank for e in page.entries] == [1, 2, 3]
        assert page.entries[0].stats.popularity_score == 9
        assert page.entries[0].project_count == 1

    @pytest.mark.asyncio
    async def test_pages_are_disjoint_with_increasing_ranks(self, unit_env):
        """Consecutive pages must not repeat users, and ranks continue across pages."""
        await seed_users_with_views(
            unit_env, {"user1": 5, "user2": 4, "user3": 3, "user4": 2, "user5": 1}
        )
        ranking_service = await unit_env.get(RankingService)

        pages = [
            await ranking_service.global_ranking(skip=skip, limit=2)
            for skip in (0, 2, 4)
        ]

        seen = [e.user.id for page in pages for e in page.entries]
        ranks = [e.rank for page in pages for e in page.entries]
        assert len(seen) == len(set(seen)) == 5
        assert ranks == [1, 2, 3, 4, 5]
        assert all(page.total == 5 for page in pages)

    @pytest.mark.asyncio
    async def test_ties_break_by_username(self, unit_env):
        await seed_users_with_views(unit_env, {"zed": 2, "amy": 2, "kim": 2})
        ranking_service = await unit_env.get(RankingService)

        page = await ranking_service.global_ranking()

        assert [e.user.username.root for e in page.entries] == ["amy", "kim", "zed"]

    @pytest.mark.asyncio
    async def test_private_users_are_not_ranked(self, unit_env):
        await seed_users_with_views(unit_env, {"shown": 1, "hidden": 50})
        ranking_service = await unit_env.get(RankingService)
        relationship_service = await unit_env.get(RelationshipService)
        user_service = await unit_env.get(UserService)

        hidden = await user_service.get_by_username("hidden")
        hidden = await relationship_service.update_privacy(hidden, is_private=True)

        page = await ranking_service.global_ranking()
        position = await ranking_service.position_of(hidden)

        assert [e.user.username.root for e in page.entries] == ["shown"]
        assert position.position is None


class TestWeeklyRanking:
    """Tests for the trailing-week ranking."""

    @pytest.mark.asyncio
    async def test_leaves_out_users_without_recent_engagement(self, unit_env):
        await seed_users_with_views(unit_env, {"active": 3, "idle": 0})
        ranking_service = await unit_env.get(RankingService)

        page = await ranking_service.weekly_ranking()

        assert [e.user.username.root for e in page.entries] == ["active"]
        assert page.entries[0].stats.views == 3

    @pytest.mark.asyncio
    async def test_window_covers_the_last_seven_days(self, unit_env):
        """A bucket from seven days ago is outside the window; six days is inside."""
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_repository = await unit_env.get(AnalyticsRepository)
        ranking_service = await unit_env.get(RankingService)
        today = date(2024, 3, 15)

        recent = await register_user(auth_service, "recent")
        stale = await register_user(auth_service, "stale")
        recent_project = await project_service.create(recent, title="Recent")
        stale_project = await project_service.create(stale, title="Stale")
        await analytics_repository.record_view(
            recent_project.id, None, today - timedelta(days=6)
        )
        await analytics_repository.record_view(
            stale_project.id, None, today - timedelta(days=7)
        )

        page = await ranking_service.weekly_ranking(today=today)

        assert [e.user.username.root for e in page.entries] == ["recent"]
        assert page.total == 1


class TestPositionOf:
    """Tests for the caller's place in the global ranking."""

    @pytest.mark.asyncio
    async def test_position_matches_global_rank(self, unit_env):
        await seed_users_with_views(unit_env, {"first": 9, "second": 5, "third": 1})
        ranking_service = await unit_env.get(RankingService)
        user_service = await unit_env.get(UserService)

        second = await user_service.get_by_username("second")
        position = await ranking_service.position_of(second)

        assert position.position == 2
        assert position.total_users == 3
        assert position.stats.views == 5


class TestTagRanking:
    """Tests for the tag ranking."""

    @pytest.mark.asyncio
    async def test_sums_scores_per_tag(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        project_service = await unit_env.get(ProjectService)
        analytics_repository = await unit_env.get(AnalyticsRepository)
        ranking_service = await unit_env.get(RankingService)

        owner = await register_user(auth_service, "tagger")
        first = await project_service.create(owner, title="One", tags=["python"])
        second = await project_service.create(
            owner, title="Two", tags=["python", "web"]
        )
        await analytics_repository.record_like(first.id, date.today())
        await analytics_repository.record_view(second.id, None, date.today())

        page = await ranking_service.tag_ranking()

        by_tag = {e.tag: e for e in page.entries}
        assert [e.tag for e in page.entries] == ["python", "web"]
        assert by_tag["python"].project_count == 2
        assert by_tag["python"].total_score == 11
        assert by_tag["web"].total_score == 1
