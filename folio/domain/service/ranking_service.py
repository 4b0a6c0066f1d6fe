"""Popularity ranking domain service.

Every ranking sorts by ``EngagementStats.popularity_score`` descending and
breaks ties on an ascending secondary key (username for users, title then
id for projects, name for tags). Ranks are 1-based positions in the full
ordering, so ``rank = skip + index + 1`` within a page.

Only public, active users and the public projects they own take part.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Sequence, TypeVar

import logfire

from folio.config import RankingSettings
from folio.domain.model import Project, User
from folio.domain.repository import (
    AnalyticsRepository,
    ProjectRepository,
    RelationshipRepository,
    UserRepository,
)
from folio.domain.value import EngagementStats, ProjectId, UserId

from .base import Service

T = TypeVar("T")


@dataclass
class UserRanking:
    """A user's place in the global or weekly ranking."""

    rank: int
    user: User
    followers_count: int
    project_count: int
    stats: EngagementStats


@dataclass
class ProjectRanking:
    """A project's place in the project ranking."""

    rank: int
    project: Project
    owner: User
    stats: EngagementStats


@dataclass
class TagRanking:
    """A tag's place in the tag ranking."""

    rank: int
    tag: str
    project_count: int
    stats: EngagementStats

    @property
    def total_score(self) -> int:
        return self.stats.popularity_score

    @property
    def avg_score(self) -> int:
        return round(self.total_score / self.project_count) if self.project_count else 0


@dataclass
class RankingPage:
    """One page of a ranking and the size of the full ranking."""

    entries: list
    skip: int
    limit: int
    total: int


@dataclass
class RankingPosition:
    """The caller's own place in the global ranking."""

    position: int | None
    total_users: int
    stats: EngagementStats | None = None


def rank_items(
    items: Sequence[T],
    score: Callable[[T], int],
    tie_break: Callable[[T], tuple],
) -> list[T]:
    """Sort by score descending, then by ``tie_break`` ascending."""
    return sorted(items, key=lambda item: (-score(item), tie_break(item)))


class RankingService(Service):
    """Builds popularity rankings from engagement counters."""

    def __init__(
        self,
        user_repository: UserRepository,
        project_repository: ProjectRepository,
        relationship_repository: RelationshipRepository,
        analytics_repository: AnalyticsRepository,
        ranking_settings: RankingSettings,
    ) -> None:
        """Initialize ranking service.

        Args:
            user_repository: User repository
            project_repository: Project repository
            relationship_repository: Follower counts
            analytics_repository: Engagement counters
            ranking_settings: Page sizes and weekly window
        """
        self.user_repository = user_repository
        self.project_repository = project_repository
        self.relationship_repository = relationship_repository
        self.analytics_repository = analytics_repository
        self.settings = ranking_settings

    def clamp(self, skip: int | None, limit: int | None) -> tuple[int, int]:
        """Normalize pagination: skip >= 0, 1 <= limit <= max_limit."""
        skip = max(skip or 0, 0)
        if limit is None:
            limit = self.settings.default_limit
        limit = max(1, min(limit, self.settings.max_limit))
        return skip, limit

    async def _ranked_projects(self) -> list[tuple[Project, EngagementStats]]:
        projects = await self.project_repository.find_discoverable()
        engagement = (
            await self.analytics_repository.find_engagement([p.id for p in projects])
            if projects
            else {}
        )
        pairs = [
            (p, engagement[p.id].stats if p.id in engagement else EngagementStats())
            for p in projects
        ]
        return rank_items(
            pairs,
            score=lambda pair: pair[1].popularity_score,
            tie_break=lambda pair: (pair[0].title.lower(), str(pair[0].id)),
        )

    async def _user_totals(
        self,
        users: list[User],
        stats_by_project: dict[ProjectId, EngagementStats],
        projects: list[Project],
    ) -> list[tuple[User, int, int, EngagementStats]]:
        projects_by_owner: dict[UserId, list[Project]] = {}
        for project in projects:
            projects_by_owner.setdefault(project.owner_id, []).append(project)

        followers = (
            await self.relationship_repository.count_followers([u.id for u in users])
            if users
            else {}
        )

        totals = []
        for user in users:
            owned = projects_by_owner.get(user.id, [])
            stats = EngagementStats()
            for project in owned:
                stats = stats + stats_by_project.get(project.id, EngagementStats())
            totals.append((user, followers.get(user.id, 0), len(owned), stats))
        return totals

    async def _ranked_users(self) -> list[tuple[User, int, int, EngagementStats]]:
        users = await self.user_repository.find_public_active()
        projects = await self.project_repository.find_discoverable()
        engagement = (
            await self.analytics_repository.find_engagement([p.id for p in projects])
            if projects
            else {}
        )
        stats_by_project = {pid: item.stats for pid, item in engagement.items()}
        totals = await self._user_totals(users, stats_by_project, projects)
        return rank_items(
            totals,
            score=lambda row: row[3].popularity_score,
            tie_break=lambda row: (row[0].username.root.lower(),),
        )

    @staticmethod
    def _page(ranked: list, skip: int, limit: int, build) -> RankingPage:
        window = ranked[skip : skip + limit]
        entries = [build(skip + index + 1, item) for index, item in enumerate(window)]
        return RankingPage(entries=entries, skip=skip, limit=limit, total=len(ranked))

    async def global_ranking(
        self, skip: int | None = None, limit: int | None = None
    ) -> RankingPage:
        """All-time user ranking, summed over each user's public projects."""
        skip, limit = self.clamp(skip, limit)
        with logfire.span("ranking_service.global_ranking", skip=skip, limit=limit):
            ranked = await self._ranked_users()
            return self._page(
                ranked,
                skip,
                limit,
                lambda rank, row: UserRanking(
                    rank=rank,
                    user=row[0],
                    followers_count=row[1],
                    project_count=row[2],
                    stats=row[3],
                ),
            )

    async def project_ranking(
        self, skip: int | None = None, limit: int | None = None
    ) -> RankingPage:
        """All-time ranking of public projects."""
        skip, limit = self.clamp(skip, limit)
        with logfire.span("ranking_service.project_ranking", skip=skip, limit=limit):
            ranked = await self._ranked_projects()
            owner_ids = list({p.owner_id for p, _ in ranked})
            owners = {
                u.id: u for u in await self.user_repository.find_by_ids(owner_ids)
            } if owner_ids else {}
            return self._page(
                ranked,
                skip,
                limit,
                lambda rank, pair: ProjectRanking(
                    rank=rank,
                    project=pair[0],
                    owner=owners[pair[0].owner_id],
                    stats=pair[1],
                ),
            )

    async def tag_ranking(
        self, skip: int | None = None, limit: int | None = None
    ) -> RankingPage:
        """Tags ranked by the summed score of the public projects carrying them."""
        skip, limit = self.clamp(skip, limit)
        with logfire.span("ranking_service.tag_ranking", skip=skip, limit=limit):
            counts: dict[str, int] = {}
            totals: dict[str, EngagementStats] = {}
            for project, stats in await self._ranked_projects():
                for tag in project.tags:
                    name = tag.root
                    counts[name] = counts.get(name, 0) + 1
                    totals[name] = totals.get(name, EngagementStats()) + stats

            ranked = rank_items(
                list(counts.keys()),
                score=lambda name: totals[name].popularity_score,
                tie_break=lambda name: (name,),
            )
            return self._page(
                ranked,
                skip,
                limit,
                lambda rank, name: TagRanking(
                    rank=rank,
                    tag=name,
                    project_count=counts[name],
                    stats=totals[name],
                ),
            )

    async def weekly_ranking(
        self,
        skip: int | None = None,
        limit: int | None = None,
        today: date | None = None,
    ) -> RankingPage:
        """User ranking over the trailing window of daily counters.

        Users who scored nothing in the window are left out.
        """
        skip, limit = self.clamp(skip, limit)
        with logfire.span("ranking_service.weekly_ranking", skip=skip, limit=limit):
            today = today or date.today()
            since = today - timedelta(days=self.settings.weekly_window_days - 1)

            users = await self.user_repository.find_public_active()
            projects = await self.project_repository.find_discoverable()
            daily = (
                await self.analytics_repository.find_daily(
                    [p.id for p in projects], since
                )
                if projects
                else []
            )
            stats_by_project: dict[ProjectId, EngagementStats] = {}
            for bucket in daily:
                if bucket.day > today:
                    continue
                stats_by_project[bucket.project_id] = (
                    stats_by_project.get(bucket.project_id, EngagementStats())
                    + bucket.stats
                )

            totals = [
                row
                for row in await self._user_totals(users, stats_by_project, projects)
                if row[3].popularity_score > 0
            ]
            ranked = rank_items(
                totals,
                score=lambda row: row[3].popularity_score,
                tie_break=lambda row: (row[0].username.root.lower(),),
            )
            return self._page(
                ranked,
                skip,
                limit,
                lambda rank, row: UserRanking(
                    rank=rank,
                    user=row[0],
                    followers_count=row[1],
                    project_count=row[2],
                    stats=row[3],
                ),
            )

    async def position_of(self, user: User) -> RankingPosition:
        """The user's place in the global ranking.

        Private users are not ranked and get no position.
        """
        with logfire.span("ranking_service.position_of", user_id=str(user.id)):
            ranked = await self._ranked_users()
            if user.privacy.is_private:
                return RankingPosition(position=None, total_users=len(ranked))
            for index, row in enumerate(ranked):
                if row[0].id == user.id:
                    return RankingPosition(
                        position=index + 1, total_users=len(ranked), stats=row[3]
                    )
            return RankingPosition(position=None, total_users=len(ranked))
