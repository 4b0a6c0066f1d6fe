"""In-memory analytics repositories for testing."""

from datetime import date, datetime
from typing import Optional, Sequence

from folio.domain.model import ActivityEntry, DailyStats, ProjectEngagement
from folio.domain.repository import ActivityRepository, AnalyticsRepository
from folio.domain.value import ActivityAction, EngagementStats, ProjectId, UserId

from .store import InMemoryStore


def _bump(stats: EngagementStats, counter: str, delta: int) -> EngagementStats:
    value = max(0, getattr(stats, counter) + delta)
    return stats.model_copy(update={counter: value})


class InMemoryAnalyticsRepository(AnalyticsRepository):
    """In-memory implementation of AnalyticsRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _increment(self, project_id: ProjectId, counter: str, day: date) -> None:
        totals = self._store.project_stats.get(project_id, EngagementStats())
        self._store.project_stats[project_id] = _bump(totals, counter, 1)
        self._store.stats_updated[project_id] = datetime.now()
        daily = self._store.daily_stats.get((project_id, day), EngagementStats())
        self._store.daily_stats[(project_id, day)] = _bump(daily, counter, 1)

    def _decrement(self, project_id: ProjectId, counter: str) -> None:
        totals = self._store.project_stats.get(project_id)
        if totals is not None:
            self._store.project_stats[project_id] = _bump(totals, counter, -1)
            self._store.stats_updated[project_id] = datetime.now()

    async def record_view(
        self, project_id: ProjectId, viewer_id: Optional[UserId], day: date
    ) -> None:
        self._increment(project_id, "views", day)
        if viewer_id:
            self._store.project_viewers.setdefault(project_id, set()).add(viewer_id)

    async def record_like(self, project_id: ProjectId, day: date) -> None:
        self._increment(project_id, "likes", day)

    async def record_unlike(self, project_id: ProjectId) -> None:
        self._decrement(project_id, "likes")

    async def record_comment(self, project_id: ProjectId, day: date) -> None:
        self._increment(project_id, "comments", day)

    async def record_comment_removed(self, project_id: ProjectId) -> None:
        self._decrement(project_id, "comments")

    async def find_engagement(
        self, project_ids: Sequence[ProjectId]
    ) -> dict[ProjectId, ProjectEngagement]:
        return {
            project_id: ProjectEngagement(
                project_id=project_id,
                stats=self._store.project_stats.get(project_id, EngagementStats()),
                unique_viewers=len(self._store.project_viewers.get(project_id, ())),
                last_updated=self._store.stats_updated.get(project_id),
            )
            for project_id in project_ids
        }

    async def find_daily(
        self, project_ids: Sequence[ProjectId], since: date
    ) -> list[DailyStats]:
        wanted = set(project_ids)
        return sorted(
            (
                DailyStats(project_id=project_id, day=day, stats=stats)
                for (project_id, day), stats in self._store.daily_stats.items()
                if project_id in wanted and day >= since
            ),
            key=lambda d: d.day,
        )

    async def count_unique_viewers(self, project_ids: Sequence[ProjectId]) -> int:
        viewers: set[UserId] = set()
        for project_id in project_ids:
            viewers |= self._store.project_viewers.get(project_id, set())
        return len(viewers)


class InMemoryActivityRepository(ActivityRepository):
    """In-memory implementation of ActivityRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self._store = store

    def _for_user(
        self, user_id: UserId, action: Optional[ActivityAction]
    ) -> list[ActivityEntry]:
        return [
            e
            for e in reversed(self._store.activity)
            if e.user_id == user_id and (action is None or e.action == action)
        ]

    async def save(self, entry: ActivityEntry) -> ActivityEntry:
        self._store.activity.append(entry)
        return entry

    async def find_by_user(
        self,
        user_id: UserId,
        limit: int,
        offset: int = 0,
        action: Optional[ActivityAction] = None,
    ) -> list[ActivityEntry]:
        return self._for_user(user_id, action)[offset : offset + limit]

    async def count_by_user(
        self, user_id: UserId, action: Optional[ActivityAction] = None
    ) -> int:
        return len(self._for_user(user_id, action))

    async def delete_older_than(self, cutoff: datetime) -> int:
        kept = [e for e in self._store.activity if e.created_at >= cutoff]
        deleted = len(self._store.activity) - len(kept)
        self._store.activity = kept
        return deleted
