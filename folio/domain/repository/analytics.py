"""Analytics repository interfaces.

Counters are only ever changed with atomic increments/decrements, never
read-modify-write, so concurrent likes and views do not lose updates.
"""

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Dict, List, Optional, Sequence

from folio.domain.model.analytics import ActivityEntry, DailyStats, ProjectEngagement
from folio.domain.value import ActivityAction, ProjectId, UserId


class AnalyticsRepository(ABC):
    """Repository for per-project engagement counters."""

    @abstractmethod
    async def record_view(
        self, project_id: ProjectId, viewer_id: Optional[UserId], day: date
    ) -> None:
        """Count one view on the project's total and daily bucket.

        Args:
            project_id: Viewed project
            viewer_id: Authenticated viewer, added to the unique viewer set
            day: Daily bucket to increment
        """
        pass

    @abstractmethod
    async def record_like(self, project_id: ProjectId, day: date) -> None:
        """Count one like on the project's total and daily bucket."""
        pass

    @abstractmethod
    async def record_unlike(self, project_id: ProjectId) -> None:
        """Take one like off the project's total, never below zero."""
        pass

    @abstractmethod
    async def record_comment(self, project_id: ProjectId, day: date) -> None:
        """Count one comment on the project's total and daily bucket."""
        pass

    @abstractmethod
    async def record_comment_removed(self, project_id: ProjectId) -> None:
        """Take one comment off the project's total, never below zero."""
        pass

    @abstractmethod
    async def find_engagement(
        self, project_ids: Sequence[ProjectId]
    ) -> Dict[ProjectId, ProjectEngagement]:
        """All-time counters for several projects.

        Projects without any recorded engagement map to zero counters.
        """
        pass

    @abstractmethod
    async def find_daily(
        self, project_ids: Sequence[ProjectId], since: date
    ) -> List[DailyStats]:
        """Daily buckets on or after ``since`` for several projects."""
        pass

    @abstractmethod
    async def count_unique_viewers(self, project_ids: Sequence[ProjectId]) -> int:
        """Distinct authenticated viewers across several projects."""
        pass


class ActivityRepository(ABC):
    """Repository for the user activity log."""

    @abstractmethod
    async def save(self, entry: ActivityEntry) -> ActivityEntry:
        pass

    @abstractmethod
    async def find_by_user(
        self,
        user_id: UserId,
        limit: int,
        offset: int = 0,
        action: Optional[ActivityAction] = None,
    ) -> List[ActivityEntry]:
        """List a user's activity, newest first."""
        pass

    @abstractmethod
    async def count_by_user(
        self, user_id: UserId, action: Optional[ActivityAction] = None
    ) -> int:
        pass

    @abstractmethod
    async def delete_older_than(self, cutoff: datetime) -> int:
        """Purge entries created before ``cutoff``.

        Returns:
            Number of entries deleted
        """
        pass
