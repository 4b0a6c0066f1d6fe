"""Engagement analytics read models."""

from datetime import date, datetime
from typing import Optional

from pydantic import Field

from folio.domain.model.common import DomainModel
from folio.domain.value import (
    ActivityAction,
    ActivityId,
    EngagementStats,
    ProjectId,
    UserId,
)


class DailyStats(DomainModel):
    """Counters for one project on one day."""

    project_id: ProjectId
    day: date
    stats: EngagementStats = EngagementStats()


class ProjectEngagement(DomainModel):
    """All-time counters for one project."""

    project_id: ProjectId
    stats: EngagementStats = EngagementStats()
    unique_viewers: int = Field(default=0, ge=0)
    last_updated: Optional[datetime] = None


class ActivityEntry(DomainModel):
    """One entry of a user's activity log."""

    id: ActivityId
    user_id: UserId
    action: ActivityAction
    project_id: Optional[ProjectId] = None
    project_title: Optional[str] = None
    target_user_id: Optional[UserId] = None
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
