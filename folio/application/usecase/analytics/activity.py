"""Activity log and audience use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.analytics.dashboard import (
    ActivityInfo,
    AnalyticsRequest,
    activity_info,
)
from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, SkipPagination
from folio.domain.service import AnalyticsService
from folio.domain.value import ActivityAction, UserId


class ActivityRequest(BaseModel):
    """Page of the caller's activity log."""

    user_id: str
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1, le=100)
    action: ActivityAction | None = None


class ActivityResponse(ApiModel):
    activities: list[ActivityInfo]
    pagination: SkipPagination


class GetActivityUseCase(BaseUseCase):
    """Use case for reading the caller's activity log, newest first."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: ActivityRequest) -> ActivityResponse:
        entries, total = await self.analytics_service.get_activity(
            UserId(UUID(request.user_id)),
            limit=request.limit,
            skip=request.skip,
            action=request.action,
        )
        return ActivityResponse(
            activities=[activity_info(e) for e in entries],
            pagination=SkipPagination(
                skip=request.skip, limit=request.limit, total=total
            ),
        )


class ProjectEngagementInfo(ApiModel):
    project_id: str
    engagement: int


class AudienceResponse(ApiModel):
    """Audience summary.

    ``avg_engagement_rate`` is a percentage rounded to two decimals.
    """

    total_unique_viewers: int
    total_views: int
    total_likes: int
    total_comments: int
    avg_engagement_rate: float
    project_engagement: list[ProjectEngagementInfo]


class GetAudienceUseCase(BaseUseCase):
    """Use case for the owner's audience summary."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: AnalyticsRequest) -> AudienceResponse:
        audience = await self.analytics_service.get_audience(
            UserId(UUID(request.user_id))
        )
        return AudienceResponse(
            total_unique_viewers=audience.total_unique_viewers,
            total_views=audience.total_views,
            total_likes=audience.total_likes,
            total_comments=audience.total_comments,
            avg_engagement_rate=audience.avg_engagement_rate,
            project_engagement=[
                ProjectEngagementInfo(project_id=str(pid), engagement=value)
                for pid, value in audience.project_engagement
            ],
        )
