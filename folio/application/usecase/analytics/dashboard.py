"""Owner dashboard use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, StatsInfo, stats_info
from folio.domain.model import ActivityEntry, Project, ProjectEngagement
from folio.domain.service import AnalyticsService
from folio.domain.value import ActivityAction, UserId


class AnalyticsRequest(BaseModel):
    """Request naming the signed-in owner."""

    user_id: str


class TotalStats(ApiModel):
    """Counters summed across all owned projects."""

    total_projects: int
    total_views: int
    total_likes: int
    total_comments: int
    total_engagement: int
    popularity_score: int
    unique_viewers: int


class ProjectStatsEntry(ApiModel):
    """One project and its counters."""

    project_id: str
    title: str
    slug: str
    stats: StatsInfo
    unique_viewers: int
    last_updated: datetime | None


class ActivityInfo(ApiModel):
    """One activity log entry."""

    id: str
    action: ActivityAction
    project_id: str | None
    project_title: str | None
    target_user_id: str | None
    description: str | None
    created_at: datetime


class DailyViews(ApiModel):
    """Views on one day; ``date`` is YYYY-MM-DD."""

    date: str
    views: int


class DashboardResponse(ApiModel):
    """Owner dashboard."""

    total_stats: TotalStats
    top_projects: list[ProjectStatsEntry]
    recent_activity: list[ActivityInfo]
    daily_views: list[DailyViews]


def project_stats_entry(
    project: Project, engagement: ProjectEngagement
) -> ProjectStatsEntry:
    return ProjectStatsEntry(
        project_id=str(project.id),
        title=project.title,
        slug=project.slug.root,
        stats=stats_info(engagement.stats),
        unique_viewers=engagement.unique_viewers,
        last_updated=engagement.last_updated,
    )


def activity_info(entry: ActivityEntry) -> ActivityInfo:
    return ActivityInfo(
        id=str(entry.id),
        action=entry.action,
        project_id=str(entry.project_id) if entry.project_id else None,
        project_title=entry.project_title,
        target_user_id=str(entry.target_user_id) if entry.target_user_id else None,
        description=entry.description,
        created_at=entry.created_at,
    )


class GetDashboardUseCase(BaseUseCase):
    """Use case for the owner analytics dashboard."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: AnalyticsRequest) -> DashboardResponse:
        dashboard = await self.analytics_service.get_dashboard(
            UserId(UUID(request.user_id))
        )
        totals = dashboard.totals
        return DashboardResponse(
            total_stats=TotalStats(
                total_projects=dashboard.total_projects,
                total_views=totals.views,
                total_likes=totals.likes,
                total_comments=totals.comments,
                total_engagement=totals.engagement,
                popularity_score=totals.popularity_score,
                unique_viewers=dashboard.unique_viewers,
            ),
            top_projects=[
                project_stats_entry(p, e) for p, e in dashboard.top_projects
            ],
            recent_activity=[activity_info(a) for a in dashboard.recent_activity],
            daily_views=[
                DailyViews(date=day.isoformat(), views=views)
                for day, views in dashboard.daily_views
            ],
        )


class TopProjectsRequest(BaseModel):
    """Top projects request."""

    user_id: str
    limit: int = Field(default=5, ge=1, le=50)


class TopProjectsResponse(ApiModel):
    projects: list[ProjectStatsEntry]


class GetTopProjectsUseCase(BaseUseCase):
    """Use case for the owner's most popular projects."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(self, request: TopProjectsRequest) -> TopProjectsResponse:
        top = await self.analytics_service.get_top_projects(
            UserId(UUID(request.user_id)), request.limit
        )
        return TopProjectsResponse(
            projects=[project_stats_entry(p, e) for p, e in top]
        )
