"""Per-project analytics use cases."""

from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.analytics.dashboard import (
    ProjectStatsEntry,
    project_stats_entry,
)
from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, SkipPagination
from folio.domain.service import AnalyticsService, ProjectService, UserService
from folio.domain.value import ProjectId, UserId


class ProjectAnalyticsRequest(BaseModel):
    """Analytics for one project."""

    project_id: str
    user_id: str


class DailyStatsInfo(ApiModel):
    """Counters for one day; ``date`` is YYYY-MM-DD."""

    date: str
    views: int
    likes: int
    comments: int


class ProjectAnalyticsResponse(ApiModel):
    """All-time counters plus the daily series."""

    project: ProjectStatsEntry
    daily: list[DailyStatsInfo]


class GetProjectAnalyticsUseCase(BaseUseCase):
    """Use case for one project's analytics, for its owner or an admin."""

    def __init__(
        self,
        analytics_service: AnalyticsService,
        project_service: ProjectService,
        user_service: UserService,
    ) -> None:
        self.analytics_service = analytics_service
        self.project_service = project_service
        self.user_service = user_service

    async def execute(
        self, request: ProjectAnalyticsRequest
    ) -> ProjectAnalyticsResponse:
        """Load project analytics.

        Raises:
            NotFoundError: If the project does not exist
            NotAuthorizedError: Unless the caller owns the project or is an admin
        """
        requester = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        project = await self.project_service.get_by_id(
            ProjectId(UUID(request.project_id))
        )
        analytics = await self.analytics_service.get_project_analytics(
            project, requester
        )
        return ProjectAnalyticsResponse(
            project=project_stats_entry(analytics.project, analytics.engagement),
            daily=[
                DailyStatsInfo(
                    date=d.day.isoformat(),
                    views=d.stats.views,
                    likes=d.stats.likes,
                    comments=d.stats.comments,
                )
                for d in analytics.daily
            ],
        )


class ProjectsAnalyticsRequest(BaseModel):
    """Page of the owner's projects with counters."""

    user_id: str
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=20, ge=1, le=100)


class ProjectsAnalyticsResponse(ApiModel):
    projects: list[ProjectStatsEntry]
    pagination: SkipPagination


class GetProjectsAnalyticsUseCase(BaseUseCase):
    """Use case for listing the owner's projects with their counters."""

    def __init__(self, analytics_service: AnalyticsService) -> None:
        self.analytics_service = analytics_service

    async def execute(
        self, request: ProjectsAnalyticsRequest
    ) -> ProjectsAnalyticsResponse:
        pairs, total = await self.analytics_service.get_projects_analytics(
            UserId(UUID(request.user_id)), request.limit, request.skip
        )
        return ProjectsAnalyticsResponse(
            projects=[project_stats_entry(p, e) for p, e in pairs],
            pagination=SkipPagination(
                skip=request.skip, limit=request.limit, total=total
            ),
        )
