"""Owner analytics routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from folio.application.usecase.analytics import (
    ActivityRequest,
    ActivityResponse,
    AnalyticsRequest,
    AudienceResponse,
    DashboardResponse,
    GetActivityUseCase,
    GetAudienceUseCase,
    GetDashboardUseCase,
    GetProjectAnalyticsUseCase,
    GetProjectsAnalyticsUseCase,
    GetTopProjectsUseCase,
    ProjectAnalyticsRequest,
    ProjectAnalyticsResponse,
    ProjectsAnalyticsRequest,
    ProjectsAnalyticsResponse,
    TopProjectsRequest,
    TopProjectsResponse,
)
from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.domain.value import ActivityAction
from folio.interface.api.auth import require_user

router = APIRouter(prefix="/analytics", tags=["analytics"], route_class=DishkaRoute)


@router.get("/dashboard", response_model=DashboardResponse)
async def dashboard(
    get_dashboard_use_case: FromDishka[GetDashboardUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> DashboardResponse:
    """Summary of the signed-in user's project engagement.

    Returns:
        Totals, top projects, recent activity and 30 days of views, oldest first
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await get_dashboard_use_case.execute(AnalyticsRequest(user_id=user.id))


@router.get("/top-projects", response_model=TopProjectsResponse)
async def top_projects(
    get_top_projects_use_case: FromDishka[GetTopProjectsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    limit: int = Query(default=5, ge=1, le=50),
    authorization: str | None = Header(default=None),
) -> TopProjectsResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await get_top_projects_use_case.execute(
        TopProjectsRequest(user_id=user.id, limit=limit)
    )


@router.get("/projects", response_model=ProjectsAnalyticsResponse)
async def projects_analytics(
    get_projects_analytics_use_case: FromDishka[GetProjectsAnalyticsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    authorization: str | None = Header(default=None),
) -> ProjectsAnalyticsResponse:
    """Engagement for each of the signed-in user's projects."""
    user = await require_user(authorization, get_current_user_use_case)
    return await get_projects_analytics_use_case.execute(
        ProjectsAnalyticsRequest(user_id=user.id, skip=skip, limit=limit)
    )


@router.get("/project/{project_id}", response_model=ProjectAnalyticsResponse)
async def project_analytics(
    project_id: UUID,
    get_project_analytics_use_case: FromDishka[GetProjectAnalyticsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ProjectAnalyticsResponse:
    """Daily engagement of one project.

    Raises:
        NotAuthorizedError: If the caller is neither the owner nor an admin
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await get_project_analytics_use_case.execute(
        ProjectAnalyticsRequest(project_id=str(project_id), user_id=user.id)
    )


@router.get("/activity", response_model=ActivityResponse)
async def activity(
    get_activity_use_case: FromDishka[GetActivityUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    skip: int = Query(default=0, ge=0),
    limit: int = Query(default=20, ge=1, le=100),
    action: ActivityAction | None = Query(default=None),
    authorization: str | None = Header(default=None),
) -> ActivityResponse:
    """The signed-in user's activity log, newest first."""
    user = await require_user(authorization, get_current_user_use_case)
    return await get_activity_use_case.execute(
        ActivityRequest(user_id=user.id, skip=skip, limit=limit, action=action)
    )


@router.get("/audience", response_model=AudienceResponse)
async def audience(
    get_audience_use_case: FromDishka[GetAudienceUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AudienceResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await get_audience_use_case.execute(AnalyticsRequest(user_id=user.id))
