"""Admin moderation routes.

Every route requires a signed-in admin; the use cases check the flag.
"""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from folio.application.usecase.admin import (
    AccountAction,
    AdminDeleteProjectRequest,
    AdminDeleteProjectUseCase,
    AdminRequest,
    AdminUserInfo,
    GetReportUseCase,
    ListModeratedRequest,
    ListModeratedUsersUseCase,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ListUserProjectsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModeratedUsersResponse,
    ModerateUserRequest,
    ModerateUserUseCase,
    ProcessReportRequest,
    ProcessReportUseCase,
    RejectReportRequest,
    RejectReportUseCase,
    ReportRequest,
    ReportStatsResponse,
    ReportStatsUseCase,
    SetAdminRequest,
    SetAdminUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusUseCase,
    UserProjectsRequest,
    UserProjectsResponse,
)
from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.common import ApiModel, SuccessResponse
from folio.application.usecase.report import ReportInfo
from folio.domain.value import ModeratedFilter, ReportAction, ReportStatus, ReportType
from folio.interface.api.auth import require_user

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)


class ReportStatusAPIRequest(ApiModel):
    status: ReportStatus
    admin_notes: str | None = None


class ReportNotesAPIRequest(ApiModel):
    admin_notes: str | None = None


class ReportActionAPIRequest(ApiModel):
    """API request for resolving a report with an action."""

    action: ReportAction
    admin_notes: str | None = None
    reason: str | None = None


class ModerationAPIRequest(ApiModel):
    reason: str | None = None


class SetAdminAPIRequest(ApiModel):
    is_admin: bool


# Reports


@router.get("/reports", response_model=ListReportsResponse)
async def list_reports(
    list_reports_use_case: FromDishka[ListReportsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    report_status: ReportStatus | None = Query(default=None, alias="status"),
    report_type: ReportType | None = Query(default=None, alias="type"),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    authorization: str | None = Header(default=None),
) -> ListReportsResponse:
    """List reports, newest first, filtered by status and type.

    Args:
        list_reports_use_case: List reports use case from DI
        get_current_user_use_case: Get current user use case from DI
        report_status: Only reports in this state
        report_type: Only reports on this kind of target
        page: 1-based page number
        limit: Page size
        authorization: Bearer token

    Returns:
        Reports and pagination

    Raises:
        PermissionDeniedError: If the caller is not an admin
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await list_reports_use_case.execute(
        ListReportsRequest(
            admin_id=user.id,
            status=report_status,
            type=report_type,
            page=page,
            limit=limit,
        )
    )


@router.get("/reports/stats", response_model=ReportStatsResponse)
async def report_stats(
    report_stats_use_case: FromDishka[ReportStatsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReportStatsResponse:
    """Report counts by status and type."""
    user = await require_user(authorization, get_current_user_use_case)
    return await report_stats_use_case.execute(AdminRequest(admin_id=user.id))


@router.get("/reports/{report_id}", response_model=ReportInfo)
async def get_report(
    report_id: UUID,
    get_report_use_case: FromDishka[GetReportUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReportInfo:
    user = await require_user(authorization, get_current_user_use_case)
    return await get_report_use_case.execute(
        ReportRequest(admin_id=user.id, report_id=str(report_id))
    )


@router.put("/reports/{report_id}/status", response_model=ReportInfo)
async def update_report_status(
    report_id: UUID,
    request: ReportStatusAPIRequest,
    update_report_status_use_case: FromDishka[UpdateReportStatusUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReportInfo:
    """Move a report to another status, optionally with notes."""
    user = await require_user(authorization, get_current_user_use_case)
    return await update_report_status_use_case.execute(
        UpdateReportStatusRequest(
            admin_id=user.id,
            report_id=str(report_id),
            status=request.status,
            admin_notes=request.admin_notes,
        )
    )


@router.post("/reports/{report_id}/action", response_model=ReportInfo)
async def process_report(
    report_id: UUID,
    request: ReportActionAPIRequest,
    process_report_use_case: FromDishka[ProcessReportUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReportInfo:
    """Resolve a report by applying an action to its target.

    Raises:
        PermissionDeniedError: If the caller is not an admin or the target
            is protected from moderation
        BusinessRuleViolationError: If the action does not apply to the target
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await process_report_use_case.execute(
        ProcessReportRequest(
            admin_id=user.id,
            report_id=str(report_id),
            action=request.action,
            admin_notes=request.admin_notes,
            reason=request.reason,
        )
    )


@router.post("/reports/{report_id}/reject", response_model=ReportInfo)
async def reject_report(
    report_id: UUID,
    request: ReportNotesAPIRequest,
    reject_report_use_case: FromDishka[RejectReportUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> ReportInfo:
    user = await require_user(authorization, get_current_user_use_case)
    return await reject_report_use_case.execute(
        RejectReportRequest(
            admin_id=user.id, report_id=str(report_id), admin_notes=request.admin_notes
        )
    )


# Users


@router.get("/users", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    authorization: str | None = Header(default=None),
) -> ListUsersResponse:
    """List all users, newest first."""
    user = await require_user(authorization, get_current_user_use_case)
    return await list_users_use_case.execute(
        ListUsersRequest(admin_id=user.id, page=page, limit=limit)
    )


@router.get("/users/moderated", response_model=ModeratedUsersResponse)
async def list_moderated_users(
    list_moderated_users_use_case: FromDishka[ListModeratedUsersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    state: ModeratedFilter = Query(default=ModeratedFilter.ALL, alias="type"),
    authorization: str | None = Header(default=None),
) -> ModeratedUsersResponse:
    """List suspended, banned or deleted accounts."""
    user = await require_user(authorization, get_current_user_use_case)
    return await list_moderated_users_use_case.execute(
        ListModeratedRequest(admin_id=user.id, state=state)
    )


@router.get("/users/{user_id}/projects", response_model=UserProjectsResponse)
async def list_user_projects(
    user_id: UUID,
    list_user_projects_use_case: FromDishka[ListUserProjectsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserProjectsResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await list_user_projects_use_case.execute(
        UserProjectsRequest(admin_id=user.id, user_id=str(user_id))
    )


async def _moderate(
    action: AccountAction,
    user_id: UUID,
    reason: str | None,
    moderate_user_use_case: ModerateUserUseCase,
    get_current_user_use_case: GetCurrentUserUseCase,
    authorization: str | None,
) -> AdminUserInfo:
    admin = await require_user(authorization, get_current_user_use_case)
    return await moderate_user_use_case.execute(
        ModerateUserRequest(
            admin_id=admin.id, user_id=str(user_id), action=action, reason=reason
        )
    )


@router.post("/users/{user_id}/suspend", response_model=AdminUserInfo)
async def suspend_user(
    user_id: UUID,
    request: ModerationAPIRequest,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AdminUserInfo:
    """Suspend an account. A reason is required.

    Raises:
        ValidationError: If no reason is given
        PermissionDeniedError: If the target is the caller or another admin
    """
    return await _moderate(
        AccountAction.SUSPEND,
        user_id,
        request.reason,
        moderate_user_use_case,
        get_current_user_use_case,
        authorization,
    )


@router.post("/users/{user_id}/ban", response_model=AdminUserInfo)
async def ban_user(
    user_id: UUID,
    request: ModerationAPIRequest,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AdminUserInfo:
    """Ban an account. A reason is required."""
    return await _moderate(
        AccountAction.BAN,
        user_id,
        request.reason,
        moderate_user_use_case,
        get_current_user_use_case,
        authorization,
    )


@router.post("/users/{user_id}/delete", response_model=AdminUserInfo)
async def delete_user(
    user_id: UUID,
    request: ModerationAPIRequest,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AdminUserInfo:
    """Soft-delete an account. A reason is required."""
    return await _moderate(
        AccountAction.DELETE,
        user_id,
        request.reason,
        moderate_user_use_case,
        get_current_user_use_case,
        authorization,
    )


@router.post("/users/{user_id}/reactivate", response_model=AdminUserInfo)
async def reactivate_user(
    user_id: UUID,
    moderate_user_use_case: FromDishka[ModerateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AdminUserInfo:
    """Clear suspension, ban and deletion."""
    return await _moderate(
        AccountAction.REACTIVATE,
        user_id,
        None,
        moderate_user_use_case,
        get_current_user_use_case,
        authorization,
    )


@router.put("/users/{user_id}/admin", response_model=AdminUserInfo)
async def set_admin(
    user_id: UUID,
    request: SetAdminAPIRequest,
    set_admin_use_case: FromDishka[SetAdminUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> AdminUserInfo:
    """Grant or revoke admin rights."""
    admin = await require_user(authorization, get_current_user_use_case)
    return await set_admin_use_case.execute(
        SetAdminRequest(admin_id=admin.id, user_id=str(user_id), is_admin=request.is_admin)
    )


# Projects


@router.delete("/projects/{project_id}", response_model=SuccessResponse)
async def delete_project(
    project_id: UUID,
    admin_delete_project_use_case: FromDishka[AdminDeleteProjectUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Delete any project."""
    admin = await require_user(authorization, get_current_user_use_case)
    return await admin_delete_project_use_case.execute(
        AdminDeleteProjectRequest(admin_id=admin.id, project_id=str(project_id))
    )
