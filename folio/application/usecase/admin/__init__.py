"""Admin use cases."""

from .base import AdminUserInfo
from .reports import (
    AdminRequest,
    GetReportUseCase,
    ListReportsRequest,
    ListReportsResponse,
    ListReportsUseCase,
    ProcessReportRequest,
    ProcessReportUseCase,
    RejectReportRequest,
    RejectReportUseCase,
    ReportRequest,
    ReportStatsResponse,
    ReportStatsUseCase,
    UpdateReportStatusRequest,
    UpdateReportStatusUseCase,
)
from .users import (
    AccountAction,
    AdminDeleteProjectRequest,
    AdminDeleteProjectUseCase,
    ListModeratedRequest,
    ListModeratedUsersUseCase,
    ListUserProjectsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    ModeratedUsersResponse,
    ModerateUserRequest,
    ModerateUserUseCase,
    SetAdminRequest,
    SetAdminUseCase,
    UserProjectsRequest,
    UserProjectsResponse,
)

__all__ = [
    "AccountAction",
    "AdminDeleteProjectRequest",
    "AdminDeleteProjectUseCase",
    "AdminRequest",
    "AdminUserInfo",
    "GetReportUseCase",
    "ListModeratedRequest",
    "ListModeratedUsersUseCase",
    "ListReportsRequest",
    "ListReportsResponse",
    "ListReportsUseCase",
    "ListUserProjectsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "ModeratedUsersResponse",
    "ModerateUserRequest",
    "ModerateUserUseCase",
    "ProcessReportRequest",
    "ProcessReportUseCase",
    "RejectReportRequest",
    "RejectReportUseCase",
    "ReportRequest",
    "ReportStatsResponse",
    "ReportStatsUseCase",
    "UpdateReportStatusRequest",
    "UpdateReportStatusUseCase",
    "UserProjectsRequest",
    "UserProjectsResponse",
]
