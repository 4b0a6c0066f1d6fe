"""Owner analytics use cases."""

from .activity import (
    ActivityRequest,
    ActivityResponse,
    AudienceResponse,
    GetActivityUseCase,
    GetAudienceUseCase,
)
from .dashboard import (
    AnalyticsRequest,
    DashboardResponse,
    GetDashboardUseCase,
    GetTopProjectsUseCase,
    TopProjectsRequest,
    TopProjectsResponse,
)
from .project_analytics import (
    GetProjectAnalyticsUseCase,
    GetProjectsAnalyticsUseCase,
    ProjectAnalyticsRequest,
    ProjectAnalyticsResponse,
    ProjectsAnalyticsRequest,
    ProjectsAnalyticsResponse,
)

__all__ = [
    "ActivityRequest",
    "ActivityResponse",
    "AnalyticsRequest",
    "AudienceResponse",
    "DashboardResponse",
    "GetActivityUseCase",
    "GetAudienceUseCase",
    "GetDashboardUseCase",
    "GetProjectAnalyticsUseCase",
    "GetProjectsAnalyticsUseCase",
    "GetTopProjectsUseCase",
    "ProjectAnalyticsRequest",
    "ProjectAnalyticsResponse",
    "ProjectsAnalyticsRequest",
    "ProjectsAnalyticsResponse",
    "TopProjectsRequest",
    "TopProjectsResponse",
]
