"""Project use cases."""

from .create_project import CreateProjectRequest, CreateProjectUseCase
from .get_project import GetProjectRequest, GetProjectResponse, GetProjectUseCase
from .like_project import (
    LikeProjectUseCase,
    LikeResponse,
    ProjectActionRequest,
    SaveProjectUseCase,
    SaveResponse,
    UnlikeProjectUseCase,
    UnsaveProjectUseCase,
)
from .list_projects import (
    FollowingFeedUseCase,
    ListMyProjectsUseCase,
    ListProjectsRequest,
    ProjectListResponse,
    SavedProjectsUseCase,
)
from .search_projects import (
    PopularTagsRequest,
    PopularTagsResponse,
    PopularTagsUseCase,
    SearchProjectsRequest,
    SearchProjectsResponse,
    SearchProjectsUseCase,
)
from .update_project import (
    DeleteProjectRequest,
    DeleteProjectUseCase,
    UpdateProjectRequest,
    UpdateProjectUseCase,
)

__all__ = [
    "CreateProjectRequest",
    "CreateProjectUseCase",
    "DeleteProjectRequest",
    "DeleteProjectUseCase",
    "FollowingFeedUseCase",
    "GetProjectRequest",
    "GetProjectResponse",
    "GetProjectUseCase",
    "LikeProjectUseCase",
    "LikeResponse",
    "ListMyProjectsUseCase",
    "ListProjectsRequest",
    "PopularTagsRequest",
    "PopularTagsResponse",
    "PopularTagsUseCase",
    "ProjectActionRequest",
    "ProjectListResponse",
    "SaveProjectUseCase",
    "SaveResponse",
    "SavedProjectsUseCase",
    "SearchProjectsRequest",
    "SearchProjectsResponse",
    "SearchProjectsUseCase",
    "UnlikeProjectUseCase",
    "UnsaveProjectUseCase",
    "UpdateProjectRequest",
    "UpdateProjectUseCase",
]
