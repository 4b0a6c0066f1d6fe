"""Project list use cases for the signed-in user."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, ProjectInfo, project_info
from folio.domain.model import Project
from folio.domain.service import ProjectService, UserService
from folio.domain.value import UserId


class ListProjectsRequest(BaseModel):
    """Request naming the signed-in user."""

    user_id: str


class ProjectListResponse(ApiModel):
    """A list of projects with owners and like counts."""

    projects: list[ProjectInfo]


async def build_project_list(
    projects: list[Project],
    project_service: ProjectService,
    user_service: UserService,
) -> list[ProjectInfo]:
    """Attach owners and like counts to ``projects``, keeping their order."""
    owners = await user_service.get_many(list({p.owner_id for p in projects}))
    likes = await project_service.likes_count([p.id for p in projects])
    return [
        project_info(p, likes.get(p.id, 0), owners.get(p.owner_id)) for p in projects
    ]


class ListMyProjectsUseCase(BaseUseCase):
    """Use case for listing the caller's own projects, newest first."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ListProjectsRequest) -> ProjectListResponse:
        projects = await self.project_service.list_owned(UserId(UUID(request.user_id)))
        return ProjectListResponse(
            projects=await build_project_list(
                projects, self.project_service, self.user_service
            )
        )


class FollowingFeedUseCase(BaseUseCase):
    """Use case for the feed of projects by followed users."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ListProjectsRequest) -> ProjectListResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        projects = await self.project_service.following_feed(user)
        return ProjectListResponse(
            projects=await build_project_list(
                projects, self.project_service, self.user_service
            )
        )


class SavedProjectsUseCase(BaseUseCase):
    """Use case for listing bookmarked projects."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ListProjectsRequest) -> ProjectListResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        projects = await self.project_service.list_saved(user)
        return ProjectListResponse(
            projects=await build_project_list(
                projects, self.project_service, self.user_service
            )
        )
