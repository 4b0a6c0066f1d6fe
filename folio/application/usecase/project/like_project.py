"""Like and save use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.domain.service import ProjectService, UserService
from folio.domain.value import ProjectId, UserId


class ProjectActionRequest(BaseModel):
    """A signed-in user acting on a project."""

    project_id: str
    user_id: str


class LikeResponse(ApiModel):
    """Like state after the change."""

    liked: bool
    likes_count: int


class SaveResponse(ApiModel):
    """Bookmark state after the change."""

    saved: bool


class LikeProjectUseCase(BaseUseCase):
    """Use case for liking a project."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        """Initialize like project use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ProjectActionRequest) -> LikeResponse:
        """Like a project.

        Raises:
            NotFoundError: If the project does not exist
            BusinessRuleViolationError: If the user already liked it
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        count = await self.project_service.like(ProjectId(UUID(request.project_id)), user)
        return LikeResponse(liked=True, likes_count=count)


class UnlikeProjectUseCase(BaseUseCase):
    """Use case for removing a like; a no-op when not liked."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ProjectActionRequest) -> LikeResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        count = await self.project_service.unlike(
            ProjectId(UUID(request.project_id)), user
        )
        return LikeResponse(liked=False, likes_count=count)


class SaveProjectUseCase(BaseUseCase):
    """Use case for bookmarking a project."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ProjectActionRequest) -> SaveResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.project_service.save_project(ProjectId(UUID(request.project_id)), user)
        return SaveResponse(saved=True)


class UnsaveProjectUseCase(BaseUseCase):
    """Use case for removing a bookmark."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: ProjectActionRequest) -> SaveResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.project_service.unsave_project(
            ProjectId(UUID(request.project_id)), user
        )
        return SaveResponse(saved=False)
