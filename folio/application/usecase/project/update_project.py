"""Update and delete project use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ProjectInfo, SuccessResponse, project_info
from folio.domain.service import ProjectService, UserService
from folio.domain.value import ProjectId, ProjectVisibility, UserId


class UpdateProjectRequest(BaseModel):
    """Update project request. Unset fields are left unchanged."""

    project_id: str
    user_id: str
    title: str | None = None
    slug: str | None = None
    description: str | None = None
    live_url: str | None = None
    repo_url: str | None = None
    tags: list[str] | None = None
    images: list[str] | None = None
    visibility: ProjectVisibility | None = None


class UpdateProjectUseCase(BaseUseCase):
    """Use case for editing a project as owner or editor."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: UpdateProjectRequest) -> ProjectInfo:
        """Execute update project flow.

        Raises:
            NotFoundError: If the project does not exist
            NotAuthorizedError: If the user may not make this change
            BusinessRuleViolationError: If the new slug is taken
        """
        editor = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        fields = request.model_dump(exclude={"project_id", "user_id"}, exclude_unset=True)
        project = await self.project_service.update(
            ProjectId(UUID(request.project_id)), editor, **fields
        )
        likes = await self.project_service.likes_count([project.id])
        owner = await self.user_service.get_by_id(project.owner_id)
        return project_info(project, likes.get(project.id, 0), owner)


class DeleteProjectRequest(BaseModel):
    """Delete project request."""

    project_id: str
    user_id: str


class DeleteProjectUseCase(BaseUseCase):
    """Use case for deleting a project as its owner or an admin."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: DeleteProjectRequest) -> SuccessResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.project_service.delete(ProjectId(UUID(request.project_id)), user)
        return SuccessResponse(message="Project deleted")
