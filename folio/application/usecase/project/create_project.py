"""Create project use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ProjectInfo, project_info
from folio.domain.service import ProjectService, UserService
from folio.domain.value import ProjectVisibility, UserId


class CreateProjectRequest(BaseModel):
    """Create project request."""

    owner_id: str
    title: str
    slug: str | None = None
    description: str | None = None
    live_url: str | None = None
    repo_url: str | None = None
    tags: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    visibility: ProjectVisibility = ProjectVisibility.PUBLIC


class CreateProjectUseCase(BaseUseCase):
    """Use case for publishing a project."""

    def __init__(
        self, project_service: ProjectService, user_service: UserService
    ) -> None:
        """Initialize create project use case.

        Args:
            project_service: Project domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.user_service = user_service

    async def execute(self, request: CreateProjectRequest) -> ProjectInfo:
        """Execute create project flow.

        Raises:
            BusinessRuleViolationError: If an explicit slug is taken
        """
        owner = await self.user_service.get_by_id(UserId(UUID(request.owner_id)))
        project = await self.project_service.create(
            owner,
            title=request.title,
            slug=request.slug,
            description=request.description,
            live_url=request.live_url,
            repo_url=request.repo_url,
            tags=request.tags,
            images=request.images,
            visibility=request.visibility,
        )
        return project_info(project, 0, owner)
