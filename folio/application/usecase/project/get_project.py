"""Get project use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.comment import CommentInfo
from folio.application.usecase.comment.add_comment import comment_info
from folio.application.usecase.common import ApiModel, ProjectInfo, project_info
from folio.domain.service import CommentService, ProjectService, UserService
from folio.domain.value import ProjectId, UserId


class GetProjectRequest(BaseModel):
    """Get project request."""

    project_id: str
    viewer_id: str | None = None


class GetProjectResponse(ApiModel):
    """Project detail with comments and the viewer's state."""

    project: ProjectInfo
    comments: list[CommentInfo]
    liked_by_me: bool
    can_edit: bool


class GetProjectUseCase(BaseUseCase):
    """Use case for opening a project page."""

    def __init__(
        self,
        project_service: ProjectService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> None:
        """Initialize get project use case.

        Args:
            project_service: Project domain service
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.project_service = project_service
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: GetProjectRequest) -> GetProjectResponse:
        """Execute get project flow.

        Steps:
        1. Check visibility and count the view
        2. Load comments with their authors and like counts
        3. Report whether the viewer liked or may edit the project

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the viewer may not see it
        """
        viewer = (
            await self.user_service.get_by_id(UserId(UUID(request.viewer_id)))
            if request.viewer_id
            else None
        )
        project = await self.project_service.view(
            ProjectId(UUID(request.project_id)), viewer
        )

        comments = await self.comment_service.list_for_project(project.id)
        users = await self.user_service.get_many(
            list({project.owner_id, *(c.author_id for c in comments)})
        )
        comment_likes = await self.comment_service.likes_count([c.id for c in comments])
        likes = await self.project_service.likes_count([project.id])

        return GetProjectResponse(
            project=project_info(
                project, likes.get(project.id, 0), users.get(project.owner_id)
            ),
            comments=[
                comment_info(c, users.get(c.author_id), comment_likes.get(c.id, 0))
                for c in comments
            ],
            liked_by_me=(
                await self.project_service.has_liked(project.id, viewer.id)
                if viewer
                else False
            ),
            can_edit=(
                await self.project_service.can_edit(project, viewer) if viewer else False
            ),
        )
