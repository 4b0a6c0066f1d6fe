"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import SuccessResponse
from folio.domain.service import CommentService, UserService
from folio.domain.value import CommentId, ProjectId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    project_id: str
    comment_id: str
    user_id: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment as author, project owner or admin."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: DeleteCommentRequest) -> SuccessResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.comment_service.delete(
            ProjectId(UUID(request.project_id)),
            CommentId(UUID(request.comment_id)),
            user,
        )
        return SuccessResponse(message="Comment deleted")
