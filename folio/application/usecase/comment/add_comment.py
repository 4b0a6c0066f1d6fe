"""Add comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, UserSummary, user_summary
from folio.domain.model import Comment, User
from folio.domain.service import CommentService, UserService
from folio.domain.value import ProjectId, UserId


class CommentInfo(ApiModel):
    """Comment with its author and like count."""

    id: str
    project_id: str
    text: str
    author: UserSummary | None
    likes_count: int
    created_at: datetime


def comment_info(
    comment: Comment, author: User | None, likes_count: int = 0
) -> CommentInfo:
    return CommentInfo(
        id=str(comment.id),
        project_id=str(comment.project_id),
        text=comment.text,
        author=user_summary(author) if author else None,
        likes_count=likes_count,
        created_at=comment.created_at,
    )


class AddCommentRequest(BaseModel):
    """Add comment request."""

    project_id: str
    author_id: str
    text: str


class AddCommentUseCase(BaseUseCase):
    """Use case for commenting on a project."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: AddCommentRequest) -> CommentInfo:
        """Execute add comment flow.

        Raises:
            NotFoundError: If the project does not exist
            PermissionDeniedError: If the author may not see the project
        """
        author = await self.user_service.get_by_id(UserId(UUID(request.author_id)))
        comment = await self.comment_service.add(
            ProjectId(UUID(request.project_id)), author, request.text
        )
        return comment_info(comment, author)
