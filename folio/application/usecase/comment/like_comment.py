"""Comment like use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.domain.service import CommentService, UserService
from folio.domain.value import CommentId, ProjectId, UserId


class CommentLikeRequest(BaseModel):
    """Like or unlike a comment."""

    project_id: str
    comment_id: str
    user_id: str


class CommentLikeResponse(ApiModel):
    """Like state after the change."""

    liked: bool
    likes_count: int


class LikeCommentUseCase(BaseUseCase):
    """Use case for liking a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CommentLikeRequest) -> CommentLikeResponse:
        """Like a comment.

        Raises:
            NotFoundError: If the project or comment does not exist
            BusinessRuleViolationError: If the comment is already liked
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        count = await self.comment_service.like(
            ProjectId(UUID(request.project_id)),
            CommentId(UUID(request.comment_id)),
            user,
        )
        return CommentLikeResponse(liked=True, likes_count=count)


class UnlikeCommentUseCase(BaseUseCase):
    """Use case for removing a like from a comment."""

    def __init__(
        self, comment_service: CommentService, user_service: UserService
    ) -> None:
        self.comment_service = comment_service
        self.user_service = user_service

    async def execute(self, request: CommentLikeRequest) -> CommentLikeResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        count = await self.comment_service.unlike(
            ProjectId(UUID(request.project_id)),
            CommentId(UUID(request.comment_id)),
            user,
        )
        return CommentLikeResponse(liked=False, likes_count=count)
