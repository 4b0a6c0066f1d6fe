"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentInfo
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .like_comment import (
    CommentLikeRequest,
    CommentLikeResponse,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentInfo",
    "CommentLikeRequest",
    "CommentLikeResponse",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "LikeCommentUseCase",
    "UnlikeCommentUseCase",
]
