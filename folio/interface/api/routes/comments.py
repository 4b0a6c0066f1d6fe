"""Comment routes, nested under projects."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel, Field

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentInfo,
    CommentLikeRequest,
    CommentLikeResponse,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from folio.application.usecase.common import SuccessResponse
from folio.interface.api.auth import require_user

router = APIRouter(prefix="/projects", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a project."""

    text: str = Field(min_length=1, max_length=2000)


@router.post(
    "/{project_id}/comments",
    response_model=CommentInfo,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    project_id: UUID,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CommentInfo:
    """Comment on a project.

    Args:
        project_id: Project UUID
        request: Comment text
        add_comment_use_case: Add comment use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer token

    Returns:
        The created comment

    Raises:
        NotFoundError: If the project does not exist
        NotAuthorizedError: If the user may not see the project
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await add_comment_use_case.execute(
        AddCommentRequest(
            project_id=str(project_id), author_id=user.id, text=request.text
        )
    )


@router.delete("/{project_id}/comments/{comment_id}", response_model=SuccessResponse)
async def delete_comment(
    project_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Delete a comment. Allowed for its author and the project owner."""
    user = await require_user(authorization, get_current_user_use_case)
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(
            project_id=str(project_id), comment_id=str(comment_id), user_id=user.id
        )
    )


@router.post(
    "/{project_id}/comments/{comment_id}/like", response_model=CommentLikeResponse
)
async def like_comment(
    project_id: UUID,
    comment_id: UUID,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CommentLikeResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await like_comment_use_case.execute(
        CommentLikeRequest(
            project_id=str(project_id), comment_id=str(comment_id), user_id=user.id
        )
    )


@router.delete(
    "/{project_id}/comments/{comment_id}/like", response_model=CommentLikeResponse
)
async def unlike_comment(
    project_id: UUID,
    comment_id: UUID,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> CommentLikeResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await unlike_comment_use_case.execute(
        CommentLikeRequest(
            project_id=str(project_id), comment_id=str(comment_id), user_id=user.id
        )
    )
