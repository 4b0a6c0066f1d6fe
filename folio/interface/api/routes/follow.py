"""Follow, block and privacy routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header

from folio.application.usecase.auth import GetCurrentUserUseCase
from folio.application.usecase.auth.get_current_user import PrivacyInfo
from folio.application.usecase.common import (
    ApiModel,
    RelationshipInfo,
    SuccessResponse,
)
from folio.application.usecase.follow import (
    AcceptFollowRequestUseCase,
    BlockUserUseCase,
    FollowListRequest,
    FollowResponse,
    FollowUserUseCase,
    GetRelationshipUseCase,
    ListBlockedUseCase,
    ListFollowersUseCase,
    ListFollowingUseCase,
    ListFollowRequestsUseCase,
    RejectFollowRequestUseCase,
    RemoveFollowerUseCase,
    UnblockUserUseCase,
    UnfollowUserUseCase,
    UpdatePrivacyRequest,
    UpdatePrivacyUseCase,
    UserActionRequest,
    UserListRequest,
    UserListResponse,
)
from folio.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/follow", tags=["follow"], route_class=DishkaRoute)


class PrivacyAPIRequest(ApiModel):
    """API request for changing privacy flags. Omitted flags keep their value."""

    is_private: bool | None = None
    show_followers: bool | None = None
    show_following: bool | None = None
    allow_follow_requests: bool | None = None


@router.get("/requests", response_model=UserListResponse)
async def list_follow_requests(
    list_follow_requests_use_case: FromDishka[ListFollowRequestsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserListResponse:
    """List users waiting for the signed-in user to accept their follow request."""
    user = await require_user(authorization, get_current_user_use_case)
    return await list_follow_requests_use_case.execute(
        UserListRequest(user_id=user.id)
    )


@router.get("/blocked", response_model=UserListResponse)
async def list_blocked(
    list_blocked_use_case: FromDishka[ListBlockedUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserListResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await list_blocked_use_case.execute(UserListRequest(user_id=user.id))


@router.put("/privacy", response_model=PrivacyInfo)
async def update_privacy(
    request: PrivacyAPIRequest,
    update_privacy_use_case: FromDishka[UpdatePrivacyUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> PrivacyInfo:
    """Update the signed-in user's privacy flags."""
    user = await require_user(authorization, get_current_user_use_case)
    return await update_privacy_use_case.execute(
        UpdatePrivacyRequest(user_id=user.id, **request.model_dump())
    )


@router.post("/{user_id}/follow", response_model=FollowResponse)
async def follow_user(
    user_id: UUID,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> FollowResponse:
    """Follow a user, or send a request when the account is private.

    Args:
        user_id: User to follow
        follow_user_use_case: Follow use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Bearer token

    Returns:
        ``following`` or ``pending`` with a message

    Raises:
        ValidationError: When following yourself
        PermissionDeniedError: If either user blocked the other
        BusinessRuleViolationError: If already following or requested
    """
    user = await require_user(authorization, get_current_user_use_case)
    return await follow_user_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.delete("/{user_id}/unfollow", response_model=SuccessResponse)
async def unfollow_user(
    user_id: UUID,
    unfollow_user_use_case: FromDishka[UnfollowUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Stop following a user, or withdraw a pending request."""
    user = await require_user(authorization, get_current_user_use_case)
    return await unfollow_user_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.delete("/{user_id}/remove-follower", response_model=SuccessResponse)
async def remove_follower(
    user_id: UUID,
    remove_follower_use_case: FromDishka[RemoveFollowerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await remove_follower_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.post("/{user_id}/accept-request", response_model=SuccessResponse)
async def accept_follow_request(
    user_id: UUID,
    accept_follow_request_use_case: FromDishka[AcceptFollowRequestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Accept a follow request sent by ``user_id``."""
    user = await require_user(authorization, get_current_user_use_case)
    return await accept_follow_request_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.post("/{user_id}/reject-request", response_model=SuccessResponse)
async def reject_follow_request(
    user_id: UUID,
    reject_follow_request_use_case: FromDishka[RejectFollowRequestUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await reject_follow_request_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.post("/{user_id}/block", response_model=SuccessResponse)
async def block_user(
    user_id: UUID,
    block_user_use_case: FromDishka[BlockUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    """Block a user. Follows and requests between the two are removed."""
    user = await require_user(authorization, get_current_user_use_case)
    return await block_user_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.delete("/{user_id}/unblock", response_model=SuccessResponse)
async def unblock_user(
    user_id: UUID,
    unblock_user_use_case: FromDishka[UnblockUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> SuccessResponse:
    user = await require_user(authorization, get_current_user_use_case)
    return await unblock_user_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )


@router.get("/{user_id}/followers", response_model=UserListResponse)
async def list_followers(
    user_id: UUID,
    list_followers_use_case: FromDishka[ListFollowersUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserListResponse:
    """List a user's followers.

    Raises:
        PermissionDeniedError: If the owner hides the list from this viewer
    """
    viewer = await optional_user(authorization, get_current_user_use_case)
    return await list_followers_use_case.execute(
        FollowListRequest(
            target_id=str(user_id), viewer_id=viewer.id if viewer else None
        )
    )


@router.get("/{user_id}/following", response_model=UserListResponse)
async def list_following(
    user_id: UUID,
    list_following_use_case: FromDishka[ListFollowingUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> UserListResponse:
    """List the users someone follows."""
    viewer = await optional_user(authorization, get_current_user_use_case)
    return await list_following_use_case.execute(
        FollowListRequest(
            target_id=str(user_id), viewer_id=viewer.id if viewer else None
        )
    )


@router.get("/{user_id}/relationship", response_model=RelationshipInfo)
async def get_relationship(
    user_id: UUID,
    get_relationship_use_case: FromDishka[GetRelationshipUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> RelationshipInfo:
    """What the signed-in user can see and do with ``user_id``."""
    user = await require_user(authorization, get_current_user_use_case)
    return await get_relationship_use_case.execute(
        UserActionRequest(user_id=user.id, target_id=str(user_id))
    )
