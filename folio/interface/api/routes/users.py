"""User profile routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, Query

from folio.application.usecase.auth import (
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    SetAvatarRequest,
    SetAvatarUseCase,
)
from folio.application.usecase.common import ApiModel
from folio.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    SearchUsersRequest,
    SearchUsersResponse,
    SearchUsersUseCase,
)
from folio.interface.api.auth import optional_user, require_user

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class AvatarAPIRequest(ApiModel):
    """API request for setting the avatar."""

    avatar_url: str


@router.post("/avatar", response_model=GetCurrentUserResponse)
async def set_avatar(
    request: AvatarAPIRequest,
    set_avatar_use_case: FromDishka[SetAvatarUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Set the signed-in user's avatar URL."""
    user = await require_user(authorization, get_current_user_use_case)
    return await set_avatar_use_case.execute(
        SetAvatarRequest(user_id=user.id, avatar_url=request.avatar_url)
    )


@router.delete("/avatar", response_model=GetCurrentUserResponse)
async def delete_avatar(
    set_avatar_use_case: FromDishka[SetAvatarUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Remove the signed-in user's avatar."""
    user = await require_user(authorization, get_current_user_use_case)
    return await set_avatar_use_case.execute(
        SetAvatarRequest(user_id=user.id, avatar_url=None)
    )


@router.get("/search", response_model=SearchUsersResponse)
async def search_users(
    search_users_use_case: FromDishka[SearchUsersUseCase],
    q: str = Query(default=""),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=50),
) -> SearchUsersResponse:
    """Search active users by username or name."""
    return await search_users_use_case.execute(
        SearchUsersRequest(query=q, page=page, limit=limit)
    )


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    authorization: str | None = Header(default=None),
) -> GetUserProfileResponse:
    """Get a user's profile with the projects the viewer may see.

    Args:
        username: Username of the profile owner
        get_user_profile_use_case: Profile use case from DI
        get_current_user_use_case: Get current user use case from DI
        authorization: Optional bearer token

    Returns:
        Profile, visible projects and the viewer's relationship

    Raises:
        NotFoundError: If the user does not exist or was deleted
    """
    viewer = await optional_user(authorization, get_current_user_use_case)
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(
            username=username, viewer_id=viewer.id if viewer else None
        )
    )
