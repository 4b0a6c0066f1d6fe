"""Profile update use cases."""

from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.auth.get_current_user import (
    GetCurrentUserResponse,
    current_user_response,
)
from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel, SuccessResponse
from folio.domain.service import AnalyticsService, AuthService, JWTService, UserService
from folio.domain.value import ActivityAction, UserId


class UpdateProfileRequest(BaseModel):
    """Update profile request. Unset fields are left unchanged."""

    user_id: str
    username: str | None = None
    email: str | None = None
    name: str | None = None
    bio: str | None = None


class UpdateProfileResponse(ApiModel):
    """Updated profile, with a fresh token when the username changed."""

    user: GetCurrentUserResponse
    token: str | None = None


class UpdateProfileUseCase(BaseUseCase):
    """Use case for editing the caller's profile."""

    def __init__(
        self,
        user_service: UserService,
        auth_service: AuthService,
        jwt_service: JWTService,
        analytics_service: AnalyticsService,
    ) -> None:
        self.user_service = user_service
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.analytics_service = analytics_service

    async def execute(self, request: UpdateProfileRequest) -> UpdateProfileResponse:
        """Update the profile.

        The token carries the username, so a new one is issued on rename.

        Raises:
            BusinessRuleViolationError: If the new username or email is taken
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        updated = await self.auth_service.update_profile(
            user,
            username=request.username,
            email=request.email,
            name=request.name,
            bio=request.bio,
        )
        await self.analytics_service.log_activity(
            user.id, ActivityAction.PROFILE_UPDATED
        )

        token = None
        if updated.username != user.username:
            token = self.jwt_service.create_token(
                str(updated.id), updated.username.root
            )
        return UpdateProfileResponse(user=current_user_response(updated), token=token)


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str
    current_password: str
    new_password: str


class ChangePasswordUseCase(BaseUseCase):
    """Use case for changing the caller's password."""

    def __init__(
        self,
        user_service: UserService,
        auth_service: AuthService,
        analytics_service: AnalyticsService,
    ) -> None:
        self.user_service = user_service
        self.auth_service = auth_service
        self.analytics_service = analytics_service

    async def execute(self, request: ChangePasswordRequest) -> SuccessResponse:
        """Change the password.

        Raises:
            AuthenticationError: If the current password is wrong
            ValidationError: If the new password is malformed
        """
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        await self.auth_service.change_password(
            user, request.current_password, request.new_password
        )
        await self.analytics_service.log_activity(
            user.id, ActivityAction.PASSWORD_CHANGED
        )
        return SuccessResponse(message="Password updated")


class SetAvatarRequest(BaseModel):
    """Set avatar request; ``avatar_url`` of None removes the avatar."""

    user_id: str
    avatar_url: str | None = None


class SetAvatarUseCase(BaseUseCase):
    """Use case for setting or removing the caller's avatar."""

    def __init__(self, user_service: UserService, auth_service: AuthService) -> None:
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: SetAvatarRequest) -> GetCurrentUserResponse:
        user = await self.user_service.get_by_id(UserId(UUID(request.user_id)))
        updated = await self.auth_service.set_avatar(user, request.avatar_url)
        return current_user_response(updated)
