"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.domain.error import AuthenticationError, NotFoundError
from folio.domain.model import User
from folio.domain.service import AuthService, JWTService, UserService
from folio.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class PrivacyInfo(ApiModel):
    """Privacy flags of the current user."""

    is_private: bool
    show_followers: bool
    show_following: bool
    allow_follow_requests: bool


class GetCurrentUserResponse(ApiModel):
    """Get current user response."""

    id: str
    username: str
    email: str
    name: str
    bio: str | None
    avatar_url: str | None
    is_admin: bool
    privacy: PrivacyInfo
    created_at: datetime


def current_user_response(user: User) -> GetCurrentUserResponse:
    return GetCurrentUserResponse(
        id=str(user.id),
        username=user.username.root,
        email=user.email,
        name=user.name,
        bio=user.bio,
        avatar_url=user.avatar_url,
        is_admin=user.is_admin,
        privacy=PrivacyInfo(**user.privacy.model_dump()),
        created_at=user.created_at,
    )


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for resolving the authenticated user from a token."""

    def __init__(
        self,
        jwt_service: JWTService,
        user_service: UserService,
        auth_service: AuthService,
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
            auth_service: Authentication domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service
        self.auth_service = auth_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load user from database
        3. Reject deleted, banned and suspended accounts

        Raises:
            JWTError: If token is invalid or expired
            AuthenticationError: If the user no longer exists
            AccountStateError: If the account is blocked
        """
        payload = self.jwt_service.verify_token(request.token)

        try:
            user = await self.user_service.get_by_id(UserId(UUID(payload.user_id)))
        except NotFoundError:
            raise AuthenticationError("User no longer exists")

        self.auth_service.ensure_active(user)
        return current_user_response(user)
