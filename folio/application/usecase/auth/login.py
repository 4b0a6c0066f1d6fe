"""Login use case."""

import logfire
from pydantic import BaseModel

from folio.application.usecase.auth.get_current_user import current_user_response
from folio.application.usecase.auth.register import AuthResponse
from folio.application.usecase.base import BaseUseCase
from folio.domain.service import AnalyticsService, AuthService, JWTService
from folio.domain.value import ActivityAction


class LoginRequest(BaseModel):
    """Login request.

    ``identifier`` is an email address or a username.
    """

    identifier: str
    password: str


class LoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        analytics_service: AnalyticsService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
            jwt_service: JWT token domain service
            analytics_service: Activity log
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.analytics_service = analytics_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Steps:
        1. Check credentials and account state
        2. Record the login in the activity log
        3. Issue a JWT token

        Raises:
            AuthenticationError: If the credentials are wrong
            AccountStateError: If the account is deleted, banned or suspended
        """
        user = await self.auth_service.authenticate(
            request.identifier, request.password
        )
        await self.analytics_service.log_activity(user.id, ActivityAction.LOGIN)

        token = self.jwt_service.create_token(str(user.id), user.username.root)
        logfire.info("Login successful", user_id=str(user.id))
        return AuthResponse(token=token, user=current_user_response(user))
