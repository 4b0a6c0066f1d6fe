"""Register use case."""

from pydantic import BaseModel

from folio.application.usecase.auth.get_current_user import (
    GetCurrentUserResponse,
    current_user_response,
)
from folio.application.usecase.base import BaseUseCase
from folio.application.usecase.common import ApiModel
from folio.domain.service import AuthService, JWTService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    name: str
    password: str


class AuthResponse(ApiModel):
    """Token and profile returned after register or login."""

    token: str
    user: GetCurrentUserResponse


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing in."""

    def __init__(self, auth_service: AuthService, jwt_service: JWTService) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Register a user and issue a token.

        Raises:
            ValidationError: If username or password are malformed
            BusinessRuleViolationError: If username or email is taken
        """
        user = await self.auth_service.register(
            username=request.username,
            email=request.email,
            name=request.name,
            password=request.password,
        )
        token = self.jwt_service.create_token(str(user.id), user.username.root)
        return AuthResponse(token=token, user=current_user_response(user))
