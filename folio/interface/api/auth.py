"""Bearer token handling for routes."""

import logfire

from folio.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from folio.domain.error import AccountStateError, AuthenticationError
from folio.util.jwt import JWTError


def bearer_token(authorization: str | None) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


async def require_user(
    authorization: str | None, use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse:
    """Resolve the signed-in user.

    Raises:
        AuthenticationError: If no token is sent or its user is gone
        JWTError: If the token is invalid or expired
        AccountStateError: If the account is deleted, banned or suspended
    """
    token = bearer_token(authorization)
    if not token:
        raise AuthenticationError("Authentication required")
    return await use_case.execute(GetCurrentUserRequest(token=token))


async def optional_user(
    authorization: str | None, use_case: GetCurrentUserUseCase
) -> GetCurrentUserResponse | None:
    """Resolve the signed-in user if there is one.

    Invalid or expired tokens, and tokens of suspended, banned or deleted
    accounts, are treated as anonymous access.
    """
    token = bearer_token(authorization)
    if not token:
        return None
    try:
        return await use_case.execute(GetCurrentUserRequest(token=token))
    except (JWTError, AuthenticationError, AccountStateError) as e:
        logfire.debug("Token rejected, treating as anonymous", error=str(e))
        return None
