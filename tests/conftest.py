"""Test configuration and fixtures."""

import os
from uuid import UUID

import logfire

# Settings are read from the environment when the app module is imported
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

logfire.configure(send_to_logfire=False, console=False)

from folio.domain.model import User  # noqa: E402
from folio.domain.repository import UserRepository  # noqa: E402
from folio.domain.service import AuthService  # noqa: E402
from folio.domain.value import UserId  # noqa: E402

DEFAULT_PASSWORD = "secret123"


async def register_user(
    auth_service: AuthService, username: str, password: str = DEFAULT_PASSWORD
) -> User:
    """Register a user with a derived email and display name."""
    return await auth_service.register(
        username=username,
        email=f"{username}@example.com",
        name=username.title(),
        password=password,
    )


async def update_user(user_repository: UserRepository, user: User, **fields) -> User:
    """Persist changed fields on a user, e.g. ``is_admin=True``."""
    return await user_repository.save(user.model_copy(update=fields))


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def api_register(client, username: str, password: str = DEFAULT_PASSWORD) -> dict:
    """Register through the HTTP API and return the ``{token, user}`` body."""
    response = client.post(
        "/auth/register",
        json={
            "username": username,
            "email": f"{username}@example.com",
            "name": username.title(),
            "password": password,
        },
    )
    assert response.status_code == 201, response.text
    return response.json()


def promote_to_admin(client, user_id: str) -> None:
    """Grant admin rights directly in the app's store."""
    container = client.app.state.dishka_container

    async def _promote():
        async with container() as request_container:
            user_repository = await request_container.get(UserRepository)
            user = await user_repository.find_by_id(UserId(UUID(user_id)))
            await user_repository.save(user.model_copy(update={"is_admin": True}))

    client.portal.call(_promote)
