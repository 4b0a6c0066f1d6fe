"""Unit tests for LoginUseCase."""

from dishka import AsyncContainer
import pytest

from folio.application.usecase.auth.get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from folio.application.usecase.auth.login import LoginRequest, LoginUseCase
from folio.domain.error import AccountStateError, AuthenticationError
from folio.domain.repository import UserRepository
from folio.domain.service import AnalyticsService, AuthService, ModerationService
from folio.domain.value import AccountState, ActivityAction
from tests.conftest import DEFAULT_PASSWORD, register_user, update_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_with_email(self, unit_env: AsyncContainer):
        """Login by email returns a token that resolves back to the user."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user = await register_user(auth_service, "ada")
        login = await unit_env.get(LoginUseCase)
        get_current_user = await unit_env.get(GetCurrentUserUseCase)

        # Act
        response = await login.execute(
            LoginRequest(identifier="ADA@example.com", password=DEFAULT_PASSWORD)
        )
        current = await get_current_user.execute(
            GetCurrentUserRequest(token=response.token)
        )

        # Assert
        assert response.user.id == str(user.id)
        assert current.username == "ada"

    @pytest.mark.asyncio
    async def test_login_with_username_logs_activity(self, unit_env: AsyncContainer):
        """Login by username is recorded in the activity log."""
        auth_service = await unit_env.get(AuthService)
        analytics_service = await unit_env.get(AnalyticsService)
        user = await register_user(auth_service, "grace")
        login = await unit_env.get(LoginUseCase)

        response = await login.execute(
            LoginRequest(identifier="grace", password=DEFAULT_PASSWORD)
        )
        entries, _ = await analytics_service.get_activity(
            user.id, limit=10, skip=0, action=ActivityAction.LOGIN
        )

        assert response.token
        assert len(entries) == 1

    @pytest.mark.asyncio
    async def test_wrong_password_is_rejected(self, unit_env: AsyncContainer):
        """A wrong password fails without revealing which part was wrong."""
        auth_service = await unit_env.get(AuthService)
        await register_user(auth_service, "linus")
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await login.execute(LoginRequest(identifier="linus", password="wrong-pass"))

    @pytest.mark.asyncio
    async def test_unknown_user_is_rejected(self, unit_env: AsyncContainer):
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await login.execute(
                LoginRequest(identifier="nobody", password=DEFAULT_PASSWORD)
            )

    @pytest.mark.asyncio
    async def test_banned_user_cannot_login(self, unit_env: AsyncContainer):
        """A banned account fails with its state and the ban reason."""
        auth_service = await unit_env.get(AuthService)
        moderation_service = await unit_env.get(ModerationService)
        user_repository = await unit_env.get(UserRepository)
        admin = await register_user(auth_service, "admin")
        admin = await update_user(user_repository, admin, is_admin=True)
        target = await register_user(auth_service, "spammer")
        await moderation_service.ban(admin, target.id, "Spam links")
        login = await unit_env.get(LoginUseCase)

        with pytest.raises(AccountStateError) as exc_info:
            await login.execute(
                LoginRequest(identifier="spammer", password=DEFAULT_PASSWORD)
            )

        assert exc_info.value.state == AccountState.BANNED
        assert exc_info.value.reason == "Spam links"
