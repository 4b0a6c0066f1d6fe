"""Unit tests for UpdateProfileUseCase."""

import pytest

from folio.application.usecase.auth.update_profile import (
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from folio.domain.error import BusinessRuleViolationError
from folio.domain.service import AuthService, JWTService
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUpdateProfileUseCase:
    """Tests for UpdateProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_bio(self, unit_env):
        """Should update bio and keep the current token."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user = await register_user(auth_service, "tinkerer")
        use_case = await unit_env.get(UpdateProfileUseCase)

        # Act
        response = await use_case.execute(
            UpdateProfileRequest(user_id=str(user.id), bio="I build synths")
        )

        # Assert
        assert response.user.bio == "I build synths"
        assert response.user.username == "tinkerer"
        assert response.token is None

    @pytest.mark.asyncio
    async def test_rename_issues_new_token(self, unit_env):
        """The token carries the username, so a rename needs a new one."""
        auth_service = await unit_env.get(AuthService)
        jwt_service = await unit_env.get(JWTService)
        user = await register_user(auth_service, "tinkerer")
        use_case = await unit_env.get(UpdateProfileUseCase)

        response = await use_case.execute(
            UpdateProfileRequest(user_id=str(user.id), username="synthmaker")
        )

        assert response.user.username == "synthmaker"
        assert response.token is not None
        assert jwt_service.verify_token(response.token).username == "synthmaker"

    @pytest.mark.asyncio
    async def test_taken_username_is_rejected(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await register_user(auth_service, "tinkerer")
        await register_user(auth_service, "taken")
        use_case = await unit_env.get(UpdateProfileUseCase)

        with pytest.raises(BusinessRuleViolationError):
            await use_case.execute(
                UpdateProfileRequest(user_id=str(user.id), username="taken")
            )

    @pytest.mark.asyncio
    async def test_email_is_normalized(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user = await register_user(auth_service, "tinkerer")
        use_case = await unit_env.get(UpdateProfileUseCase)

        response = await use_case.execute(
            UpdateProfileRequest(user_id=str(user.id), email="  New@Example.COM ")
        )

        assert response.user.email == "new@example.com"
