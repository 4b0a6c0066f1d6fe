"""Integration test for LoginUseCase with real database.

This test demonstrates:
1. Using real PostgreSQL database via docker-compose
2. Running migrations before tests
3. Testing registration and login against real tables
4. Using the test harness with unmocked persistence
"""

from dishka import AsyncContainer
import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from folio.application.usecase.auth.login import LoginRequest, LoginUseCase
from folio.domain.error import AuthenticationError
from folio.domain.service import AnalyticsService, AuthService, JWTService
from folio.domain.value import ActivityAction
from tests.conftest import DEFAULT_PASSWORD, register_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)

    # CASCADE clears every table referencing users
    await session.execute(text("TRUNCATE TABLE users CASCADE"))
    await session.commit()

    yield


class TestLoginIntegration:
    """Integration tests for login flow with real database."""

    @pytest.mark.asyncio
    async def test_register_then_login_full_stack(
        self, integration_env: AsyncContainer
    ):
        """A registered user can log in by email and the login is logged."""
        # Arrange
        auth_service = await integration_env.get(AuthService)
        jwt_service = await integration_env.get(JWTService)
        analytics_service = await integration_env.get(AnalyticsService)
        user = await register_user(auth_service, "integration_user")
        use_case = await integration_env.get(LoginUseCase)

        # Act
        response = await use_case.execute(
            LoginRequest(
                identifier="Integration_User@example.com", password=DEFAULT_PASSWORD
            )
        )

        # Assert
        assert response.user.id == str(user.id)
        assert jwt_service.verify_token(response.token).user_id == str(user.id)
        _, total = await analytics_service.get_activity(
            user.id, limit=10, skip=0, action=ActivityAction.LOGIN
        )
        assert total == 1

    @pytest.mark.asyncio
    async def test_wrong_password_rejected(self, integration_env: AsyncContainer):
        auth_service = await integration_env.get(AuthService)
        await register_user(auth_service, "integration_user")
        use_case = await integration_env.get(LoginUseCase)

        with pytest.raises(AuthenticationError):
            await use_case.execute(
                LoginRequest(identifier="integration_user", password="wrong-pass")
            )
