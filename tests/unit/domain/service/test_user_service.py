"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from folio.domain.error import NotFoundError
from folio.domain.service import AuthService, UserService
from folio.domain.value import UserId
from tests.conftest import register_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetUser:
    """Tests for get_by_id and get_by_username."""

    @pytest.mark.asyncio
    async def test_get_by_id(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)
        user_service = await unit_env.get(UserService)
        user = await register_user(auth_service, "maker")

        # Act
        found = await user_service.get_by_id(user.id)

        # Assert
        assert found.id == user.id
        assert found.username.root == "maker"

    @pytest.mark.asyncio
    async def test_get_by_id_unknown_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_id(UserId(uuid4()))

    @pytest.mark.asyncio
    async def test_malformed_username_is_not_found(self, unit_env):
        """Invalid handles never reach the repository."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.get_by_username("no spaces allowed")


class TestFindByLogin:
    """Tests for find_by_login."""

    @pytest.mark.asyncio
    async def test_email_or_username(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user_service = await unit_env.get(UserService)
        user = await register_user(auth_service, "maker")

        by_email = await user_service.find_by_login(" MAKER@example.com ")
        by_username = await user_service.find_by_login("maker")

        assert by_email is not None and by_email.id == user.id
        assert by_username is not None and by_username.id == user.id

    @pytest.mark.asyncio
    async def test_unknown_returns_none(self, unit_env):
        user_service = await unit_env.get(UserService)

        assert await user_service.find_by_login("ghost") is None
        assert await user_service.find_by_login("x") is None


class TestSearch:
    """Tests for search."""

    @pytest.mark.asyncio
    async def test_search_pages_results(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        user_service = await unit_env.get(UserService)
        for username in ("maker_a", "maker_b", "maker_c", "painter"):
            await register_user(auth_service, username)

        first, total = await user_service.search("maker", page=1, limit=2)
        second, _ = await user_service.search("maker", page=2, limit=2)

        assert total == 3
        assert [u.username.root for u in first] == ["maker_a", "maker_b"]
        assert [u.username.root for u in second] == ["maker_c"]
