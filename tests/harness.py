"""Test harness for unit, integration and E2E tests.

Settings are loaded from environment variables (see tests/conftest.py).
"""

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from folio.interface.api.app import create_app
from folio.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access

    Every request-scoped container opened from the same test container
    shares one in-memory store.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - in-memory persistence, no docker needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_register(unit_env):
            auth_service = await unit_env.get(AuthService)
            user = await auth_service.register(...)
            assert user.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for a TestClient fixture serving the app from a test container.

    Each test gets a fresh container, so data never leaks between tests.
    """

    @pytest.fixture
    def _client():
        container = build_test_container(unmock=unmock or set())
        with TestClient(create_app(container)) as client:
            yield client

    return _client
