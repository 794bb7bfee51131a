"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest
import pytest_asyncio

from forum.domain.model import User
from forum.domain.service import JWTService, UserService
from forum.interface.api.app import create_app
from forum.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_vote(unit_env):
            service = await unit_env.get(VoteService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_test_app(
    unmock: set[Component] | None = None,
) -> tuple[FastAPI, AsyncContainer]:
    """Build an app served by a test container.

    Returns:
        The app and its container, for seeding data through services
    """
    container = build_test_container(unmock=unmock or set())
    return create_app(container), container


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for E2E fixtures yielding a TestClient and its container.

    The container is APP-scoped, so data written through it (for seeding)
    is visible to requests made with the client.

    Usage:
        api = create_client_fixture()

        def test_health(api):
            client, container = api
            assert client.get("/health").status_code == 200
    """

    @pytest.fixture
    def _client():
        app, container = create_test_app(unmock)
        with TestClient(app) as client:
            yield client, container
            client.portal.call(container.close)

    return _client


def register_user(
    client: TestClient,
    container: AsyncContainer,
    username: str = "trader_joe",
    is_admin: bool = False,
) -> tuple[User, dict[str, str]]:
    """Create a user through the services and return auth headers for them."""

    async def _register() -> tuple[User, str]:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            jwt_service = await request_container.get(JWTService)
            user = await user_service.create_user(username)
            if is_admin:
                user = await user_service.grant_admin(username)
            return user, jwt_service.create_token(str(user.id), user.username.root)

    user, token = client.portal.call(_register)
    return user, {"Authorization": f"Bearer {token}"}
