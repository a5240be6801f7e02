"""Test harness for unit and integration tests.

Unit tests need nothing running. Integration tests that unmock persistence
expect a PostgreSQL database at DATABASE__URL.
"""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from typing import TypeVar

import pytest_asyncio
from dishka import AsyncContainer
from fastapi.testclient import TestClient

from eco.domain.model import User
from eco.domain.repository import TransactionManager, UserRepository
from eco.interface.api.app import create_app
from eco.util.di import Component
from tests.di import build_test_container

T = TypeVar("T")


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
        # Unit tests - in-memory repositories, frozen clock
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_log_actions(unit_env):
            service = await unit_env.get(ActionService)
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


def create_client(container: AsyncContainer | None = None) -> TestClient:
    """Build a TestClient over an app wired to a test container.

    Enter it with ``with`` so the lifespan runs (badges are seeded) and the
    client's portal is available to ``call_container``.
    """
    return TestClient(create_app(container or build_test_container()))


def call_container(client: TestClient, func: Callable[[AsyncContainer], Awaitable[T]]) -> T:
    """Run ``func`` against the app's container on the app's event loop.

    Used by end-to-end tests to seed users or move the frozen clock.
    """
    container: AsyncContainer = client.app.state.dishka_container
    return client.portal.call(func, container)


def save_user(client: TestClient, user: User) -> User:
    """Store a user directly, as registration would."""

    async def _save(container: AsyncContainer) -> User:
        user_repository = await container.get(UserRepository)
        return await user_repository.save(user)

    return call_container(client, _save)


class RecordingTransactionManager(TransactionManager):
    """No-op savepoints that remember the exceptions raised inside them."""

    def __init__(self) -> None:
        self.entered = 0
        self.failures: list[Exception] = []

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        self.entered += 1
        try:
            yield
        except Exception as e:
            self.failures.append(e)
            raise
