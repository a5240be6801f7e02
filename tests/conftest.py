"""Test configuration and fixtures."""

import pytest

from eco.config import AuthSettings, Settings
from eco.util.jwt import create_token


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings matching the ones the test container loads."""
    return Settings().auth


@pytest.fixture
def make_token(auth_settings):
    """Issue a JWT for a user, as the external auth service would."""

    def _make_token(user_id, username: str = "greenie") -> str:
        return create_token(str(user_id), username, auth_settings)

    return _make_token
