"""Test container builder with selective unmocking."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from eco.util.di import PROVIDERS, Component, get_provider, is_mockable, mockable_components


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container that mocks every mockable component not in ``unmock``.

    Settings are loaded from environment variables.

    Args:
        unmock: Components to use production implementations for

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory repositories, frozen clock
        container = build_test_container()

        # Integration tests - real PostgreSQL, frozen clock
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_mockable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]

    # FastapiProvider lets the same container back a TestClient
    return make_async_container(*providers, FastapiProvider())
