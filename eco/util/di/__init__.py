"""Dependency injection module.

Providers come in two kinds:

- Concrete providers (config, domain, application, realtime) are used as-is.
- Mockable components (clock, persistence) are an empty base class with a
  production and a mock subclass; ``get_provider`` picks one of them.
"""

from typing import Type

from eco.util.di.application import ProdApplicationProvider
from eco.util.di.base import Component, ProviderBase
from eco.util.di.core import ProdConfigProvider
from eco.util.di.domain import ProdDomainProvider
from eco.util.di.infrastructure import (
    ClockProvider,
    PersistenceProvider,
    ProdClockProvider,
    ProdPersistenceProvider,
    RealtimeProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    RealtimeProvider,
    ClockProvider,
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """A provider is mockable when it names a component and has implementations."""
    return base.__mock_component__ is not None and bool(base.__subclasses__())


def mockable_components() -> set[Component]:
    """Names of every component that has a mock implementation."""
    return {base.__mock_component__ for base in PROVIDERS if is_mockable(base)}


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for ``base``.

    Args:
        base: Entry from PROVIDERS
        use_mock: Pick the mock implementation of a mockable component

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the component has no implementation of that kind
    """
    if not is_mockable(base):
        return base

    implementations = {
        getattr(subclass, "__is_mock__", False): subclass
        for subclass in base.__subclasses__()
    }
    if use_mock not in implementations:
        kind = "mock" if use_mock else "production"
        raise ValueError(f"No {kind} implementation for {base.__mock_component__}")
    return implementations[use_mock]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "is_mockable",
    "mockable_components",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "RealtimeProvider",
    "ClockProvider",
    "PersistenceProvider",
    "ProdClockProvider",
    "ProdPersistenceProvider",
]
