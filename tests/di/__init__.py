"""Mock providers for testing."""

from .clock import FROZEN_NOW, MockClockProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "FROZEN_NOW",
    "MockClockProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
