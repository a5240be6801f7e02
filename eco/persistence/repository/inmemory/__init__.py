"""In-memory repository implementations for testing."""

from .action import InMemoryActionRepository
from .badge import InMemoryBadgeRepository
from .transaction import InMemoryTransactionManager
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryActionRepository",
    "InMemoryBadgeRepository",
    "InMemoryTransactionManager",
    "InMemoryUserRepository",
]
