"""PostgreSQL repository implementations."""

from eco.persistence.repository.action import PostgresActionRepository
from eco.persistence.repository.badge import PostgresBadgeRepository
from eco.persistence.repository.transaction import PostgresTransactionManager
from eco.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresActionRepository",
    "PostgresBadgeRepository",
    "PostgresTransactionManager",
    "PostgresUserRepository",
]
