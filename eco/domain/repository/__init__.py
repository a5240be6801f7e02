"""Repository interfaces for Eco Habits domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from eco.domain.repository.action import ActionRepository
from eco.domain.repository.badge import BadgeRepository
from eco.domain.repository.transaction import TransactionManager
from eco.domain.repository.user import UserRepository

__all__ = [
    "ActionRepository",
    "BadgeRepository",
    "TransactionManager",
    "UserRepository",
]
