"""User repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Optional

from eco.domain.model.user import User
from eco.domain.value import BadgeId, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID and lock the row until the transaction ends.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def apply_accrual(
        self,
        user_id: UserId,
        points: Decimal,
        current_streak: int,
        longest_streak: int,
        last_action_date: datetime,
    ) -> User:
        """Atomically add points and overwrite the streak state.

        ``total_points`` is incremented in place; the streak fields are set.

        Args:
            user_id: The user's unique identifier
            points: Points to add (non-negative)
            current_streak: New current streak
            longest_streak: New longest streak
            last_action_date: New last action instant

        Returns:
            The updated user
        """
        pass

    @abstractmethod
    async def add_badges(self, user_id: UserId, badge_ids: Sequence[BadgeId]) -> User:
        """Append badges to the user's set, ignoring ones already held.

        Args:
            user_id: The user's unique identifier
            badge_ids: Badges to add

        Returns:
            The updated user
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all users.

        Returns:
            Number of users
        """
        pass

    @abstractmethod
    async def find_top_by_points(self, limit: int) -> list[User]:
        """Find users with the most points.

        Args:
            limit: Maximum number of users

        Returns:
            Users ordered by total points descending, then username ascending
        """
        pass
