"""In-memory user repository for testing."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Optional

from eco.domain.error import NotFoundError
from eco.domain.model.user import User
from eco.domain.repository.user import UserRepository
from eco.domain.value import BadgeId, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID (no row locks in memory)."""
        return self._users.get(user_id)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def apply_accrual(
        self,
        user_id: UserId,
        points: Decimal,
        current_streak: int,
        longest_streak: int,
        last_action_date: datetime,
    ) -> User:
        """Add points and set the streak fields."""
        user = self._get(user_id)
        updated = user.model_copy(
            update={
                "total_points": user.total_points + points,
                "current_streak": current_streak,
                "longest_streak": longest_streak,
                "last_action_date": last_action_date,
            }
        )
        self._users[user_id] = updated
        return updated

    async def add_badges(self, user_id: UserId, badge_ids: Sequence[BadgeId]) -> User:
        """Append badges not already held."""
        user = self._get(user_id)
        merged = list(user.badges) + [b for b in badge_ids if b not in user.badges]
        updated = user.model_copy(update={"badges": merged})
        self._users[user_id] = updated
        return updated

    async def count(self) -> int:
        """Count all users."""
        return len(self._users)

    async def find_top_by_points(self, limit: int) -> list[User]:
        """Find users with the most points, ties by username."""
        ranked = sorted(
            self._users.values(), key=lambda u: (-u.total_points, u.username.root)
        )
        return ranked[:limit]

    def _get(self, user_id: UserId) -> User:
        user = self._users.get(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))
        return user
