"""Users table access: counters, badges and leaderboard."""

from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import insert

from eco.domain.error import NotFoundError
from eco.domain.model import User
from eco.domain.repository import UserRepository
from eco.domain.value import BadgeId, UserId
from eco.persistence.mappers import row_to_user, user_to_dict
from eco.persistence.repository.base import PostgresRepository
from eco.persistence.tables import users_table


class PostgresUserRepository(PostgresRepository, UserRepository):
    """PostgreSQL implementation of UserRepository."""

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: User ID to look up

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_id_for_update(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID with ``SELECT ... FOR UPDATE``.

        The row stays locked until the session's transaction ends.
        """
        stmt = (
            select(users_table).where(users_table.c.id == user_id).with_for_update()
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def save(self, user: User) -> User:
        """Insert the user, or overwrite every column if the ID exists."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self._execute(stmt)
        await self._flush()
        return user

    async def apply_accrual(
        self,
        user_id: UserId,
        points: Decimal,
        current_streak: int,
        longest_streak: int,
        last_action_date: datetime,
    ) -> User:
        """Add points in place and set the streak fields in one UPDATE."""
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                total_points=users_table.c.total_points + points,
                current_streak=current_streak,
                longest_streak=longest_streak,
                last_action_date=last_action_date,
            )
            .returning(users_table)
        )
        result = await self._execute(stmt)
        row = result.mappings().first()
        if not row:
            raise NotFoundError("User", str(user_id))
        return row_to_user(dict(row))

    async def add_badges(self, user_id: UserId, badge_ids: Sequence[BadgeId]) -> User:
        """Append badges not already held, keeping unlock order."""
        user = await self.find_by_id(user_id)
        if not user:
            raise NotFoundError("User", str(user_id))

        merged = list(user.badges) + [b for b in badge_ids if b not in user.badges]
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(badges=merged)
            .returning(users_table)
        )
        result = await self._execute(stmt)
        return row_to_user(dict(result.mappings().one()))

    async def count(self) -> int:
        """Count all users."""
        stmt = select(func.count()).select_from(users_table)
        result = await self._execute(stmt)
        return result.scalar_one()

    async def find_top_by_points(self, limit: int) -> list[User]:
        """Find users with the most points, ties by username."""
        stmt = (
            select(users_table)
            .order_by(users_table.c.total_points.desc(), users_table.c.username.asc())
            .limit(limit)
        )
        result = await self._execute(stmt)
        return [row_to_user(dict(row)) for row in result.mappings().all()]
