"""PostgreSQL implementation of Action repository."""

from collections.abc import Collection
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Select, func, select

from eco.domain.model import ActionRecord, ActionTypeTotals, TypeTotals
from eco.domain.repository import ActionRepository
from eco.domain.value import ActionId, ActionType, UserId
from eco.persistence.mappers import action_to_dict, row_to_action
from eco.persistence.repository.base import PostgresRepository
from eco.persistence.tables import actions_table


def _in_range(
    stmt: Select, start: Optional[datetime], end: Optional[datetime]
) -> Select:
    if start is not None:
        stmt = stmt.where(actions_table.c.date >= start)
    if end is not None:
        stmt = stmt.where(actions_table.c.date < end)
    return stmt


class PostgresActionRepository(PostgresRepository, ActionRepository):
    """PostgreSQL implementation of ActionRepository."""

    async def find_by_id(self, action_id: ActionId) -> Optional[ActionRecord]:
        """Find an action record by ID.

        Args:
            action_id: Record ID to look up

        Returns:
            Record if found, None otherwise
        """
        stmt = select(actions_table).where(actions_table.c.id == action_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_action(dict(row)) if row else None

    async def save(self, action: ActionRecord) -> ActionRecord:
        """Save an action record (create or update).

        Args:
            action: Record to save

        Returns:
            Saved record
        """
        existing = await self.find_by_id(action.id)

        action_dict = action_to_dict(action)

        if existing:
            stmt = (
                actions_table.update()
                .where(actions_table.c.id == action.id)
                .values(**action_dict)
            )
        else:
            stmt = actions_table.insert().values(**action_dict)
        await self._execute(stmt)

        await self._flush()
        return action

    async def save_all(self, actions: list[ActionRecord]) -> list[ActionRecord]:
        """Insert a batch of records with one executemany."""
        if not actions:
            return []
        await self._execute(
            actions_table.insert(), [action_to_dict(a) for a in actions]
        )
        await self._flush()
        return list(actions)

    async def find_types_logged_since(
        self,
        user_id: UserId,
        since: datetime,
        types: Collection[ActionType],
    ) -> set[ActionType]:
        """Which of the given types the user has logged since an instant."""
        if not types:
            return set()
        stmt = (
            select(actions_table.c.type)
            .distinct()
            .where(actions_table.c.user_id == user_id)
            .where(actions_table.c.date >= since)
            .where(actions_table.c.type.in_([t.value for t in types]))
        )
        result = await self._execute(stmt)
        return {ActionType(value) for value in result.scalars().all()}

    async def find_by_user(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[ActionRecord]:
        """Find a user's records, newest first."""
        stmt = select(actions_table).where(actions_table.c.user_id == user_id)
        stmt = (
            _in_range(stmt, start, end)
            .order_by(actions_table.c.date.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._execute(stmt)
        return [row_to_action(dict(row)) for row in result.mappings().all()]

    async def find_all_by_user(self, user_id: UserId) -> list[ActionRecord]:
        """Find every record of a user, newest first."""
        stmt = (
            select(actions_table)
            .where(actions_table.c.user_id == user_id)
            .order_by(actions_table.c.date.desc())
        )
        result = await self._execute(stmt)
        return [row_to_action(dict(row)) for row in result.mappings().all()]

    async def count_by_user(
        self,
        user_id: UserId,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> int:
        """Count a user's records, optionally within a date range."""
        stmt = (
            select(func.count())
            .select_from(actions_table)
            .where(actions_table.c.user_id == user_id)
        )
        result = await self._execute(_in_range(stmt, start, end))
        return result.scalar_one()

    async def find_by_user_in_range(
        self, user_id: UserId, start: datetime, end: datetime
    ) -> list[ActionRecord]:
        """Find a user's records in ``[start, end)``, oldest first."""
        stmt = select(actions_table).where(actions_table.c.user_id == user_id)
        stmt = _in_range(stmt, start, end).order_by(actions_table.c.date.asc())
        result = await self._execute(stmt)
        return [row_to_action(dict(row)) for row in result.mappings().all()]

    async def count_by_user_and_type(
        self, user_id: UserId, action_type: ActionType
    ) -> int:
        """Count a user's records of one type."""
        stmt = (
            select(func.count())
            .select_from(actions_table)
            .where(actions_table.c.user_id == user_id)
            .where(actions_table.c.type == action_type.value)
        )
        result = await self._execute(stmt)
        return result.scalar_one()

    async def count_by_type_for_user(self, user_id: UserId) -> dict[ActionType, int]:
        """Count a user's records grouped by type."""
        stmt = (
            select(actions_table.c.type, func.count())
            .where(actions_table.c.user_id == user_id)
            .group_by(actions_table.c.type)
        )
        result = await self._execute(stmt)
        return {ActionType(type_): count for type_, count in result.all()}

    async def totals_by_type_for_user(self, user_id: UserId) -> list[TypeTotals]:
        """Count, points and carbon saved per type for one user."""
        count = func.count().label("count")
        stmt = (
            select(
                actions_table.c.type,
                count,
                func.sum(actions_table.c.points).label("points"),
                func.sum(actions_table.c.carbon_saved).label("carbon_saved"),
            )
            .where(actions_table.c.user_id == user_id)
            .group_by(actions_table.c.type)
            .order_by(count.desc(), actions_table.c.type.asc())
        )
        result = await self._execute(stmt)
        return [
            TypeTotals(
                type=ActionType(row["type"]),
                count=row["count"],
                points=Decimal(row["points"]),
                carbon_saved=Decimal(row["carbon_saved"]),
            )
            for row in result.mappings().all()
        ]

    async def aggregate_totals(self) -> tuple[int, Decimal]:
        """Total record count and carbon saved across all users."""
        stmt = select(
            func.count(), func.coalesce(func.sum(actions_table.c.carbon_saved), 0)
        ).select_from(actions_table)
        result = await self._execute(stmt)
        total_actions, total_carbon = result.one()
        return total_actions, Decimal(total_carbon)

    async def aggregate_by_type(self) -> list[ActionTypeTotals]:
        """Count and carbon saved per type, most logged first."""
        count = func.count().label("count")
        stmt = (
            select(
                actions_table.c.type,
                count,
                func.sum(actions_table.c.carbon_saved).label("carbon_saved"),
            )
            .group_by(actions_table.c.type)
            .order_by(count.desc(), actions_table.c.type.asc())
        )
        result = await self._execute(stmt)
        return [
            ActionTypeTotals(
                name=row["type"],
                count=row["count"],
                carbon_saved=Decimal(row["carbon_saved"]),
            )
            for row in result.mappings().all()
        ]

    async def count_since(self, since: datetime) -> int:
        """Count records of all users since an instant."""
        stmt = (
            select(func.count())
            .select_from(actions_table)
            .where(actions_table.c.date >= since)
        )
        result = await self._execute(stmt)
        return result.scalar_one()
