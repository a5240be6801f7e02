"""PostgreSQL implementation of Badge repository."""

from typing import Optional

from sqlalchemy import select

from eco.domain.model import Badge
from eco.domain.repository import BadgeRepository
from eco.domain.value import BadgeId
from eco.persistence.mappers import badge_to_dict, row_to_badge
from eco.persistence.repository.base import PostgresRepository
from eco.persistence.tables import badges_table


class PostgresBadgeRepository(PostgresRepository, BadgeRepository):
    """PostgreSQL implementation of BadgeRepository."""

    async def find_by_id(self, badge_id: BadgeId) -> Optional[Badge]:
        stmt = select(badges_table).where(badges_table.c.id == badge_id)
        result = await self._execute(stmt)
        row = result.mappings().first()
        return row_to_badge(dict(row)) if row else None

    async def find_all(self) -> list[Badge]:
        stmt = select(badges_table).order_by(
            badges_table.c.kind.asc(), badges_table.c.requirement.asc()
        )
        result = await self._execute(stmt)
        return [row_to_badge(dict(row)) for row in result.mappings().all()]

    async def save(self, badge: Badge) -> Badge:
        stmt = badges_table.insert().values(**badge_to_dict(badge))
        await self._execute(stmt)
        await self._flush()
        return badge
