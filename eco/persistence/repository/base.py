"""Shared plumbing for PostgreSQL repositories."""

from typing import Any

import logfire
from sqlalchemy.engine import Result
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Executable

from eco.domain.error import StoreError


class PostgresRepository:
    """Base class holding the request's session.

    Statement failures surface as StoreError so callers never depend on
    SQLAlchemy exception types.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _execute(self, stmt: Executable, params: Any = None) -> Result:
        try:
            return await self.session.execute(stmt, params)
        except SQLAlchemyError as e:
            logfire.error(
                "Database statement failed",
                repository=type(self).__name__,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreError(f"Database error in {type(self).__name__}") from e

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(f"Database error in {type(self).__name__}") from e
