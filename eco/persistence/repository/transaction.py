"""PostgreSQL savepoints."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from eco.domain.repository import TransactionManager


class PostgresTransactionManager(TransactionManager):
    """SAVEPOINTs on the request's session.

    A failed statement aborts the whole PostgreSQL transaction; rolling back
    to a savepoint is the only way to keep the work done before it.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        try:
            async with self.session.begin_nested():
                yield
        except Exception as e:
            logfire.warn(
                "Rolled back to savepoint", error=str(e), error_type=type(e).__name__
            )
            raise
