"""In-memory transaction manager for testing."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from eco.domain.repository import TransactionManager


class InMemoryTransactionManager(TransactionManager):
    """Savepoints are no-ops: in-memory writes cannot poison later ones."""

    @asynccontextmanager
    async def savepoint(self) -> AsyncIterator[None]:
        yield
