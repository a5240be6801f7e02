"""Transaction control interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Nested units of work inside the request's transaction."""

    @abstractmethod
    def savepoint(self) -> AbstractAsyncContextManager[None]:
        """Run a block whose failure must not abort the enclosing transaction.

        If the block raises, only the statements it issued are undone and the
        exception propagates. Work done before the block stays pending.
        """
        pass
