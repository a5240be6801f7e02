"""Persistence component: PostgreSQL in production, in-memory in tests."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from eco.adapter.realtime import EventOutbox
from eco.config import Settings
from eco.domain.repository import (
    ActionRepository,
    BadgeRepository,
    TransactionManager,
    UserRepository,
)
from eco.persistence.database import create_engine, create_session_factory
from eco.persistence.repository import (
    PostgresActionRepository,
    PostgresBadgeRepository,
    PostgresTransactionManager,
    PostgresUserRepository,
)
from eco.util.di.base import ProviderBase
from eco.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL repositories over one session per request."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        outbox: EventOutbox,
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Commits when the request finishes cleanly. On an exception the
        transaction is rolled back and events queued in the outbox are dropped,
        so nothing is broadcast for work that never landed.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                outbox.discard()
                await session.rollback()
                logfire.warn("Transaction rolled back", error=str(e))
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_transaction_manager(self, session: AsyncSession) -> TransactionManager:
        return PostgresTransactionManager(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_action_repository(self, session: AsyncSession) -> ActionRepository:
        return PostgresActionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_badge_repository(self, session: AsyncSession) -> BadgeRepository:
        return PostgresBadgeRepository(session)
