"""Async engine, session factory and schema bootstrap for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from eco.config import Settings
from eco.persistence.tables import metadata


def create_engine(settings: Settings) -> AsyncEngine:
    """Build the asyncpg-backed engine from ``settings.database``."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions are committed explicitly, once per request."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create the users, actions and badges tables if they are missing.

    Existing tables are never altered.
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all, checkfirst=True)
