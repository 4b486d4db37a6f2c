"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from userapi.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the application's connection pool.

    SQL is echoed when ``debug`` is on. Connections are pinged on checkout
    so that a restarted database does not fail the first request.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Objects stay readable after commit and nothing is flushed implicitly;
    repositories issue Core statements and commit their own writes.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
