"""
Async engine and session plumbing.

One engine per process (cached), one session per request. SQLite URLs
get a plain engine because aiosqlite does not take queue-pool sizing.

Dependencies: sqlalchemy, course_catalog.configs
System role: Database connection lifecycle
"""

from functools import lru_cache
from typing import Any, AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from course_catalog.configs import get_settings
from course_catalog.configs.database import DatabaseSettings


def _engine_options(db_config: DatabaseSettings) -> dict[str, Any]:
    options: dict[str, Any] = {"echo": db_config.echo_sql}
    if not db_config.is_sqlite:
        options.update(
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
            pool_pre_ping=True,
        )
    return options


@lru_cache
def get_async_engine() -> AsyncEngine:
    """
    Build the process-wide engine from DatabaseSettings.

    Returns:
        AsyncEngine: Engine for the configured URL
    """
    db_config = get_settings().database
    return create_async_engine(db_config.async_database_url, **_engine_options(db_config))


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the cached engine; callers commit explicitly."""
    return async_sessionmaker(get_async_engine(), autoflush=False, expire_on_commit=False)


async def get_async_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding a request-scoped session, closed afterwards."""
    async with get_async_session_factory()() as session:
        yield session
