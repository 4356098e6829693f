"""
Fixtures shared across the suite.

test_async_db gives each test a fresh in-memory SQLite schema; nothing
here reads POSTGRES_* settings.

Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
"""

import uuid
from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from course_catalog.boundary.db.base import Base
from course_catalog.boundary.db.models import CourseModel  # noqa: F401  (registers the table)
from tests.fakes import FakeCourseLookup

SQLITE_MEMORY_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_async_db():
    """Session on a private in-memory database, discarded after the test."""
    engine = create_async_engine(SQLITE_MEMORY_URL, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    try:
        async with session_factory() as session:
            yield session
    finally:
        await engine.dispose()


@pytest.fixture
def fake_lookup() -> FakeCourseLookup:
    return FakeCourseLookup()


@pytest.fixture
def mock_course_service() -> AsyncMock:
    """Stand-in CourseService for router tests; configure return values per test."""
    return AsyncMock()


@pytest.fixture
def course_id() -> uuid.UUID:
    return uuid.uuid4()
