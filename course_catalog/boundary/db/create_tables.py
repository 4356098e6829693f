"""
Schema bootstrap.

Issues CREATE TABLE for every model registered on Base.metadata.
Existing tables are left alone, so re-running is harmless.

Usage:
    python -m course_catalog.boundary.db.create_tables
"""

import asyncio
import logging

from course_catalog.boundary.db.base import Base
from course_catalog.boundary.db.connection import get_async_engine
from course_catalog.boundary.db.models import CourseModel  # noqa: F401  (registers the table)

logger = logging.getLogger(__name__)


async def create_all_tables() -> None:
    """Create missing course tables on the configured database."""
    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Course schema ready", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    from course_catalog.observability.logger import configure_logging

    configure_logging()
    asyncio.run(create_all_tables())
