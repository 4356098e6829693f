"""
Generic async data access.

BaseCRUD wraps the four statements every table needs. It flushes but
never commits; the service that owns the session decides when a unit
of work ends.

Dependencies: sqlalchemy
System role: Shared persistence primitives
"""

from typing import Any, Generic, Sequence, TypeVar
from uuid import UUID

from sqlalchemy import ColumnElement, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """Insert, fetch, filter and patch rows of one mapped class."""

    def __init__(self, model: type[ModelT]) -> None:
        self.model = model

    async def create(self, session: AsyncSession, **values: Any) -> ModelT:
        """
        Add a row and flush so server-side defaults are populated.

        Args:
            session: Open session
            **values: Column values for the new row

        Returns:
            The persisted instance, refreshed
        """
        row = self.model(**values)
        session.add(row)
        await session.flush()
        await session.refresh(row)
        return row

    async def get_by_id(self, session: AsyncSession, id: UUID) -> ModelT | None:
        return await session.get(self.model, id)

    async def get_all(
        self,
        session: AsyncSession,
        *criteria: ColumnElement[bool],
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Page through rows, oldest first when the model is timestamped.

        Args:
            session: Open session
            *criteria: Optional WHERE clauses, AND-ed together
            limit: Page size, None for no limit
            offset: Rows to skip
        """
        stmt = select(self.model).where(*criteria).offset(offset)
        created_at = getattr(self.model, "created_at", None)
        if created_at is not None:
            stmt = stmt.order_by(created_at)
        if limit is not None:
            stmt = stmt.limit(limit)
        return (await session.scalars(stmt)).all()

    async def update_by_id(self, session: AsyncSession, id: UUID, **values: Any) -> ModelT | None:
        """Patch one row in place. Returns the new row, or None when id is unknown."""
        stmt = (
            update(self.model)
            .where(self.model.id == id)
            .values(**values)
            .returning(self.model)
        )
        return (await session.execute(stmt)).scalar_one_or_none()
