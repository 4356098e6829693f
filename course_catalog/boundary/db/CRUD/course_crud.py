"""
Course data access.

Adds name and status queries on top of BaseCRUD, and keeps the folded
name_key column in step with name on every write.

Dependencies: sqlalchemy, course_catalog.boundary.db.models
System role: Course persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.CRUD.base_crud import BaseCRUD
from course_catalog.boundary.db.models.course_model import CourseModel, CourseStatus, fold_name


def _with_name_key(values: dict[str, Any]) -> dict[str, Any]:
    if "name" in values:
        values["name_key"] = fold_name(values["name"])
    return values


class CourseCRUD(BaseCRUD[CourseModel]):
    """Course queries used by the service layer and the name rule."""

    def __init__(self) -> None:
        super().__init__(CourseModel)

    async def create(self, session: AsyncSession, **values: Any) -> CourseModel:
        return await super().create(session, **_with_name_key(values))

    async def update_by_id(self, session: AsyncSession, id: UUID, **values: Any) -> CourseModel | None:
        return await super().update_by_id(session, id, **_with_name_key(values))

    async def get_by_name(
        self,
        session: AsyncSession,
        name: str,
        case_sensitive: bool = True,
    ) -> Sequence[CourseModel]:
        """
        Every course carrying this name, whatever its status.

        Args:
            session: Open session
            name: Name to look up, already stripped
            case_sensitive: False matches on the case-folded name_key,
                so "ÁLGEBRA" and "álgebra" collide on every backend
        """
        if case_sensitive:
            criterion = CourseModel.name == name
        else:
            criterion = CourseModel.name_key == fold_name(name)
        return await self.get_all(session, criterion)

    async def get_all_by_status(
        self,
        session: AsyncSession,
        status: CourseStatus,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[CourseModel]:
        return await self.get_all(session, CourseModel.status == status, limit=limit, offset=offset)

    async def set_status(self, session: AsyncSession, id: UUID, status: CourseStatus) -> CourseModel | None:
        """Move a course between ACTIVE and INACTIVE. None if it does not exist."""
        return await self.update_by_id(session, id, status=status)


course_crud = CourseCRUD()
