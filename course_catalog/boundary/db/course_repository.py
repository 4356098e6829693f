"""
Name lookup adapter.

Gives the uniqueness rule a find_by_name() bound to the request's
session, so the rule itself never touches SQLAlchemy.

Dependencies: sqlalchemy, course_catalog.boundary.db.CRUD
System role: Storage collaborator for course-name uniqueness
"""

from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.CRUD.course_crud import course_crud
from course_catalog.boundary.db.models.course_model import CourseModel


class CourseRepository:
    """Session-bound course lookups."""

    def __init__(self, db: AsyncSession, case_sensitive: bool = True) -> None:
        self.db = db
        self.case_sensitive = case_sensitive

    async def find_by_name(self, name: str) -> Sequence[CourseModel]:
        """Every course named name, active or retired."""
        return await course_crud.get_by_name(self.db, name, case_sensitive=self.case_sensitive)
