"""
Course use cases.

Each public method is one unit of work on the injected session: it
runs the name rule where a name is about to become active, writes
through course_crud, and commits. Failed writes are rolled back and
re-raised for the HTTP layer to translate.

Dependencies: course_catalog.boundary.db.CRUD, course_catalog.core
System role: Course use case orchestration
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.boundary.db.CRUD.course_crud import course_crud
from course_catalog.boundary.db.models.course_model import CourseModel, CourseStatus
from course_catalog.core.exceptions import CourseNameConflictError, CourseNotFoundError
from course_catalog.core.validation import Validator
from course_catalog.models.course import CourseSubmission

logger = logging.getLogger(__name__)


def _course_to_dict(course: CourseModel) -> dict[str, Any]:
    return {
        "id": course.id,
        "name": course.name,
        "description": course.description,
        "metadata": course.course_metadata,
        "status": course.status,
        "created_at": course.created_at,
        "updated_at": course.updated_at,
    }


class CourseService:
    """Create, read, rename, retire and revive courses."""

    def __init__(self, db: AsyncSession, name_validator: Validator[CourseSubmission]) -> None:
        self.db = db
        self.name_validator = name_validator

    @asynccontextmanager
    async def _unit_of_work(self, action: str, **context: Any) -> AsyncIterator[None]:
        try:
            yield
            await self.db.commit()
        except Exception as e:
            await self.db.rollback()
            logger.error(f"Course {action} failed", extra={"error": str(e), **context})
            raise

    async def _require(self, course_id: UUID) -> CourseModel:
        course = await course_crud.get_by_id(self.db, course_id)
        if course is None:
            raise CourseNotFoundError(course_id)
        return course

    async def create_course(
        self,
        name: str,
        description: str | None = None,
        metadata: dict | None = None,
    ) -> UUID:
        """
        Store a new ACTIVE course.

        Raises:
            CourseNameConflictError: An active course already has this name
        """
        await self.name_validator.validate(CourseSubmission(name=name))

        async with self._unit_of_work("create", course_name=name):
            course = await course_crud.create(
                self.db,
                name=name,
                description=description,
                course_metadata=metadata or {},
                status=CourseStatus.ACTIVE,
            )

        logger.info("Course created", extra={"course_id": str(course.id), "course_name": name})
        return course.id

    async def get_course(self, course_id: UUID) -> dict[str, Any]:
        """Any course by id, retired ones included."""
        return _course_to_dict(await self._require(course_id))

    async def get_all_courses(
        self,
        limit: int | None = None,
        offset: int = 0,
        include_inactive: bool = False,
    ) -> list[dict[str, Any]]:
        """Active courses, oldest first; retired ones too when include_inactive."""
        if include_inactive:
            courses = await course_crud.get_all(self.db, limit=limit, offset=offset)
        else:
            courses = await course_crud.get_all_by_status(
                self.db, CourseStatus.ACTIVE, limit=limit, offset=offset
            )
        return [_course_to_dict(course) for course in courses]

    async def update_course(
        self,
        course_id: UUID,
        name: str | None = None,
        description: str | None = None,
        metadata: dict | None = None,
    ) -> dict[str, Any]:
        """
        Apply the provided fields; None leaves a field unchanged.

        A new name is checked against other active courses, never
        against this course itself.

        Raises:
            CourseNotFoundError: Unknown course_id
            CourseNameConflictError: Another active course has the new name
        """
        course = await self._require(course_id)

        changes: dict[str, Any] = {}
        if name is not None:
            await self.name_validator.validate(CourseSubmission(name=name, course_id=course_id))
            changes["name"] = name
        if description is not None:
            changes["description"] = description
        if metadata is not None:
            changes["course_metadata"] = metadata
        if not changes:
            return _course_to_dict(course)

        async with self._unit_of_work("update", course_id=str(course_id)):
            updated = await course_crud.update_by_id(self.db, course_id, **changes)
        if updated is None:
            raise CourseNotFoundError(course_id)

        logger.info("Course updated", extra={"course_id": str(course_id), "fields": sorted(changes)})
        return _course_to_dict(updated)

    async def delete_course(self, course_id: UUID) -> bool:
        """
        Retire a course. The row stays, with status INACTIVE, and its
        name is free for a new course.

        Raises:
            CourseNotFoundError: Unknown course_id
        """
        async with self._unit_of_work("retire", course_id=str(course_id)):
            retired = await course_crud.set_status(self.db, course_id, CourseStatus.INACTIVE)
        if retired is None:
            raise CourseNotFoundError(course_id)

        logger.info("Course retired", extra={"course_id": str(course_id)})
        return True

    async def reactivate_course(self, course_id: UUID) -> dict[str, Any]:
        """
        Make a retired course ACTIVE again, provided no other active
        course took its name in the meantime.

        Raises:
            CourseNotFoundError: Unknown course_id
            CourseNameConflictError: Its name is now used by another active course
        """
        course = await self._require(course_id)
        if course.status == CourseStatus.ACTIVE:
            return _course_to_dict(course)

        try:
            await self.name_validator.validate(CourseSubmission(name=course.name, course_id=course_id))
        except CourseNameConflictError:
            logger.warning(
                "Reactivation blocked by name conflict",
                extra={"course_id": str(course_id), "course_name": course.name},
            )
            raise

        async with self._unit_of_work("reactivate", course_id=str(course_id)):
            revived = await course_crud.set_status(self.db, course_id, CourseStatus.ACTIVE)
        if revived is None:
            raise CourseNotFoundError(course_id)

        logger.info("Course reactivated", extra={"course_id": str(course_id)})
        return _course_to_dict(revived)
