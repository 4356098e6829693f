"""
FastAPI dependency providers.

The chain for a course request is
session -> CourseRepository -> UniqueCourseNameValidator -> CourseService,
with the validation settings deciding case sensitivity and whether a
missing lookup is tolerated. Tests swap any link via
app.dependency_overrides.

Dependencies: fastapi, course_catalog.configs, course_catalog.boundary
System role: DI wiring for course endpoints
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.application.services.course_service import CourseService
from course_catalog.boundary.db import CourseRepository, get_async_db
from course_catalog.configs import Settings, get_settings
from course_catalog.core.validation import UniqueCourseNameValidator


def get_settings_dependency() -> Settings:
    """Cached Settings; override in tests to flip validation flags."""
    return get_settings()


def get_course_repository(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> CourseRepository:
    return CourseRepository(db=db, case_sensitive=settings.validation.case_sensitive)


def get_course_name_validator(
    repository: CourseRepository = Depends(get_course_repository),
    settings: Settings = Depends(get_settings_dependency),
) -> UniqueCourseNameValidator:
    """Uniqueness rule over this request's session."""
    return UniqueCourseNameValidator(
        repository, pass_when_unwired=settings.validation.pass_when_unwired
    )


def get_course_service(
    db: AsyncSession = Depends(get_async_db),
    name_validator: UniqueCourseNameValidator = Depends(get_course_name_validator),
) -> CourseService:
    return CourseService(db=db, name_validator=name_validator)
