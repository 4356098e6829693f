"""
Test suite for dependency injection container.

Tests factory functions for repository, validator and service creation,
and that validation settings flow into the wiring.

System role: Verification of DI container
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.api.deps import (
    get_course_name_validator,
    get_course_repository,
    get_course_service,
    get_settings_dependency,
)
from course_catalog.application.services import CourseService
from course_catalog.boundary.db.course_repository import CourseRepository
from course_catalog.configs import Settings
from course_catalog.configs.validation import ValidationSettings
from course_catalog.core.validation import UniqueCourseNameValidator


@pytest.fixture
def mock_db_session() -> AsyncSession:
    """Provide mock async database session."""
    return AsyncMock(spec=AsyncSession)


@pytest.fixture
def settings() -> Settings:
    """Provide settings with case-insensitive names and strict wiring."""
    return Settings(
        validation=ValidationSettings(case_sensitive=False, pass_when_unwired=False)
    )


class TestGetCourseRepository:
    """Test suite for get_course_repository factory."""

    def test_should_bind_session_and_case_setting(
        self, mock_db_session: AsyncSession, settings: Settings
    ) -> None:
        repository = get_course_repository(db=mock_db_session, settings=settings)

        assert isinstance(repository, CourseRepository)
        assert repository.db is mock_db_session
        assert repository.case_sensitive is False


class TestGetCourseNameValidator:
    """Test suite for get_course_name_validator factory."""

    def test_should_wire_repository(
        self, mock_db_session: AsyncSession, settings: Settings
    ) -> None:
        repository = CourseRepository(mock_db_session)

        validator = get_course_name_validator(repository=repository, settings=settings)

        assert isinstance(validator, UniqueCourseNameValidator)
        assert validator.is_wired is True


class TestGetCourseService:
    """Test suite for get_course_service factory."""

    def test_should_return_course_service(self, mock_db_session: AsyncSession) -> None:
        validator = UniqueCourseNameValidator(CourseRepository(mock_db_session))

        service = get_course_service(db=mock_db_session, name_validator=validator)

        assert isinstance(service, CourseService)
        assert service.db is mock_db_session
        assert service.name_validator is validator


def test_get_settings_dependency_should_be_cached() -> None:
    assert get_settings_dependency() is get_settings_dependency()
