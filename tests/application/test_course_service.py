"""
Test suite for CourseService.

Runs the service against an in-memory SQLite database with the real
uniqueness rule wired to a session-bound CourseRepository, plus a few
mocked-session cases for failure paths.

System role: Verification of course service orchestration layer
"""

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from course_catalog.application.services.course_service import CourseService
from course_catalog.boundary.db.course_repository import CourseRepository
from course_catalog.boundary.db.models.course_model import CourseStatus
from course_catalog.core.exceptions import CourseNameConflictError, CourseNotFoundError
from course_catalog.core.validation import UniqueCourseNameValidator


@pytest.fixture
def course_service(test_async_db: AsyncSession) -> CourseService:
    """Provide CourseService wired to the test database."""
    validator = UniqueCourseNameValidator(CourseRepository(test_async_db))
    return CourseService(db=test_async_db, name_validator=validator)


class TestCreateCourse:
    """Test suite for CourseService.create_course()."""

    @pytest.mark.asyncio
    async def test_create_course_should_persist_active_course(
        self, course_service: CourseService
    ) -> None:
        """Test create returns an ID for a new ACTIVE course."""
        # Act
        course_id = await course_service.create_course(
            name="Algebra", description="Intro", metadata={"level": 1}
        )

        # Assert
        course = await course_service.get_course(course_id)
        assert course["name"] == "Algebra"
        assert course["description"] == "Intro"
        assert course["metadata"] == {"level": 1}
        assert course["status"] == CourseStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_create_course_should_reject_active_duplicate(
        self, course_service: CourseService
    ) -> None:
        """Test a second active course with the same name is refused."""
        await course_service.create_course(name="Algebra")

        with pytest.raises(CourseNameConflictError) as exc_info:
            await course_service.create_course(name="Algebra")

        assert exc_info.value.message == "A course with name 'Algebra' already exists"
        assert len(await course_service.get_all_courses(include_inactive=True)) == 1

    @pytest.mark.asyncio
    async def test_create_course_should_allow_name_of_retired_course(
        self, course_service: CourseService
    ) -> None:
        """Test retiring a course frees its name."""
        # Arrange
        old_id = await course_service.create_course(name="Algebra")
        await course_service.delete_course(old_id)

        # Act
        new_id = await course_service.create_course(name="Algebra")

        # Assert
        assert new_id != old_id
        assert (await course_service.get_course(new_id))["status"] == CourseStatus.ACTIVE


class TestGetCourses:
    """Test suite for get_course() and get_all_courses()."""

    @pytest.mark.asyncio
    async def test_get_course_should_raise_when_missing(
        self, course_service: CourseService
    ) -> None:
        """Test unknown IDs raise CourseNotFoundError."""
        with pytest.raises(CourseNotFoundError, match="does not exist"):
            await course_service.get_course(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_get_all_courses_should_hide_inactive_by_default(
        self, course_service: CourseService
    ) -> None:
        """Test retired courses only appear with include_inactive."""
        # Arrange
        await course_service.create_course(name="Algebra")
        retired = await course_service.create_course(name="Geometry")
        await course_service.delete_course(retired)

        # Act
        active = await course_service.get_all_courses()
        everything = await course_service.get_all_courses(include_inactive=True)

        # Assert
        assert [c["name"] for c in active] == ["Algebra"]
        assert sorted(c["name"] for c in everything) == ["Algebra", "Geometry"]


class TestUpdateCourse:
    """Test suite for CourseService.update_course()."""

    @pytest.mark.asyncio
    async def test_update_course_should_allow_keeping_own_name(
        self, course_service: CourseService
    ) -> None:
        """Test re-submitting the current name does not collide with itself."""
        course_id = await course_service.create_course(name="Algebra")

        updated = await course_service.update_course(
            course_id, name="Algebra", description="Revised"
        )

        assert updated["name"] == "Algebra"
        assert updated["description"] == "Revised"

    @pytest.mark.asyncio
    async def test_update_course_should_reject_rename_onto_active_course(
        self, course_service: CourseService
    ) -> None:
        """Test renaming to another active course's name is refused."""
        await course_service.create_course(name="Algebra")
        geometry = await course_service.create_course(name="Geometry")

        with pytest.raises(CourseNameConflictError):
            await course_service.update_course(geometry, name="Algebra")

        assert (await course_service.get_course(geometry))["name"] == "Geometry"

    @pytest.mark.asyncio
    async def test_update_course_should_replace_metadata(
        self, course_service: CourseService
    ) -> None:
        """Test metadata is replaced when provided."""
        course_id = await course_service.create_course(name="Algebra", metadata={"a": 1})

        updated = await course_service.update_course(course_id, metadata={"b": 2})

        assert updated["metadata"] == {"b": 2}

    @pytest.mark.asyncio
    async def test_update_course_should_return_unchanged_when_no_fields(
        self, course_service: CourseService
    ) -> None:
        """Test an empty update is a no-op."""
        course_id = await course_service.create_course(name="Algebra")

        result = await course_service.update_course(course_id)

        assert result["name"] == "Algebra"

    @pytest.mark.asyncio
    async def test_update_course_should_raise_when_missing(
        self, course_service: CourseService
    ) -> None:
        """Test updating an unknown course raises CourseNotFoundError."""
        with pytest.raises(CourseNotFoundError, match="does not exist"):
            await course_service.update_course(uuid.uuid4(), name="Algebra")


class TestLifecycle:
    """Test suite for delete_course() and reactivate_course()."""

    @pytest.mark.asyncio
    async def test_delete_course_should_mark_inactive(
        self, course_service: CourseService
    ) -> None:
        """Test delete is a soft delete."""
        course_id = await course_service.create_course(name="Algebra")

        assert await course_service.delete_course(course_id) is True
        assert (await course_service.get_course(course_id))["status"] == CourseStatus.INACTIVE

    @pytest.mark.asyncio
    async def test_delete_course_should_raise_when_missing(
        self, course_service: CourseService
    ) -> None:
        """Test deleting an unknown course raises CourseNotFoundError."""
        with pytest.raises(CourseNotFoundError, match="does not exist"):
            await course_service.delete_course(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_reactivate_course_should_restore_active(
        self, course_service: CourseService
    ) -> None:
        """Test a retired course can be reactivated while its name is free."""
        course_id = await course_service.create_course(name="Algebra")
        await course_service.delete_course(course_id)

        result = await course_service.reactivate_course(course_id)

        assert result["status"] == CourseStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_reactivate_course_should_reject_when_name_taken(
        self, course_service: CourseService
    ) -> None:
        """Test reactivation cannot create a second active course with one name."""
        # Arrange
        old_id = await course_service.create_course(name="Algebra")
        await course_service.delete_course(old_id)
        await course_service.create_course(name="Algebra")

        # Act / Assert
        with pytest.raises(CourseNameConflictError):
            await course_service.reactivate_course(old_id)

        assert (await course_service.get_course(old_id))["status"] == CourseStatus.INACTIVE


    @pytest.mark.asyncio
    async def test_reactivate_course_should_raise_not_found_when_row_vanishes(
        self, course_service: CourseService
    ) -> None:
        """Test a row deleted between lookup and status update yields CourseNotFoundError."""
        # Arrange
        course_id = await course_service.create_course(name="Algebra")
        await course_service.delete_course(course_id)

        with patch(
            "course_catalog.application.services.course_service.course_crud.set_status",
            AsyncMock(return_value=None),
        ):
            # Act / Assert
            with pytest.raises(CourseNotFoundError):
                await course_service.reactivate_course(course_id)

    @pytest.mark.asyncio
    async def test_reactivate_course_should_return_active_course_unchanged(
        self, course_service: CourseService
    ) -> None:
        """Test reactivating an already active course is a no-op."""
        course_id = await course_service.create_course(name="Algebra")

        result = await course_service.reactivate_course(course_id)

        assert result["status"] == CourseStatus.ACTIVE

    @pytest.mark.asyncio
    async def test_reactivate_course_should_raise_when_missing(
        self, course_service: CourseService
    ) -> None:
        """Test reactivating an unknown course raises CourseNotFoundError."""
        with pytest.raises(CourseNotFoundError):
            await course_service.reactivate_course(uuid.uuid4())


class TestCaseInsensitiveNames:
    """Test suite for the service with case-insensitive name matching."""

    @pytest.mark.asyncio
    async def test_create_course_should_reject_accented_case_variant(
        self, test_async_db: AsyncSession
    ) -> None:
        """Test folding covers non-ASCII letters, not just A-Z."""
        validator = UniqueCourseNameValidator(CourseRepository(test_async_db, case_sensitive=False))
        service = CourseService(db=test_async_db, name_validator=validator)
        await service.create_course(name="ÁLGEBRA")

        with pytest.raises(CourseNameConflictError):
            await service.create_course(name="álgebra")

class TestFailurePaths:
    """Test suite for database failures."""

    @pytest.mark.asyncio
    async def test_create_course_should_rollback_and_reraise_on_db_error(self) -> None:
        """Test persistence errors roll back and propagate."""
        # Arrange
        db = AsyncMock(spec=AsyncSession)
        validator = AsyncMock()
        service = CourseService(db=db, name_validator=validator)

        with patch(
            "course_catalog.application.services.course_service.course_crud.create",
            AsyncMock(side_effect=RuntimeError("db down")),
        ):
            # Act / Assert
            with pytest.raises(RuntimeError, match="db down"):
                await service.create_course(name="Algebra")

        db.rollback.assert_awaited_once()
        db.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_course_should_not_write_when_rule_rejects(self) -> None:
        """Test a rejected name never reaches the CRUD layer."""
        # Arrange
        db = AsyncMock(spec=AsyncSession)
        validator = AsyncMock()
        validator.validate = AsyncMock(side_effect=CourseNameConflictError("Algebra"))
        service = CourseService(db=db, name_validator=validator)

        with patch(
            "course_catalog.application.services.course_service.course_crud.create",
            AsyncMock(),
        ) as mock_create:
            # Act / Assert
            with pytest.raises(CourseNameConflictError):
                await service.create_course(name="Algebra")

        mock_create.assert_not_awaited()
