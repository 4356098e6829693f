"""
Course-name uniqueness rule.

Rejects a submission whose name is already used by an ACTIVE course.
Inactive (retired) courses with the same name do not block.

Dependencies: course_catalog.boundary.db.models, course_catalog.core
System role: Business-rule validation for course create/update
"""

import logging
from typing import Protocol, Sequence

from course_catalog.boundary.db.models.course_model import CourseModel, CourseStatus
from course_catalog.core.exceptions import CourseNameConflictError, ValidatorConfigurationError
from course_catalog.core.validation.context import ValidationContext
from course_catalog.models.course import CourseSubmission
from course_catalog.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class CourseNameLookup(Protocol):
    """Storage collaborator returning every course that shares a name."""

    async def find_by_name(self, name: str) -> Sequence[CourseModel]:
        ...


class UniqueCourseNameValidator:
    """
    Validator for unique course names among active courses.

    The lookup is fixed at construction. When it is None the rule passes
    every submission, unless pass_when_unwired is False, in which case
    construction itself fails.
    """

    def __init__(
        self,
        lookup: CourseNameLookup | None,
        *,
        pass_when_unwired: bool = True,
    ) -> None:
        """
        Args:
            lookup: Course storage collaborator, or None if not wired
            pass_when_unwired: Allow a missing lookup (checks then always pass)

        Raises:
            ValidatorConfigurationError: If lookup is None and pass_when_unwired is False
        """
        if lookup is None and not pass_when_unwired:
            raise ValidatorConfigurationError(
                "UniqueCourseNameValidator requires a course lookup",
                details={"pass_when_unwired": pass_when_unwired},
            )
        self._lookup = lookup

    @property
    def is_wired(self) -> bool:
        return self._lookup is not None

    async def is_valid(self, submission: CourseSubmission, context: ValidationContext) -> bool:
        """
        Check the submission against active courses.

        Any ACTIVE match fails the check, except a match on submission.course_id:
        an update never collides with the course being updated.

        Args:
            submission: Candidate name (and own course_id on updates)
            context: Receives a name-scoped violation on failure

        Returns:
            bool: False if an active course already uses the name
        """
        if self._lookup is None:
            logger.warning(
                "Course lookup not wired, skipping name uniqueness check",
                extra={"course_name": submission.name},
            )
            return True

        existing = await self._lookup.find_by_name(submission.name)

        duplicate_exists = any(
            course.status == CourseStatus.ACTIVE
            and (submission.course_id is None or course.id != submission.course_id)
            for course in existing
        )

        logger.debug(
            "Course name uniqueness checked",
            extra={
                "course_name": submission.name,
                "matches": len(existing),
                "duplicate": duplicate_exists,
            },
        )

        if duplicate_exists:
            context.disable_default_violation()
            context.add_violation(
                f"A course with name '{submission.name}' already exists",
                field="name",
            )
            log_with_context(
                logger,
                logging.INFO,
                "Rejected duplicate course name",
                course_name=submission.name,
            )
            return False

        return True

    async def validate(self, submission: CourseSubmission) -> None:
        """
        Raise instead of returning a flag.

        Raises:
            CourseNameConflictError: If an active course already uses the name
        """
        context = ValidationContext()
        if not await self.is_valid(submission, context):
            raise CourseNameConflictError(submission.name)
