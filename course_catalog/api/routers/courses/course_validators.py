"""
Request checks that need no database.

Pydantic already bounds field lengths; these add the catalog's own
minimum name length and a cap on metadata size. Name uniqueness is not
checked here; CourseService runs that rule against storage.

Dependencies: course_catalog.core.exceptions, course_catalog.models.course
System role: Course request validation
"""

import json

from course_catalog.core.exceptions import ValidationError
from course_catalog.models.course import CreateCourseRequest, UpdateCourseRequest

NAME_MIN_LENGTH = 2
METADATA_MAX_BYTES = 10_000


class CourseValidationError(ValidationError):
    """A course request failed a stateless check."""


def _check_name(name: str) -> None:
    if len(name) < NAME_MIN_LENGTH:
        raise CourseValidationError(
            f"Course name must be at least {NAME_MIN_LENGTH} characters", field="name"
        )


def _check_metadata(metadata: dict | None) -> None:
    if metadata and len(json.dumps(metadata, default=str)) > METADATA_MAX_BYTES:
        raise CourseValidationError("Metadata payload too large", field="metadata")


def validate_course_creation(request: CreateCourseRequest) -> None:
    """Raises CourseValidationError when the new course is unacceptable."""
    _check_name(request.name)
    _check_metadata(request.metadata)


def validate_course_update(request: UpdateCourseRequest) -> None:
    """Raises CourseValidationError for an empty patch or a bad field."""
    if request.name is None and request.description is None and request.metadata is None:
        raise CourseValidationError("At least one field must be provided for update")
    if request.name is not None:
        _check_name(request.name)
    _check_metadata(request.metadata)
