"""
Course catalog exceptions.

Everything raised on purpose by the domain derives from
CourseCatalogException and carries a message plus a details dict for
structured logs. The HTTP layer translates them in
api/routers/courses/course_error_handling.py.

Dependencies: None (pure domain layer)
"""

from typing import Any
from uuid import UUID


class CourseCatalogException(Exception):
    """Root of the domain error tree."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        return f"{self.message} | Details: {self.details}"


class ValidationError(CourseCatalogException):
    """
    A submission broke a business rule.

    Args:
        message: User-facing explanation
        field: Request field the message belongs to, if any
        details: Extra context; field is copied into it
    """

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None) -> None:
        self.field = field
        context = dict(details or {})
        if field:
            context["field"] = field
        super().__init__(message, context)


class CourseNameConflictError(ValidationError):
    """An ACTIVE course already uses the submitted name."""

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        self.name = name
        super().__init__(f"A course with name '{name}' already exists", field="name", details=details)


class CourseNotFoundError(CourseCatalogException):
    """No course row has the requested id."""

    def __init__(self, course_id: UUID) -> None:
        self.course_id = course_id
        super().__init__(f"Course {course_id} does not exist", {"course_id": str(course_id)})


class ValidatorConfigurationError(CourseCatalogException):
    """A validator was built without a collaborator it cannot run without."""
