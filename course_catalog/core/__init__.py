"""Domain core: exceptions and the business rules run before course writes."""

from course_catalog.core.exceptions import (
    CourseCatalogException,
    CourseNameConflictError,
    CourseNotFoundError,
    ValidationError,
    ValidatorConfigurationError,
)

__all__ = [
    "CourseCatalogException",
    "CourseNameConflictError",
    "CourseNotFoundError",
    "ValidationError",
    "ValidatorConfigurationError",
]
