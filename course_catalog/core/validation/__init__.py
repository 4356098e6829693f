"""
Business-rule validation for courses.

Exports the Validator protocol, the validation context, and the
course-name uniqueness rule.
"""

from course_catalog.core.validation.context import FieldViolation, ValidationContext
from course_catalog.core.validation.validator import Validator
from course_catalog.core.validation.unique_course_name import (
    CourseNameLookup,
    UniqueCourseNameValidator,
)

__all__ = [
    "CourseNameLookup",
    "FieldViolation",
    "UniqueCourseNameValidator",
    "ValidationContext",
    "Validator",
]
