"""ORM models."""

from course_catalog.boundary.db.models.course_model import CourseModel, CourseStatus

__all__ = ["CourseModel", "CourseStatus"]
