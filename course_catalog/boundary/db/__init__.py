"""
Database boundary: ORM model, CRUD singletons, sessions, and the
name lookup used by the uniqueness rule.

Dependencies: sqlalchemy, course_catalog.configs
System role: Persistent storage for courses
"""

from course_catalog.boundary.db.base import Base
from course_catalog.boundary.db.connection import get_async_db, get_async_engine, get_async_session_factory
from course_catalog.boundary.db.course_repository import CourseRepository
from course_catalog.boundary.db.CRUD import course_crud
from course_catalog.boundary.db.models import CourseModel, CourseStatus

__all__ = [
    "Base",
    "CourseModel",
    "CourseRepository",
    "CourseStatus",
    "course_crud",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
]
