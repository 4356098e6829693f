"""
Course table.

Rows are never hard-deleted. Retiring a course sets status INACTIVE,
after which its name no longer blocks a new active course. The schema
does not make names unique; that rule is enforced in
course_catalog.core.validation.

Dependencies: sqlalchemy
System role: Course persistence
"""

import enum

from sqlalchemy import JSON, Enum, String
from sqlalchemy.orm import Mapped, mapped_column

from course_catalog.boundary.db.base import Base, TimestampMixin, UUIDMixin


def fold_name(name: str) -> str:
    """Case-folded lookup key for case-insensitive name matching."""
    return name.casefold()


class CourseStatus(str, enum.Enum):
    """Lifecycle of a course. Only ACTIVE courses reserve their name."""

    ACTIVE = "active"
    INACTIVE = "inactive"


class CourseModel(Base, UUIDMixin, TimestampMixin):
    """
    A catalog course.

    name_key mirrors name through fold_name() and is kept in sync by
    CourseCRUD. It is computed in Python because SQLite's lower() only
    folds ASCII.
    """

    __tablename__ = "courses"

    name: Mapped[str] = mapped_column(String(255), index=True)
    name_key: Mapped[str] = mapped_column(String(1024), index=True)
    description: Mapped[str | None] = mapped_column(String(4096), default=None)
    course_metadata: Mapped[dict] = mapped_column(JSON, default=dict)
    status: Mapped[CourseStatus] = mapped_column(
        Enum(
            CourseStatus,
            name="course_status",
            values_callable=lambda statuses: [s.value for s in statuses],
        ),
        default=CourseStatus.ACTIVE,
    )
