"""
Declarative base for the course tables.

Every ORM model derives from Base so that create_tables picks it up.
The mixins add a portable UUID key and UTC audit timestamps.

Dependencies: sqlalchemy
System role: ORM foundation
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Uuid
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Metadata registry shared by all course tables."""


class UUIDMixin:
    """UUID4 primary key; native UUID on PostgreSQL, CHAR(32) on SQLite."""

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    """created_at is stamped on insert; updated_at on every UPDATE."""

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_utcnow, onupdate=_utcnow
    )
