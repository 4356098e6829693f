"""
Request correlation ids.

A ContextVar keeps the id visible to every coroutine spawned while a
request is being served, so log records can be stitched together.

Dependencies: contextvars
"""

import uuid
from contextvars import ContextVar

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt the caller's id, or mint a UUID4 when none was sent. Returns the id in use."""
    value = correlation_id or uuid.uuid4().hex
    _correlation_id.set(value)
    return value


def get_correlation_id() -> str:
    """The current id, or "" outside a request."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set("")
