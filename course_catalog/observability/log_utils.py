"""
Structured-logging helpers.

Context values (course names, metadata dicts, result lists) are
rendered as short strings before being attached to a record, so one
oversized payload cannot flood the log.

Dependencies: logging (stdlib)
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 200


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Short string form of value for log context.

    Containers are summarised by size; long strings are cut at
    max_length with the original length noted.
    """
    if value is None:
        return "None"
    if isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    elif isinstance(value, (list, tuple, set)):
        text = f"{type(value).__name__}({len(value)} items)"
    else:
        try:
            text = value if isinstance(value, str) else str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}... (truncated, {len(text)} total)"


def _safe_context(context: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """logger.log() with every keyword rendered through safe_log_value()."""
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(logger: logging.Logger, message: str, exc: Exception, **context: Any) -> None:
    """logger.exception() plus error_type / error_msg fields and safe context."""
    extra = _safe_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.exception(message, extra=extra)
