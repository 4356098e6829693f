"""
Root logging setup.

Records go to stdout as
    <time> - <logger> - <LEVEL> - [<correlation id>] <message>
with "-" standing in for the id outside a request.

Dependencies: logging (stdlib), course_catalog.observability.correlation
System role: Centralized logging configuration
"""

import logging
import sys

from course_catalog.observability.correlation import get_correlation_id

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(correlation_id)s] %(message)s"
QUIET_LOGGERS = ("sqlalchemy.engine", "uvicorn.access")


class CorrelationIdFilter(logging.Filter):
    """Stamp record.correlation_id so LOG_FORMAT can always render it."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "-"
        return True


def configure_logging(level: str = "INFO") -> None:
    """
    Replace root handlers with a single stdout handler.

    Safe to call more than once; earlier handlers are dropped first.

    Args:
        level: Level name for the root logger, any case
    """
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    root.addHandler(handler)
    root.setLevel(level.upper())
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
