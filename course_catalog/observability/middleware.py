"""
Per-request logging middleware.

Dependencies: starlette (via fastapi), course_catalog.observability
System role: Request/response observability
"""

import logging
import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from course_catalog.observability.correlation import clear_correlation_id, set_correlation_id
from course_catalog.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request outcome and echo X-Correlation-ID.

    A client-supplied correlation id is reused; otherwise one is minted.
    The id is cleared once the response leaves.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = set_correlation_id(request.headers.get(CORRELATION_HEADER))
        started = time.perf_counter()
        route = f"{request.method} {request.url.path}"
        try:
            response = await call_next(request)
            logger.info(
                f"{route} -> {response.status_code}",
                extra={"status_code": response.status_code, "duration_ms": _elapsed_ms(started)},
            )
            response.headers[CORRELATION_HEADER] = correlation_id
            return response
        except Exception as e:
            log_exception_with_context(logger, f"{route} raised", e, duration_ms=_elapsed_ms(started))
            raise
        finally:
            clear_correlation_id()
