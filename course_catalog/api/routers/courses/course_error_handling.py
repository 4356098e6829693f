"""
Translation of course exceptions into HTTP responses.

Every course endpoint is wrapped in handle_course_errors so that the
same exception always yields the same status code and body shape.

Dependencies: fastapi, pydantic, course_catalog.core
System role: Course error mapping
"""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError as SchemaValidationError

from course_catalog.core.exceptions import (
    CourseNameConflictError,
    CourseNotFoundError,
    ValidationError,
)
from course_catalog.models.course import FieldErrorResponse

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def _field_detail(error: ValidationError) -> dict[str, Any]:
    return FieldErrorResponse(field=error.field, message=error.message).model_dump()


def handle_course_errors(func: F) -> F:
    """
    Map exceptions escaping a course endpoint to HTTPException.

    CourseNotFoundError        -> 404
    CourseNameConflictError    -> 409, {"field", "message"}
    core ValidationError       -> 400, {"field", "message"}
    pydantic ValidationError   -> 422, error list
    HTTPException              -> unchanged
    anything else              -> 500, logged with traceback
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except HTTPException:
            raise
        except CourseNotFoundError as e:
            logger.warning("Course not found", extra={"course_id": str(e.course_id)})
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
        except CourseNameConflictError as e:
            logger.warning("Course name already taken", extra={"course_name": e.name})
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=_field_detail(e))
        except ValidationError as e:
            logger.warning("Course rejected", extra={"field": e.field, "error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=_field_detail(e))
        except SchemaValidationError as e:
            logger.warning("Course payload failed schema validation", extra={"errors": e.error_count()})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(include_url=False),
            )
        except Exception as e:
            logger.exception("Course operation crashed", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="An internal error occurred during course operation",
            )

    return wrapper  # type: ignore[return-value]
