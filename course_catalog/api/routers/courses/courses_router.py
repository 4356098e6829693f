"""
Course endpoints.

    POST   /courses                  create (201), 409 on an active name clash
    GET    /courses                  list active courses, paginated
    GET    /courses/{id}             fetch one, retired or not
    PUT    /courses/{id}             partial update, 409 on a rename clash
    DELETE /courses/{id}             retire (204); the row is kept
    POST   /courses/{id}/reactivate  bring a retired course back

Dependencies: fastapi, course_catalog.application.services
System role: Course management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query

from course_catalog.api.deps.dependencies import get_course_service
from course_catalog.application.services.course_service import CourseService
from course_catalog.models.course import CourseResponse, CreateCourseRequest, UpdateCourseRequest

from .course_error_handling import handle_course_errors
from .course_validators import validate_course_creation, validate_course_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.post("", response_model=CourseResponse, status_code=201)
@handle_course_errors
async def create_course(
    request: CreateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    validate_course_creation(request)
    course_id = await course_service.create_course(
        name=request.name,
        description=request.description,
        metadata=request.metadata,
    )
    return CourseResponse(**await course_service.get_course(course_id))


@router.get("", response_model=list[CourseResponse])
@handle_course_errors
async def list_courses(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    include_inactive: bool = Query(False, description="Also list retired courses"),
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    courses = await course_service.get_all_courses(
        limit=limit, offset=offset, include_inactive=include_inactive
    )
    logger.debug("Listed courses", extra={"count": len(courses), "include_inactive": include_inactive})
    return [CourseResponse(**course) for course in courses]


@router.get("/{course_id}", response_model=CourseResponse)
@handle_course_errors
async def get_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    return CourseResponse(**await course_service.get_course(course_id))


@router.put("/{course_id}", response_model=CourseResponse)
@handle_course_errors
async def update_course(
    course_id: UUID,
    request: UpdateCourseRequest,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """Only fields present in the body change; a new name must be free among active courses."""
    validate_course_update(request)
    updated = await course_service.update_course(
        course_id=course_id,
        name=request.name,
        description=request.description,
        metadata=request.metadata,
    )
    return CourseResponse(**updated)


@router.delete("/{course_id}", status_code=204)
@handle_course_errors
async def delete_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> None:
    """Soft delete: status becomes INACTIVE and the name is released."""
    await course_service.delete_course(course_id)


@router.post("/{course_id}/reactivate", response_model=CourseResponse)
@handle_course_errors
async def reactivate_course(
    course_id: UUID,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    return CourseResponse(**await course_service.reactivate_course(course_id))
