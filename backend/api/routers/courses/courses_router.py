"""
Course API endpoints.

Routes:
- GET /courses - List courses with readiness (search, sort)
- PUT /courses - Replace the whole course list
- POST /courses - Create new course
- POST /courses/readiness - Evaluate an unsaved draft
- GET /courses/{id} - Get single course
- PATCH /courses/{id} - Partially update course
- DELETE /courses/{id} - Delete course
- GET /courses/{id}/readiness - Readiness of a stored course

Dependencies: backend.application.services, backend.models, backend.core.readiness
System role: Course checklist HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends

from backend.application.services.course_service import CourseService
from backend.api.deps.dependencies import get_course_service
from backend.core.readiness import evaluate_readiness
from backend.models.course import (
    CourseResponse,
    CourseSortKey,
    ReadinessResponse,
    SaveCoursesResponse,
)

from .course_error_handling import handle_course_errors
from .course_validators import (
    validate_course_creation,
    validate_course_list,
    validate_course_update,
)
from .course_responses import (
    map_course_to_response,
    map_courses_to_response,
    map_readiness_to_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=list[CourseResponse])
@handle_course_errors
async def list_courses(
    search: str | None = None,
    sort_by: CourseSortKey = CourseSortKey.NAME,
    course_service: CourseService = Depends(get_course_service),
) -> list[CourseResponse]:
    """
    List courses with derived readiness.

    Args:
        search: Case-insensitive substring of the course name
        sort_by: name, date (newest first) or status (ready first)
        course_service: Injected CourseService

    Returns:
        list[CourseResponse]: Matching courses

    Raises:
        HTTPException(503): Store unavailable
    """
    logger.info(
        "Listing courses",
        extra={"search": search, "sort_by": sort_by.value}
    )

    courses = await course_service.list_courses(search=search, sort_by=sort_by)

    logger.info(
        "Courses retrieved successfully",
        extra={"count": len(courses)}
    )

    return map_courses_to_response(courses)


@router.put("", response_model=SaveCoursesResponse)
@handle_course_errors
async def save_courses(
    payload: list[Any] = Body(...),
    course_service: CourseService = Depends(get_course_service),
) -> SaveCoursesResponse:
    """
    Replace the whole course list (last writer wins).

    Args:
        payload: Complete list of course objects
        course_service: Injected CourseService

    Returns:
        SaveCoursesResponse: Number of courses saved

    Raises:
        HTTPException(422): Malformed course entry
        HTTPException(400): Duplicate course ids
        HTTPException(503): Store unavailable
    """
    courses = validate_course_list(payload)

    logger.info("Saving course list", extra={"count": len(courses)})

    count = await course_service.replace_all(courses)

    return SaveCoursesResponse(
        message=f"Successfully saved {count} courses",
        count=count,
    )


@router.post("", response_model=CourseResponse, status_code=201)
@handle_course_errors
async def create_course(
    payload: dict[str, Any] = Body(...),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Create new course; id and creation time are assigned here.

    Args:
        payload: camelCase course fields, name required
        course_service: Injected CourseService

    Returns:
        CourseResponse: Created course with readiness

    Raises:
        HTTPException(422): Invalid payload
        HTTPException(503): Store unavailable
    """
    draft = validate_course_creation(payload)

    logger.info(
        "Creating new course",
        extra={"course_name": draft.name, "course_type": draft.type}
    )

    course = await course_service.create_course(draft)

    logger.info(
        "Course created successfully",
        extra={"course_id": course.id, "course_name": course.name}
    )

    return map_course_to_response(course)


@router.post("/readiness", response_model=ReadinessResponse)
@handle_course_errors
async def evaluate_draft_readiness(
    payload: dict[str, Any] = Body(...),
) -> ReadinessResponse:
    """
    Evaluate launch readiness of an unsaved, possibly partial course.

    Never fails on content: malformed fields show up as missing labels.

    Args:
        payload: camelCase course fields, any subset

    Returns:
        ReadinessResponse: Missing-field labels and readiness flag
    """
    return map_readiness_to_response(evaluate_readiness(payload))


@router.get("/{course_id}", response_model=CourseResponse)
@handle_course_errors
async def get_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Get single course by ID.

    Args:
        course_id: Course id
        course_service: Injected CourseService

    Returns:
        CourseResponse: Course data with readiness

    Raises:
        HTTPException(404): Course not found
        HTTPException(503): Store unavailable
    """
    logger.info(
        "Fetching course",
        extra={"course_id": course_id}
    )

    course = await course_service.get_course(course_id)

    return map_course_to_response(course)


@router.patch("/{course_id}", response_model=CourseResponse)
@handle_course_errors
async def update_course(
    course_id: int,
    payload: dict[str, Any] = Body(...),
    course_service: CourseService = Depends(get_course_service),
) -> CourseResponse:
    """
    Partially update a course.

    Args:
        course_id: Course id
        payload: camelCase fields to change; null clears a field
        course_service: Injected CourseService

    Returns:
        CourseResponse: Updated course with readiness

    Raises:
        HTTPException(404): Course not found
        HTTPException(422): Invalid payload
        HTTPException(503): Store unavailable
    """
    changes = validate_course_update(payload, course_id)

    logger.info(
        "Updating course",
        extra={"course_id": course_id, "fields": sorted(changes)}
    )

    course = await course_service.update_course(course_id, changes)

    logger.info(
        "Course updated successfully",
        extra={"course_id": course_id, "course_name": course.name}
    )

    return map_course_to_response(course)


@router.delete("/{course_id}", status_code=204)
@handle_course_errors
async def delete_course(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> None:
    """
    Delete course by ID.

    Args:
        course_id: Course id
        course_service: Injected CourseService

    Returns:
        204 No Content on success

    Raises:
        HTTPException(404): Course not found
        HTTPException(503): Store unavailable
    """
    logger.info(
        "Deleting course",
        extra={"course_id": course_id}
    )

    await course_service.delete_course(course_id)

    logger.info(
        "Course deleted successfully",
        extra={"course_id": course_id}
    )


@router.get("/{course_id}/readiness", response_model=ReadinessResponse)
@handle_course_errors
async def get_course_readiness(
    course_id: int,
    course_service: CourseService = Depends(get_course_service),
) -> ReadinessResponse:
    """
    Get launch readiness of a stored course.

    Args:
        course_id: Course id
        course_service: Injected CourseService

    Returns:
        ReadinessResponse: Missing-field labels and readiness flag

    Raises:
        HTTPException(404): Course not found
        HTTPException(503): Store unavailable
    """
    report = await course_service.get_readiness(course_id)

    logger.info(
        "Course readiness evaluated",
        extra={"course_id": course_id, "is_ready": report.is_ready}
    )

    return map_readiness_to_response(report)
