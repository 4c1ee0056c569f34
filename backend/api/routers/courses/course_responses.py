"""
Course response mapping utilities.

Transforms course records and readiness reports into Pydantic response
models. Readiness is derived here on every response, never stored.

Dependencies: backend.models.course, backend.core.readiness
System role: Course response transformation
"""

from backend.core.readiness import ReadinessReport, evaluate_readiness
from backend.models.course import CourseRecord, CourseResponse, ReadinessResponse


def map_readiness_to_response(report: ReadinessReport) -> ReadinessResponse:
    """
    Transform a readiness report into ReadinessResponse.

    Args:
        report: Evaluated readiness

    Returns:
        ReadinessResponse: Pydantic model for API response
    """
    return ReadinessResponse(
        missing_fields=list(report.missing_fields),
        is_ready_for_launch=report.is_ready,
    )


def map_course_to_response(course: CourseRecord) -> CourseResponse:
    """
    Transform a course record into CourseResponse with its readiness.

    Args:
        course: Stored course

    Returns:
        CourseResponse: Pydantic model for API response
    """
    report = evaluate_readiness(course)
    return CourseResponse(
        **course.model_dump(),
        missing_fields=list(report.missing_fields),
        is_ready_for_launch=report.is_ready,
    )


def map_courses_to_response(courses: list[CourseRecord]) -> list[CourseResponse]:
    """
    Transform list of course records into list of CourseResponse.

    Args:
        courses: Stored courses

    Returns:
        list[CourseResponse]: List of Pydantic models for API response
    """
    return [map_course_to_response(course) for course in courses]
