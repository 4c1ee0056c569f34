"""Service orchestrators."""

from .course_service import CourseService

__all__ = [
    "CourseService",
]
