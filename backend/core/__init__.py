"""
Core business logic module.

Contains the readiness engine and the exception hierarchy.
All business rules and domain-specific logic reside here.
"""

from backend.core.exceptions import (
    CourseChecklistException,
    CourseError,
    CourseNotFoundError,
    CourseOperationError,
    CourseStoreError,
    DuplicateCourseIdError,
    InvalidCourseDataError,
)

__all__ = [
    "CourseChecklistException",
    "CourseError",
    "CourseNotFoundError",
    "CourseOperationError",
    "CourseStoreError",
    "DuplicateCourseIdError",
    "InvalidCourseDataError",
]
