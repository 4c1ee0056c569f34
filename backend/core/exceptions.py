"""
Exception hierarchy for the course launch checklist.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.
The readiness engine itself never raises; these cover the application
and storage layers around it.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseChecklistException(Exception):
    """Base exception for all course checklist application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class CourseError(CourseChecklistException):
    """Base class for course-related errors."""

    def __init__(
        self,
        message: str,
        course_id: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.course_id = course_id
        details = details or {}
        if course_id is not None:
            details["course_id"] = course_id
        super().__init__(message, details)


class CourseNotFoundError(CourseError):
    """Raised when a course is not found."""

    def __init__(self, course_id: int) -> None:
        super().__init__(f"Course {course_id} does not exist", course_id=course_id)


class DuplicateCourseIdError(CourseError):
    """Raised when a course list contains the same id twice."""


class InvalidCourseDataError(CourseError):
    """
    Raised when a course payload fails structural validation.

    Attributes:
        errors: Field-level errors as ``{"field", "label", "message"}`` dicts
    """

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        course_id: int | None = None,
    ) -> None:
        self.errors = errors or []
        super().__init__(message, course_id=course_id)


class CourseOperationError(CourseError):
    """Raised when a course operation fails at the service or boundary layer."""


class CourseStoreError(CourseChecklistException):
    """Raised when the course store cannot be read or written."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error.

        Args:
            message: Error message
            operation: Operation that failed (load, save_all, get, set, delete)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)
