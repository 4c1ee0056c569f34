"""
Course error handling utilities.

Provides a decorator for consistent error handling across course-related
API endpoints. The exceptions themselves live in backend.core.exceptions.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from backend.core.exceptions import (
    CourseNotFoundError,
    CourseOperationError,
    CourseStoreError,
    DuplicateCourseIdError,
    InvalidCourseDataError,
)

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_course_errors(func: F) -> F:
    """
    Decorator to handle course-related errors and transform them into HTTPExceptions.

    This centralizes:
    - Logging of errors with context (course_id)
    - Mapping specific exceptions to HTTP status codes
    - Ensuring uniform error response formats
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except CourseNotFoundError as e:
            logger.warning(
                "Course not found",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=e.message
            )

        except InvalidCourseDataError as e:
            logger.warning(
                "Invalid course payload",
                extra={"course_id": e.course_id, "errors": e.errors}
            )
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors or e.message
            )

        except DuplicateCourseIdError as e:
            logger.warning(
                "Invalid course request",
                extra={"course_id": e.course_id, "error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=e.message
            )

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=[
                    {"loc": list(err["loc"]), "msg": err["msg"], "type": err["type"]}
                    for err in e.errors()
                ]
            )

        except (CourseOperationError, CourseStoreError) as e:
            logger.error(
                "Course store unavailable",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message
            )

        except HTTPException:
            raise

        except Exception as e:
            logger.exception(
                "Unexpected failure in course operation",
                extra={"error": str(e)}
            )
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred during course operation: {str(e)}"
            )

    return wrapper  # type: ignore
