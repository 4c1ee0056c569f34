"""
Course service orchestrator.

Coordinates the course checklist lifecycle: listing with derived readiness,
creation, partial updates, deletion and whole-list replacement.

Every mutation is optimistic. The in-memory list is changed first, the
whole list is then persisted, and if persisting fails the previous list is
restored before the error propagates.

Dependencies: backend.boundary.store, backend.core.readiness, backend.models
System role: Course use case orchestration
"""

import logging
import time
from datetime import datetime, timezone
from typing import Any, Sequence

from backend.boundary.store.course_store import CourseStore
from backend.core.exceptions import (
    CourseNotFoundError,
    CourseOperationError,
    CourseStoreError,
    DuplicateCourseIdError,
    InvalidCourseDataError,
)
from backend.core.readiness import ReadinessReport, evaluate_readiness, unknown_fields
from backend.models.course import (
    IMMUTABLE_FIELDS,
    CourseDraft,
    CourseRecord,
    CourseSortKey,
)

logger = logging.getLogger(__name__)


def next_course_id(existing: Sequence[CourseRecord], now_ms: int | None = None) -> int:
    """
    Allocate a course id.

    Millisecond timestamp, bumped past the largest id already in the list so
    two creations in the same millisecond cannot collide.

    Args:
        existing: Courses currently in the list
        now_ms: Current time in epoch milliseconds (defaults to the clock)

    Returns:
        int: New unique id
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    highest = max((course.id for course in existing), default=0)
    return max(now_ms, highest + 1)


def sort_courses(courses: Sequence[CourseRecord], sort_by: CourseSortKey) -> list[CourseRecord]:
    """
    Order courses for the dashboard.

    name: case-insensitive alphabetical. date: newest first, undated last.
    status: ready courses first, otherwise stored order.
    """
    if sort_by == CourseSortKey.DATE:
        return sorted(
            courses,
            key=lambda c: c.created_at.timestamp() if c.created_at else 0.0,
            reverse=True,
        )
    if sort_by == CourseSortKey.STATUS:
        return sorted(courses, key=lambda c: not evaluate_readiness(c).is_ready)
    return sorted(courses, key=lambda c: c.name.casefold())


class CourseService:
    """Course service orchestrator."""

    def __init__(self, store: CourseStore) -> None:
        """
        Initialize course service with a course store.

        Args:
            store: Whole-list course persistence
        """
        self.store = store
        self._courses: list[CourseRecord] | None = None

    @property
    def courses(self) -> list[CourseRecord]:
        """Current in-memory list (empty until loaded)."""
        return list(self._courses or [])

    async def reload(self) -> list[CourseRecord]:
        """
        Replace the in-memory list with the authoritative stored list.

        Returns:
            list[CourseRecord]: Freshly loaded courses

        Raises:
            CourseStoreError: If the store cannot be read
        """
        self._courses = await self.store.load()
        return self.courses

    async def _loaded(self) -> list[CourseRecord]:
        if self._courses is None:
            await self.reload()
        return self._courses

    async def _commit(self, updated: list[CourseRecord], operation: str) -> None:
        previous = self._courses
        self._courses = updated
        try:
            await self.store.save_all(updated)
        except CourseStoreError as e:
            self._courses = previous
            logger.error(
                "Failed to persist course list, local changes reverted",
                extra={"operation": operation, "error": str(e)},
            )
            raise CourseOperationError(f"Failed to {operation}: {e.message}") from e

    async def list_courses(
        self,
        search: str | None = None,
        sort_by: CourseSortKey = CourseSortKey.NAME,
    ) -> list[CourseRecord]:
        """
        List courses, optionally filtered by name and sorted.

        Args:
            search: Case-insensitive substring of the course name
            sort_by: Dashboard ordering

        Returns:
            list[CourseRecord]: Matching courses
        """
        courses = await self._loaded()
        if search:
            needle = search.casefold()
            courses = [c for c in courses if needle in c.name.casefold()]
        return sort_courses(courses, sort_by)

    async def get_course(self, course_id: int) -> CourseRecord:
        """
        Get course by ID.

        Args:
            course_id: Course id

        Returns:
            CourseRecord: The course

        Raises:
            CourseNotFoundError: If no course has this id
        """
        for course in await self._loaded():
            if course.id == course_id:
                return course
        raise CourseNotFoundError(course_id)

    async def get_readiness(self, course_id: int) -> ReadinessReport:
        """Evaluate launch readiness of a stored course."""
        return evaluate_readiness(await self.get_course(course_id))

    async def create_course(self, draft: CourseDraft) -> CourseRecord:
        """
        Create a course from a draft, assigning id and creation time.

        Args:
            draft: Course fields; name must be set

        Returns:
            CourseRecord: The created course

        Raises:
            CourseOperationError: If the list could not be persisted
        """
        courses = await self._loaded()
        data = draft.model_dump(by_alias=True, exclude_none=True)
        data["id"] = next_course_id(courses)
        data["createdAt"] = datetime.now(timezone.utc)
        course = CourseRecord.model_validate(data)

        await self._commit([*courses, course], "create course")

        logger.info(
            "Course created",
            extra={"course_id": course.id, "course_name": course.name},
        )
        return course

    async def update_course(self, course_id: int, changes: dict[str, Any]) -> CourseRecord:
        """
        Apply a partial update to a course.

        ``id`` and ``createdAt`` in ``changes`` are ignored. A ``None`` value
        clears the field back to its default.

        Args:
            course_id: Course id
            changes: camelCase field -> new value

        Returns:
            CourseRecord: Updated course

        Raises:
            CourseNotFoundError: If no course has this id
            InvalidCourseDataError: If a key is not a course wire field name
            CourseOperationError: If the list could not be persisted
        """
        unknown = unknown_fields({k: v for k, v in changes.items() if k not in IMMUTABLE_FIELDS})
        if unknown:
            raise InvalidCourseDataError(
                "Unknown course fields",
                errors=[
                    {"field": e.field, "label": None, "message": e.message} for e in unknown
                ],
                course_id=course_id,
            )

        current = await self.get_course(course_id)
        merged = current.to_wire()
        for field, value in changes.items():
            if field in IMMUTABLE_FIELDS:
                continue
            if value is None:
                merged.pop(field, None)
            else:
                merged[field] = value
        updated = CourseRecord.model_validate(merged)

        courses = [updated if c.id == course_id else c for c in self._courses]
        await self._commit(courses, "update course")

        logger.info(
            "Course updated",
            extra={"course_id": course_id, "updates": sorted(set(changes) - IMMUTABLE_FIELDS)},
        )
        return updated

    async def delete_course(self, course_id: int) -> None:
        """
        Delete course by ID.

        Raises:
            CourseNotFoundError: If no course has this id
            CourseOperationError: If the list could not be persisted
        """
        await self.get_course(course_id)
        courses = [c for c in self._courses if c.id != course_id]
        await self._commit(courses, "delete course")
        logger.info("Course deleted", extra={"course_id": course_id})

    async def replace_all(self, courses: Sequence[CourseRecord]) -> int:
        """
        Replace the whole course list.

        Args:
            courses: New complete list

        Returns:
            int: Number of courses saved

        Raises:
            DuplicateCourseIdError: If two courses share an id
            CourseOperationError: If the list could not be persisted
        """
        seen: set[int] = set()
        for course in courses:
            if course.id in seen:
                raise DuplicateCourseIdError(
                    f"Course id {course.id} appears more than once", course_id=course.id
                )
            seen.add(course.id)

        await self._commit(list(courses), "save courses")

        logger.info("Course list replaced", extra={"count": len(courses)})
        return len(courses)
