"""
Course record store.

The whole course list is read and written as one document under a single
key. There is no per-record addressing and no concurrency control: two
clients saving at the same time race, and the last writer wins. Callers
must not assume serializability.

Dependencies: pydantic, backend.boundary.store.kv_store, backend.models
System role: Course list persistence over a key-value store
"""

import logging
from typing import Any, Protocol, Sequence

from pydantic import ValidationError

from backend.boundary.store.kv_store import KeyValueStore
from backend.core.exceptions import CourseStoreError
from backend.models.course import CourseRecord

logger = logging.getLogger(__name__)


class CourseStore(Protocol):
    """Whole-collection course persistence (last writer wins)."""

    async def load(self) -> list[CourseRecord]:
        """Return every stored course, in stored order."""
        ...

    async def save_all(self, courses: Sequence[CourseRecord]) -> None:
        """Replace the stored collection with ``courses``."""
        ...


def serialize_courses(courses: Sequence[CourseRecord]) -> list[dict[str, Any]]:
    """
    Convert courses to their JSON-compatible wire form.

    Args:
        courses: Course records

    Returns:
        list[dict]: camelCase dicts with ISO-8601 date strings
    """
    return [course.to_wire() for course in courses]


def deserialize_courses(raw: list[Any]) -> list[CourseRecord]:
    """
    Rebuild course records from their wire form.

    Args:
        raw: List of camelCase dicts as stored

    Returns:
        list[CourseRecord]: Records with date fields parsed

    Raises:
        CourseStoreError: If an entry does not describe a valid course
    """
    courses = []
    for index, item in enumerate(raw):
        try:
            courses.append(CourseRecord.model_validate(item))
        except ValidationError as e:
            raise CourseStoreError(
                message=f"Stored course at position {index} is malformed",
                operation="load",
                details={"position": index, "errors": e.errors(include_url=False)},
            ) from e
    return courses


class KeyValueCourseStore:
    """CourseStore keeping the serialized list under one key of a KeyValueStore."""

    def __init__(self, kv: KeyValueStore, key: str) -> None:
        """
        Initialize course store.

        Args:
            kv: Underlying key-value store
            key: Key holding the course list
        """
        self.kv = kv
        self.key = key

    async def load(self) -> list[CourseRecord]:
        raw = await self.kv.get(self.key)
        if raw is None:
            return []
        if not isinstance(raw, list):
            raise CourseStoreError(
                message=f"Value under '{self.key}' is not a course list",
                operation="load",
                details={"key": self.key, "type": type(raw).__name__},
            )

        courses = deserialize_courses(raw)
        logger.debug("Courses loaded", extra={"key": self.key, "count": len(courses)})
        return courses

    async def save_all(self, courses: Sequence[CourseRecord]) -> None:
        await self.kv.set(self.key, serialize_courses(courses))
        logger.info("Courses saved", extra={"key": self.key, "count": len(courses)})
