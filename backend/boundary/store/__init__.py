"""
Course record store.

Exports the key-value and course store interfaces with their implementations.
"""

from backend.boundary.store.course_store import (
    CourseStore,
    KeyValueCourseStore,
    deserialize_courses,
    serialize_courses,
)
from backend.boundary.store.kv_store import KeyValueStore, SqlKeyValueStore

__all__ = [
    "CourseStore",
    "KeyValueCourseStore",
    "KeyValueStore",
    "SqlKeyValueStore",
    "deserialize_courses",
    "serialize_courses",
]
