"""
Shared test fixtures and configuration for entire test suite.

Provides: in-memory SQLite async sessions, an in-memory key-value store,
sample course payloads and a course service wired to the in-memory store.
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import copy
from typing import Any

import pytest

from backend.application.services.course_service import CourseService
from backend.boundary.store import KeyValueCourseStore
from backend.core.exceptions import CourseStoreError

COURSES_KEY = "campus-courses"


class InMemoryKeyValueStore:
    """KeyValueStore kept in a dict; can be told to fail writes."""

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = data or {}
        self.fail_writes = False
        self.set_calls = 0

    async def get(self, key: str) -> Any | None:
        return copy.deepcopy(self.data.get(key))

    async def set(self, key: str, value: Any) -> None:
        self.set_calls += 1
        if self.fail_writes:
            raise CourseStoreError("Simulated write failure", operation="set")
        self.data[key] = copy.deepcopy(value)

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from backend.boundary.db.base import Base
    from backend.boundary.db.create_tables import create_all_tables

    # Use SQLite in-memory database for tests
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    await create_all_tables(engine)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    # Cleanup
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def in_memory_kv() -> InMemoryKeyValueStore:
    """Provide an empty in-memory key-value store."""
    return InMemoryKeyValueStore()


@pytest.fixture
def course_store(in_memory_kv: InMemoryKeyValueStore) -> KeyValueCourseStore:
    """Provide a course store over the in-memory key-value store."""
    return KeyValueCourseStore(kv=in_memory_kv, key=COURSES_KEY)


@pytest.fixture
def course_service(course_store: KeyValueCourseStore) -> CourseService:
    """Provide CourseService backed by the in-memory store."""
    return CourseService(store=course_store)


@pytest.fixture
def ready_course() -> dict[str, Any]:
    """A non-certificate course that satisfies every launch condition."""
    return {
        "name": "Intro to X",
        "type": "no_certificate",
        "homePageOption": "aboutLink",
        "aboutPageLink": "https://x.test/about",
        "supportContact": "a@b.com",
        "marketingImagesAvailable": True,
        "surveysAdded": True,
        "syllabusRequired": False,
    }


@pytest.fixture
def stored_course(ready_course: dict[str, Any]) -> dict[str, Any]:
    """The ready course as it sits in the store, with id and createdAt."""
    return {
        **ready_course,
        "id": 1700000000000,
        "createdAt": "2024-11-14T22:13:20+00:00",
    }
