"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: backend.configs, backend.application, backend.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.configs import Settings, get_settings
from backend.boundary.db import get_async_db
from backend.boundary.store import KeyValueCourseStore, KeyValueStore, SqlKeyValueStore
from backend.application.services.course_service import CourseService


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_key_value_store(db: AsyncSession = Depends(get_async_db)) -> KeyValueStore:
    """
    Get key-value store bound to the request's database session.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        KeyValueStore: SQL-backed key-value store
    """
    return SqlKeyValueStore(db=db)


def get_course_store(
    kv: KeyValueStore = Depends(get_key_value_store),
    settings: Settings = Depends(get_settings_dependency),
) -> KeyValueCourseStore:
    """
    Get course store keeping the course list under the configured key.

    Args:
        kv: Key-value store (injected)
        settings: Application settings (injected)

    Returns:
        KeyValueCourseStore: Whole-list course store
    """
    return KeyValueCourseStore(kv=kv, key=settings.store.courses_key)


def get_course_service(
    store: KeyValueCourseStore = Depends(get_course_store),
) -> CourseService:
    """
    Get course service instance.

    Args:
        store: Course store (injected via Depends)

    Returns:
        CourseService: Course service instance
    """
    return CourseService(store=store)
