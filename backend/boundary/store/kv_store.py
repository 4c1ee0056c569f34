"""
Generic key-value store.

A get/set/delete interface over opaque JSON documents, and its SQL-backed
implementation. Each ``set`` commits on its own; there is no transaction
spanning several calls.

Dependencies: sqlalchemy, backend.boundary.db, backend.core.exceptions
System role: Key-value storage adapter
"""

import logging
from typing import Any, Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.kv_crud import kv_crud
from backend.core.exceptions import CourseStoreError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Key-addressed storage of JSON-compatible values."""

    async def get(self, key: str) -> Any | None:
        """Return the value under ``key``, or None when absent."""
        ...

    async def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove ``key``; True if it existed."""
        ...


class SqlKeyValueStore:
    """
    KeyValueStore backed by the ``kv_entries`` table.

    Database failures are raised as CourseStoreError after the session
    has been rolled back.
    """

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize store with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    async def get(self, key: str) -> Any | None:
        try:
            entry = await kv_crud.get_by_key(self.db, key)
        except SQLAlchemyError as e:
            raise await self._failure("get", key, e) from e
        return entry.value if entry is not None else None

    async def set(self, key: str, value: Any) -> None:
        try:
            await kv_crud.set_value(self.db, key, value)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._failure("set", key, e) from e

    async def delete(self, key: str) -> bool:
        try:
            deleted = await kv_crud.delete_by_key(self.db, key)
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._failure("delete", key, e) from e
        return deleted

    async def _failure(self, operation: str, key: str, error: Exception) -> CourseStoreError:
        await self.db.rollback()
        logger.error(
            "Key-value store operation failed",
            extra={"operation": operation, "key": key, "error": str(error)},
        )
        return CourseStoreError(
            message=f"Key-value store {operation} failed for key '{key}'",
            operation=operation,
            details={"key": key, "error": str(error)},
        )
