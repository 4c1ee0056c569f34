"""
Key-value entry CRUD operations.

Extends BaseCRUD with key-addressed get, overwrite and delete.

Dependencies: sqlalchemy, backend.boundary.db.models
System role: Key-value persistence operations
"""

from typing import Any

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.models.kv_entry_model import KeyValueEntryModel


class KeyValueCRUD(BaseCRUD[KeyValueEntryModel]):
    """
    CRUD operations for KeyValueEntryModel.

    Rows are addressed by ``key`` rather than by UUID. Writes only flush;
    committing is left to the caller.
    """

    def __init__(self) -> None:
        """Initialize KeyValueCRUD with KeyValueEntryModel."""
        super().__init__(KeyValueEntryModel)

    async def get_by_key(
        self,
        session: AsyncSession,
        key: str,
    ) -> KeyValueEntryModel | None:
        """
        Retrieve the entry stored under a key.

        Args:
            session: Async database session
            key: Lookup key

        Returns:
            KeyValueEntryModel if present, None otherwise
        """
        stmt = select(KeyValueEntryModel).where(KeyValueEntryModel.key == key)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def set_value(
        self,
        session: AsyncSession,
        key: str,
        value: Any,
    ) -> KeyValueEntryModel:
        """
        Create or overwrite the value stored under a key.

        Args:
            session: Async database session
            key: Lookup key
            value: JSON-compatible document

        Returns:
            KeyValueEntryModel: The written entry
        """
        entry = await self.get_by_key(session, key)
        if entry is None:
            return await self.create(session, key=key, value=value)

        entry.value = value
        await session.flush()
        await session.refresh(entry)
        return entry

    async def delete_by_key(self, session: AsyncSession, key: str) -> bool:
        """
        Delete the entry stored under a key.

        Args:
            session: Async database session
            key: Lookup key

        Returns:
            True if an entry was deleted, False if the key was absent
        """
        stmt = delete(KeyValueEntryModel).where(KeyValueEntryModel.key == key)
        result = await session.execute(stmt)
        return result.rowcount > 0


kv_crud = KeyValueCRUD()
