"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - KeyValueEntryModel: Key-value entry entity
  - BaseCRUD, KeyValueCRUD, kv_crud: CRUD operations

Dependencies: sqlalchemy, backend.configs
System role: Database adapter backing the key-value course store.
"""

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin
from backend.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from backend.boundary.db.models.kv_entry_model import KeyValueEntryModel
from backend.boundary.db.CRUD import BaseCRUD, KeyValueCRUD, kv_crud

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "KeyValueEntryModel",
    # CRUD
    "BaseCRUD",
    "KeyValueCRUD",
    "kv_crud",
]
