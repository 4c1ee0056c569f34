"""
Key-value entry ORM model.

One row per key. The value column holds an arbitrary JSON document; the
course list is one such document stored under a single key.

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Persistence for the generic key-value store
"""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from backend.boundary.db.base import Base, TimestampMixin, UUIDMixin


class KeyValueEntryModel(Base, UUIDMixin, TimestampMixin):
    """
    Key-value entry ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        key: Unique lookup key (255 char limit)
        value: JSON document stored under the key
        created_at: Entry creation timestamp (UTC)
        updated_at: Last overwrite timestamp (UTC)
    """

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        doc="Lookup key",
    )

    value: Mapped[Any] = mapped_column(
        JSON,
        nullable=True,
        doc="Stored JSON document",
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntry {self.key}>"
