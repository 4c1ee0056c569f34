"""
Database models package.

Exports:
  - KeyValueEntryModel: Key-value entry ORM model

Dependencies: sqlalchemy, backend.boundary.db.base
System role: Database model definitions
"""

from backend.boundary.db.models.kv_entry_model import KeyValueEntryModel

__all__ = ["KeyValueEntryModel"]
