"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from backend.boundary.db.CRUD import kv_crud

    entry = await kv_crud.get_by_key(db, "campus-courses")
"""

from backend.boundary.db.CRUD.base_crud import BaseCRUD
from backend.boundary.db.CRUD.kv_crud import KeyValueCRUD, kv_crud

__all__ = [
    "BaseCRUD",
    "KeyValueCRUD",
    "kv_crud",
]
