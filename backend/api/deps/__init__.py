"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_course_service,
    get_course_store,
    get_key_value_store,
    get_settings_dependency,
)

__all__ = [
    "get_course_service",
    "get_course_store",
    "get_key_value_store",
    "get_settings_dependency",
]
