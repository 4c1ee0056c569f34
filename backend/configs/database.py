"""
Database configuration settings.

Manages the SQLAlchemy connection URL backing the key-value course store.
Defaults to a local SQLite file through aiosqlite.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Key-value store database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DATABASE_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str = Field(
        default="sqlite+aiosqlite:///./course_checklist.db",
        description="Async SQLAlchemy database URL",
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")
    create_tables_on_startup: bool = Field(
        default=True,
        description="Create missing tables when the application starts",
    )

    @property
    def is_sqlite(self) -> bool:
        """
        Whether the configured URL targets SQLite.

        Returns:
            bool: True for sqlite URLs (file or in-memory)
        """
        return self.url.startswith("sqlite")
