"""
Course store configuration settings.

The whole course list lives under a single key of the key-value store.

Dependencies: pydantic, pydantic_settings
System role: Key naming for the course record store
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from backend.configs.base import BaseSettings


class StoreSettings(BaseSettings):
    """Key-value store key configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORE_",
        case_sensitive=False,
        extra="ignore",
    )

    courses_key: str = Field(
        default="campus-courses",
        description="Key holding the serialized course list",
    )
    health_check_key: str = Field(
        default="db-test-connection",
        description="Scratch key written and removed by the store health check",
    )
