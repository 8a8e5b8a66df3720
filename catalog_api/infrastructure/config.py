"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False

    # Record store
    store_backend: Literal["database", "memory"] = Field(
        default="database",
        description="Where products live: a SQL database or process memory",
    )
    database_url: str = "sqlite+aiosqlite:///./catalog.db"

    # Queries
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=100, ge=1)
    default_sort_by: str = "name"

    # Id allocation
    id_allocation_attempts: int = Field(default=16, ge=1)

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "CATALOG_",
        "extra": "ignore",
    }


settings = Settings()
