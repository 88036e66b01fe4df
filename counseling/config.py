"""
Configuration settings for the college counseling allocator.

Uses Pydantic Settings to load environment variables for file locations,
logging, and the exit status reported after a handled failure. Every field
has a default that reproduces the stock behaviour, so nothing needs to be set.
"""
from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Data files
    indirection_file: str = Field("data.txt", alias="INDIRECTION_FILE")
    default_dataset: str = Field("default_data.txt", alias="DEFAULT_DATASET")

    # Logging
    log_level: str = Field("WARNING", alias="LOG_LEVEL")
    json_logs: bool = Field(False, alias="JSON_LOGS")

    # Process exit status after a reported error
    error_exit_code: int = Field(0, alias="ERROR_EXIT_CODE")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Retrieve a cached instance of Settings to avoid repeated env parsing.
    """
    return Settings()


__all__ = ["Settings", "get_settings"]
