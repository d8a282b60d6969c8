"""
Library settings for ddd-commons.

Values are read from environment variables prefixed with ``DDD_COMMONS_``
(or an ``.env`` file) so that services can tune logging, paging defaults and
serialization without code changes.
"""
import pickle
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DddCommonsSettings(BaseSettings):
    """Settings shared by the DTO engine, queries and logging."""

    model_config = SettingsConfigDict(
        env_prefix="DDD_COMMONS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_verbosity: str = Field(default="NORMAL")
    log_format: str = Field(default="simple")

    # Pagination Configuration
    default_page_size: int = Field(default=10, ge=0)
    page_max_size: int = Field(default=1000, ge=0)

    # Serialization Configuration
    pickle_protocol: int = Field(default=pickle.HIGHEST_PROTOCOL, ge=0, le=pickle.HIGHEST_PROTOCOL)
    serializer_compression: bool = Field(default=False)
    serializer_compression_threshold: int = Field(default=1024, ge=0)  # Compress if > 1KB
    json_ensure_ascii: bool = Field(default=False)


@lru_cache
def get_settings() -> DddCommonsSettings:
    """Get cached library settings."""
    return DddCommonsSettings()
