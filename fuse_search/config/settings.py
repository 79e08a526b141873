"""Application settings and configuration management."""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support (FUSE_ prefix)."""

    # Application
    app_name: str = Field(default="Fuse Search")
    app_version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)

    # Search defaults
    location: int = Field(default=0, ge=0)
    distance: int = Field(default=100, ge=0)
    threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    case_sensitive: bool = Field(default=False)
    tokenize: bool = Field(default=False)
    max_pattern_length: Optional[int] = Field(default=None, ge=1)

    # Batch search
    batch_max_workers: Optional[int] = Field(default=None, ge=1)
    max_candidates: int = Field(default=10000, ge=1)

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    model_config = SettingsConfigDict(
        env_prefix="FUSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
