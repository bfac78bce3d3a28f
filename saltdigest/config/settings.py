"""Configuration settings using Pydantic."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SALTDIGEST_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Salting
    origin_tag: str = Field(
        default="saltdigest",
        description="Name of the deploying application, hashed into every IV",
    )

    # I/O
    read_chunk_size: int = Field(
        default=1024 * 1024,
        gt=0,
        description="Bytes read per call when consuming a stream",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_file: Path | None = Field(default=None, description="Optional JSONL log file")

    @field_validator("origin_tag")
    @classmethod
    def origin_tag_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("origin_tag must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def log_level_known(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
