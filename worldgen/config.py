"""Application configuration using pydantic-settings."""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings loaded from WORLDGEN_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WORLDGEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Generation
    seed: int | None = None  # None = fresh entropy on every run
    habitable_zone: int = 3
    hz_variance: int = 0

    # Logging
    log_level: LogLevel = "WARNING"
    debug: bool = False  # Forces DEBUG logging

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper() if isinstance(value, str) else value

    @property
    def effective_log_level(self) -> int:
        """Numeric logging level after applying the debug flag."""
        if self.debug:
            return logging.DEBUG
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
