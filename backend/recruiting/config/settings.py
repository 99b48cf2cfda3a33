"""
Engine Settings for the Recruiting Engine

Centralized configuration using Pydantic Settings with .env support.
Only runtime concerns live here; scoring thresholds are fixed tables in
recruiting.domain.constants.
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import ValidationError as PydanticValidationError
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from recruiting.infrastructure.exceptions import ConfigurationError

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """
    Engine settings loaded from RECRUITING_* environment variables.

    Example:
        RECRUITING_ENVIRONMENT=production
        RECRUITING_LOG_LEVEL=warning
    """

    # Application Settings
    environment: Literal["development", "production", "testing"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    model_config = SettingsConfigDict(
        env_prefix="RECRUITING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def normalize_environment(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    try:
        return Settings()
    except PydanticValidationError as e:
        invalid_keys = [
            ".".join(str(part) for part in error["loc"]) for error in e.errors()
        ]
        raise ConfigurationError(
            f"Invalid engine configuration: {', '.join(invalid_keys)}",
            invalid_keys=invalid_keys,
            original_error=e,
        ) from e
