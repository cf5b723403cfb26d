"""Library configuration with environment variable validation."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env relative to the project root (4 levels up from this file)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="WARNING", validation_alias="PARSING_STRINGS_LOG_LEVEL")
    log_failures: bool = Field(default=False, validation_alias="PARSING_STRINGS_LOG_FAILURES")


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings."""
    return Settings()


def validate_settings() -> None:
    """Validate that all settings hold usable values."""
    settings = get_settings()
    errors = []

    if settings.log_level.upper() not in VALID_LOG_LEVELS:
        errors.append(
            f"PARSING_STRINGS_LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)}"
        )

    if errors:
        raise ValueError(f"Configuration errors: {'; '.join(errors)}")
