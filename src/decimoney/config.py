"""Application configuration using Pydantic Settings.

Environment variables can override default values.
Use .env file for local development.
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from decimoney.domain.types import (
    DEFAULT_PRECISION,
    DEFAULT_ROUNDING,
    MAX_PRECISION,
    RoundingMode,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Environment variables should be prefixed with DECIMONEY_
    Example: DECIMONEY_DEFAULT_PRECISION=4
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DECIMONEY_",
        case_sensitive=False,
        extra="ignore",
    )

    # Arithmetic defaults
    default_precision: int = Field(
        default=DEFAULT_PRECISION,
        ge=0,
        le=MAX_PRECISION,
        description="Fractional digits kept by calculators built from settings",
    )
    max_precision: int = Field(
        default=18,
        ge=0,
        le=MAX_PRECISION,
        description="Largest precision accepted from user input (CLI, settings)",
    )
    rounding: RoundingMode = Field(
        default=DEFAULT_ROUNDING,
        description="Rounding rule (HALF_UP, HALF_EVEN, DOWN, ...)",
    )

    # Logging configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_format: str = Field(
        default="text",
        description="Log format (json or text)",
    )

    @field_validator("rounding", mode="before")
    @classmethod
    def validate_rounding(cls, v: object) -> object:
        """Accept ``half_even`` or ``ROUND_HALF_EVEN`` style names."""
        if isinstance(v, str) and not isinstance(v, RoundingMode):
            return RoundingMode.from_name(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Ensure log format is one we can render."""
        if v.lower() not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v.lower()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    return Settings()


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
