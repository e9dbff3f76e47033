"""
Configuration for the algokit command line interface.

Uses pydantic-settings for environment variable management. The library
functions never read these settings; the CLI passes them in explicitly.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class AlgokitSettings(BaseSettings):
    """Settings read from ``ALGOKIT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="ALGOKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(
        default="WARNING",
        description="Root log level configured by the CLI",
    )
    collinear_tolerance: float = Field(
        default=0.0,
        description="Cross products at or below this count as not a left turn",
        ge=0.0,
        allow_inf_nan=False,
    )
    output_precision: int = Field(
        default=6,
        description="Decimal places used when printing coordinates",
        ge=0,
        le=15,
    )


@lru_cache
def get_settings() -> AlgokitSettings:
    """Get cached settings instance."""
    return AlgokitSettings()
