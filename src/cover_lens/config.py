"""Configuration management for Cover Lens."""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from rich.console import Console
from rich.logging import RichHandler

from cover_lens.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="COVER_LENS_",
        env_file=".env.local",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Input guard applied by the CLI before analysis
    max_input_chars: int = Field(
        default=10000,
        ge=1000,
        le=100000,
        description="Largest letter (in characters) accepted for analysis",
    )
    oversize_policy: Literal["truncate", "reject"] = Field(
        default="truncate",
        description="What to do with letters longer than max_input_chars",
    )

    # Engine
    parallel_analysers: bool = Field(
        default=False,
        description="Run the analyser stages on a thread pool",
    )
    lexicon_path: Path | None = Field(
        default=None,
        description="Optional JSON lexicon used instead of the built-in tables",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Raises:
        ConfigurationError: If a COVER_LENS_* variable is malformed or out of range.
    """
    try:
        return Settings()
    except ValidationError as e:
        logger.error(f"Invalid settings: {e}")
        raise ConfigurationError(f"Invalid settings:\n{e}") from e


def configure_logging(level: str = "INFO") -> None:
    """Route log records to stderr through rich, replacing existing root handlers."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
        force=True,
    )
