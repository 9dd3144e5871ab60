"""Application configuration using Pydantic V2."""

import sys
from pathlib import Path

from loguru import logger
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level settings read from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="QUOTES_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="quote-browser", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Debug mode")

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Paths
    config_path: Path = Field(
        default_factory=lambda: Path(__file__).parent.parent / "config" / "config.yaml",
        description="YAML file with API and display settings",
    )

    @property
    def effective_log_level(self) -> str:
        """Debug mode forces DEBUG output regardless of `log_level`."""
        return "DEBUG" if self.debug else self.log_level.upper()


_logging_configured = False


def configure_logging(level: str) -> None:
    """Route loguru output to stderr at the given level (first call wins)."""
    global _logging_configured
    if _logging_configured:
        return
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    _logging_configured = True


# Singleton instance
settings = Settings()
