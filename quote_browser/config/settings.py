"""Configuration management for the Quote Browser.

Centralizes the remote API location and the display settings of the quote screen.
"""

from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import BaseModel, Field, HttpUrl, field_validator

from quote_browser.core.config import settings


class ApiConfig(BaseModel):
    """Remote quote endpoint configuration."""

    base_url: HttpUrl = Field(default="https://dummyjson.com/", validate_default=True)
    quotes_path: str = Field(default="quotes", description="Path of the list endpoint")
    timeout_seconds: float = Field(default=10.0, gt=0)
    retry_attempts: int = Field(
        default=3, ge=1, description="Transport attempts per fetch before giving up"
    )
    user_agent: str = Field(default="quote-browser/0.1")

    @property
    def quotes_url(self) -> str:
        """Absolute URL of the quote list endpoint."""
        return str(self.base_url).rstrip("/") + "/" + self.quotes_path.lstrip("/")


class DisplayConfig(BaseModel):
    """Quote screen display settings."""

    page_size: int = Field(default=5, description="Quotes per page")
    page_window_radius: int = Field(
        default=2, description="Page numbers shown on each side of the current page"
    )

    @field_validator("page_size")
    @classmethod
    def validate_page_size(cls, v: int) -> int:
        """Ensure at least one quote fits on a page."""
        if v < 1:
            raise ValueError("page_size must be positive")
        return v

    @field_validator("page_window_radius")
    @classmethod
    def validate_radius(cls, v: int) -> int:
        if v < 0:
            raise ValueError("page_window_radius must not be negative")
        return v


class Config(BaseModel):
    """Root configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        config_path: Path to config.yaml file, defaults to `settings.config_path`

    Returns:
        Parsed configuration object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If config file is malformed
    """
    config_path = config_path or settings.config_path
    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.info(f"Loading configuration from {config_path}")

    with config_path.open("r") as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    config = Config(**(raw_config or {}))
    logger.debug(
        f"Quotes endpoint: {config.api.quotes_url}, page size: {config.display.page_size}"
    )

    return config
