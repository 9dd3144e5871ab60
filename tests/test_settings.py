"""Tests for YAML configuration loading and screen wiring."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from quote_browser.app.logic.data_loader import QuoteScreenLoader
from quote_browser.config.settings import load_config
from quote_browser.core.config import Settings

CONFIG_YAML = """
api:
  base_url: https://example.org/v1
  quotes_path: /quotes
  timeout_seconds: 2.5
display:
  page_size: 3
  page_window_radius: 1
"""


def test_load_config_reads_sections(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(CONFIG_YAML)

    config = load_config(config_path)

    assert config.api.quotes_url == "https://example.org/v1/quotes"
    assert config.api.timeout_seconds == 2.5
    assert config.api.retry_attempts == 3
    assert config.display.page_size == 3
    assert config.display.page_window_radius == 1


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("")

    config = load_config(config_path)

    assert config.api.quotes_url == "https://dummyjson.com/quotes"
    assert config.display.page_size == 5
    assert config.display.page_window_radius == 2


def test_load_config_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_load_config_rejects_invalid_page_size(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("display:\n  page_size: 0\n")
    with pytest.raises(ValidationError):
        load_config(config_path)


def test_bundled_config_is_valid() -> None:
    config = load_config(Settings().config_path)
    assert config.display.page_size == 5


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("QUOTES_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("QUOTES_DEBUG", "true")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.debug is True


def test_loader_creates_store_from_config(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(CONFIG_YAML)

    loader = QuoteScreenLoader(config_path)
    store = loader.create_store()

    assert store.state.query.page_size == 3
    assert store.state.window_radius == 1
    assert store.view().loading


def test_load_config_defaults_to_bundled_file() -> None:
    config = load_config()
    assert config.api.quotes_url == "https://dummyjson.com/quotes"


@pytest.mark.parametrize(
    ("debug", "log_level", "expected"),
    [(False, "info", "INFO"), (True, "WARNING", "DEBUG"), (False, "error", "ERROR")],
)
def test_effective_log_level(debug: bool, log_level: str, expected: str) -> None:
    assert Settings(debug=debug, log_level=log_level).effective_log_level == expected
