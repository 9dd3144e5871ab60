"""Wiring for one quote screen session.

Loads configuration and builds the extractor and the state store from it.
"""

from concurrent.futures import Executor
from pathlib import Path

from loguru import logger

from quote_browser.app.logic.screen_state import QuoteScreenStore
from quote_browser.config.settings import Config, load_config
from quote_browser.etl.extract import QuoteExtractor


class QuoteScreenLoader:
    """Builds the collaborators of the quote screen from configuration."""

    def __init__(self, config_path: Path | None = None) -> None:
        """Initialize with configuration.

        Args:
            config_path: Path to the YAML configuration, defaults to `settings.config_path`
        """
        self.config: Config = load_config(config_path)

    def create_extractor(self) -> QuoteExtractor:
        return QuoteExtractor(self.config.api)

    def create_store(
        self,
        extractor: QuoteExtractor | None = None,
        executor: Executor | None = None,
    ) -> QuoteScreenStore:
        """Create a store for a newly opened screen.

        The store starts in the loading state; call `load()` to fetch.
        """
        extractor = extractor or self.create_extractor()
        display = self.config.display
        logger.debug(
            f"Creating quote screen store (page size {display.page_size}, "
            f"window radius {display.page_window_radius})"
        )
        return QuoteScreenStore(
            extractor.fetch_all_quotes,
            page_size=display.page_size,
            window_radius=display.page_window_radius,
            executor=executor,
        )
