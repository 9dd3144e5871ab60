"""Data extraction layer for the remote quote endpoint.

Wraps the httpx call with tenacity for network resilience and validates the
response before returning it to the caller. Every failure surfaces as a
single `FetchError` carrying a human-readable message.
"""

from typing import Any

import httpx
from loguru import logger
from pydantic import ValidationError
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from quote_browser.config.settings import ApiConfig
from quote_browser.core.domain_models import Quote, QuoteResponse


class FetchError(Exception):
    """The quote list could not be retrieved."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class QuoteExtractor:
    """Fetches the complete quote list from the remote API."""

    def __init__(
        self,
        api_config: ApiConfig | None = None,
        client: httpx.Client | None = None,
        retry_wait_seconds: float = 1.0,
    ) -> None:
        """Initialize the extractor.

        Args:
            api_config: Endpoint settings, defaults to the public dummyjson API
            client: Optional preconfigured httpx client (tests inject a MockTransport here)
            retry_wait_seconds: Multiplier for the exponential backoff between attempts
        """
        self.api_config = api_config or ApiConfig()
        self._client = client or httpx.Client(
            timeout=self.api_config.timeout_seconds,
            headers={"User-Agent": self.api_config.user_agent},
        )
        self._retrying = Retrying(
            stop=stop_after_attempt(self.api_config.retry_attempts),
            wait=wait_exponential(
                multiplier=retry_wait_seconds, min=0, max=10 * retry_wait_seconds
            ),
            retry=retry_if_exception_type(httpx.TransportError),
            reraise=True,
        )

    def _get_payload(self) -> Any:
        url = self.api_config.quotes_url
        logger.info(f"Fetching quotes from {url}")
        response = self._client.get(url)
        response.raise_for_status()
        return response.json()

    def fetch_response(self) -> QuoteResponse:
        """
        Fetch and validate the raw endpoint envelope.

        Transport errors (timeouts, refused connections) are retried with
        exponential backoff; HTTP status and payload errors are not.

        Raises:
            FetchError: On any transport, status, decoding or validation failure
        """
        try:
            payload = self._retrying(self._get_payload)
        except httpx.HTTPStatusError as e:
            msg = f"Server responded with {e.response.status_code} {e.response.reason_phrase}"
            logger.error(f"Failed to fetch quotes: {msg}")
            raise FetchError(msg) from e
        except httpx.HTTPError as e:
            msg = str(e) or type(e).__name__
            logger.error(f"Failed to fetch quotes: {msg}")
            raise FetchError(msg) from e
        except ValueError as e:
            # JSON decoding
            logger.error(f"Malformed quote payload: {e}")
            raise FetchError(f"Malformed response: {e}") from e

        try:
            quote_response = QuoteResponse.model_validate(payload)
        except ValidationError as e:
            logger.error(f"Unexpected quote payload: {e}")
            raise FetchError(
                f"Unexpected response format ({e.error_count()} validation errors)"
            ) from e

        if quote_response.is_truncated:
            logger.warning(
                f"Endpoint delivered {len(quote_response.quotes)} of "
                f"{quote_response.total} quotes"
            )
        return quote_response

    def fetch_all_quotes(self) -> list[Quote]:
        """
        Fetch the ordered quote list in a single call.

        No query parameters or authentication are sent; filtering and
        pagination happen client-side.

        Returns:
            Quotes in server order

        Raises:
            FetchError: If the quotes cannot be retrieved
        """
        quotes = list(self.fetch_response().quotes)
        logger.success(f"Fetched {len(quotes)} quotes")
        return quotes
