"""Tests for the quote extractor against a mocked HTTP transport."""

from collections.abc import Callable

import httpx
import pytest

from quote_browser.config.settings import ApiConfig
from quote_browser.core.domain_models import Quote
from quote_browser.etl.extract import FetchError, QuoteExtractor

Handler = Callable[[httpx.Request], httpx.Response]

PAYLOAD = {
    "quotes": [
        {"id": 1, "quote": "Life isn't about getting and having.", "author": "Kevin Kruse"},
        {"id": 2, "quote": "Whatever the mind can conceive.", "author": "Napoleon Hill"},
    ],
    "total": 2,
    "skip": 0,
    "limit": 2,
}


def make_extractor(handler: Handler, retry_attempts: int = 3) -> QuoteExtractor:
    api_config = ApiConfig(base_url="https://quotes.test/api/", retry_attempts=retry_attempts)
    client = httpx.Client(transport=httpx.MockTransport(handler))
    return QuoteExtractor(api_config, client=client, retry_wait_seconds=0)


def test_fetch_all_quotes_parses_payload() -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json=PAYLOAD)

    quotes = make_extractor(handler).fetch_all_quotes()

    assert quotes == [
        Quote(id=1, text="Life isn't about getting and having.", author="Kevin Kruse"),
        Quote(id=2, text="Whatever the mind can conceive.", author="Napoleon Hill"),
    ]
    assert len(requests) == 1
    assert str(requests[0].url) == "https://quotes.test/api/quotes"
    assert requests[0].url.query == b""


def test_fetch_response_keeps_envelope_counts() -> None:
    payload = {**PAYLOAD, "total": 100, "limit": 2}
    response = make_extractor(lambda request: httpx.Response(200, json=payload)).fetch_response()
    assert response.total == 100
    assert response.is_truncated


def test_missing_counts_default() -> None:
    payload = {"quotes": PAYLOAD["quotes"]}
    response = make_extractor(lambda request: httpx.Response(200, json=payload)).fetch_response()
    assert response.total is None
    assert not response.is_truncated


def test_http_error_status_raises_fetch_error_without_retry() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(503)

    with pytest.raises(FetchError) as exc_info:
        make_extractor(handler).fetch_all_quotes()

    assert "503" in exc_info.value.message
    assert calls == 1


def test_transport_error_is_retried_then_raised() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        raise httpx.ConnectTimeout("timeout", request=request)

    with pytest.raises(FetchError) as exc_info:
        make_extractor(handler, retry_attempts=3).fetch_all_quotes()

    assert exc_info.value.message == "timeout"
    assert calls == 3


def test_transport_error_recovers_on_retry() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        if calls == 1:
            raise httpx.ConnectError("connection refused", request=request)
        return httpx.Response(200, json=PAYLOAD)

    assert len(make_extractor(handler).fetch_all_quotes()) == 2
    assert calls == 2


def test_malformed_json_raises_fetch_error() -> None:
    handler: Handler = lambda request: httpx.Response(200, content=b"<html>")  # noqa: E731
    with pytest.raises(FetchError, match="Malformed response"):
        make_extractor(handler).fetch_all_quotes()


def test_unexpected_shape_raises_fetch_error() -> None:
    payload = {"quotes": [{"id": "one", "author": "Nobody"}]}
    handler: Handler = lambda request: httpx.Response(200, json=payload)  # noqa: E731
    with pytest.raises(FetchError, match="Unexpected response format"):
        make_extractor(handler).fetch_all_quotes()
