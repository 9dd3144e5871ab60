"""State holder for the quote screen.

All user actions and fetch completions arrive as intents and go through
`reduce`, the single transition function. `QuoteScreenStore` owns the current
`ScreenState`, applies intents one at a time and broadcasts every new
snapshot to its subscribers.
"""

import itertools
import threading
from collections.abc import Callable, Sequence
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field, replace

from loguru import logger

from quote_browser.app.logic.query_engine import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_WINDOW_RADIUS,
    DerivedState,
    QueryState,
    derive,
    page_window,
)
from quote_browser.core.domain_models import PageWindowItem, Quote, ScreenStatus
from quote_browser.etl.extract import FetchError

UNKNOWN_ERROR_MESSAGE = "An unknown error occurred"

# --- Intents ---


@dataclass(frozen=True)
class FetchStarted:
    request_id: int


@dataclass(frozen=True)
class FetchSucceeded:
    quotes: tuple[Quote, ...]
    request_id: int


@dataclass(frozen=True)
class FetchFailed:
    message: str
    request_id: int


@dataclass(frozen=True)
class SearchQueryChanged:
    text: str


@dataclass(frozen=True)
class SearchSubmitted:
    pass


@dataclass(frozen=True)
class DisplayAllRequested:
    pass


@dataclass(frozen=True)
class PageChanged:
    page: int


@dataclass(frozen=True)
class RetryRequested:
    pass


Intent = (
    FetchStarted
    | FetchSucceeded
    | FetchFailed
    | SearchQueryChanged
    | SearchSubmitted
    | DisplayAllRequested
    | PageChanged
    | RetryRequested
)


# --- State ---


@dataclass(frozen=True)
class ScreenState:
    """Immutable snapshot of the quote screen."""

    status: ScreenStatus = ScreenStatus.LOADING
    error: str | None = None
    query: QueryState = field(default_factory=QueryState)
    derived: DerivedState = field(default_factory=DerivedState)
    request_id: int = 0
    window_radius: int = DEFAULT_WINDOW_RADIUS

    @property
    def loading(self) -> bool:
        return self.status == ScreenStatus.LOADING

    @property
    def page_window(self) -> list[PageWindowItem]:
        return page_window(self.query.current_page, self.derived.total_pages, self.window_radius)

    def with_query(self, **changes: object) -> "ScreenState":
        """Return a copy with updated query inputs and a freshly derived projection."""
        query = replace(self.query, **changes)
        return replace(self, query=query, derived=derive(query))


@dataclass(frozen=True)
class ScreenView:
    """Everything the presentation layer needs to render the screen."""

    loading: bool
    error: str | None
    search_query: str
    filtered_quotes: tuple[Quote, ...]
    page_quotes: tuple[Quote, ...]
    current_page: int
    total_pages: int
    page_window: list[PageWindowItem]

    @property
    def previous_page(self) -> int:
        """Page before the current one, capped at the last page.

        An unsubmitted search can leave the current page beyond the last one.
        """
        return min(self.current_page, self.total_pages) - 1

    @property
    def has_previous(self) -> bool:
        return self.previous_page >= 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def show_no_results(self) -> bool:
        """A non-blank search that matched nothing."""
        return (
            not self.loading
            and self.error is None
            and not self.filtered_quotes
            and bool(self.search_query.strip())
        )

    @classmethod
    def from_state(cls, state: ScreenState) -> "ScreenView":
        return cls(
            loading=state.loading,
            error=state.error,
            search_query=state.query.search_query,
            filtered_quotes=state.derived.filtered_quotes,
            page_quotes=state.derived.page_quotes,
            current_page=state.query.current_page,
            total_pages=state.derived.total_pages,
            page_window=state.page_window,
        )


def initial_state(
    page_size: int = DEFAULT_PAGE_SIZE, window_radius: int = DEFAULT_WINDOW_RADIUS
) -> ScreenState:
    """State of a freshly opened screen: loading, page 1, no quotes."""
    return ScreenState(query=QueryState(page_size=page_size), window_radius=window_radius)


# --- Transitions ---


def reduce(state: ScreenState, intent: Intent) -> ScreenState:
    """Apply one intent.

    Returns the new state, or `state` itself when the intent's precondition
    does not hold.
    """
    if isinstance(intent, FetchStarted):
        return replace(
            state, status=ScreenStatus.LOADING, error=None, request_id=intent.request_id
        )

    if isinstance(intent, (FetchSucceeded, FetchFailed)):
        if state.status != ScreenStatus.LOADING or intent.request_id != state.request_id:
            logger.debug(
                f"Discarding response for request {intent.request_id} "
                f"(latest {state.request_id}, status {state.status.value})"
            )
            return state
        if isinstance(intent, FetchFailed):
            return replace(state, status=ScreenStatus.FAILED, error=intent.message)
        return replace(state, status=ScreenStatus.READY, error=None).with_query(
            all_quotes=tuple(intent.quotes), search_query="", current_page=1
        )

    if isinstance(intent, RetryRequested):
        if state.status != ScreenStatus.FAILED:
            return state
        return replace(state, status=ScreenStatus.LOADING, error=None)

    if state.status != ScreenStatus.READY:
        return state

    if isinstance(intent, SearchQueryChanged):
        return state.with_query(search_query=intent.text)
    if isinstance(intent, SearchSubmitted):
        return state.with_query(current_page=1)
    if isinstance(intent, DisplayAllRequested):
        return state.with_query(search_query="", current_page=1)
    if isinstance(intent, PageChanged):
        if not 1 <= intent.page <= state.derived.total_pages:
            logger.debug(
                f"Ignoring page {intent.page}, valid range is 1..{state.derived.total_pages}"
            )
            return state
        return state.with_query(current_page=intent.page)

    raise TypeError(f"Unknown intent: {intent!r}")


# --- Store ---


Subscriber = Callable[[ScreenState], None]


class QuoteScreenStore:
    """Single-writer, multi-reader holder of the quote screen state.

    Intents are applied sequentially under a lock; subscribers receive every
    new snapshot in the order it was produced.
    """

    def __init__(
        self,
        fetch_quotes: Callable[[], Sequence[Quote]],
        page_size: int = DEFAULT_PAGE_SIZE,
        window_radius: int = DEFAULT_WINDOW_RADIUS,
        executor: Executor | None = None,
    ) -> None:
        """Initialize the store.

        Args:
            fetch_quotes: Collaborator returning all quotes or raising `FetchError`
            page_size: Quotes per page
            window_radius: Page links shown around the current page
            executor: Runs fetches in the background; fetches run inline if None
        """
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._fetch_quotes = fetch_quotes
        self._executor = executor
        self._state = initial_state(page_size, window_radius)
        self._lock = threading.RLock()
        self._subscribers: list[Subscriber] = []
        self._request_ids = itertools.count(1)

    @property
    def state(self) -> ScreenState:
        return self._state

    def view(self) -> ScreenView:
        return ScreenView.from_state(self._state)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register a callback for state changes and return its unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def dispatch(self, intent: Intent) -> ScreenState:
        """Apply an intent and notify subscribers if the state changed."""
        with self._lock:
            previous = self._state
            new_state = reduce(previous, intent)
            if new_state is previous:
                return previous
            self._state = new_state
            for callback in list(self._subscribers):
                try:
                    callback(new_state)
                except Exception:
                    logger.exception(f"Subscriber {callback!r} failed on {type(intent).__name__}")

        if isinstance(intent, RetryRequested):
            logger.info("Retrying quote fetch")
            self.load()
        return new_state

    def load(self) -> Future[None] | None:
        """Start a fetch tagged with a new request id.

        Returns:
            The background future when an executor is configured, else None
        """
        with self._lock:
            request_id = next(self._request_ids)
            self.dispatch(FetchStarted(request_id))

        if self._executor is None:
            self._run_fetch(request_id)
            return None
        return self._executor.submit(self._run_fetch, request_id)

    def _run_fetch(self, request_id: int) -> None:
        try:
            quotes = self._fetch_quotes()
        except FetchError as e:
            message = e.message or UNKNOWN_ERROR_MESSAGE
        except Exception as e:
            logger.exception(f"Quote fetch {request_id} failed unexpectedly")
            message = str(e) or UNKNOWN_ERROR_MESSAGE
        else:
            self.dispatch(FetchSucceeded(tuple(quotes), request_id))
            return
        self.dispatch(FetchFailed(message, request_id))
