"""Logic layer for searching and paging through quotes.

Pure functions over the fetched quote list - no I/O, no Streamlit calls.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from quote_browser.core.domain_models import ELLIPSIS, PageWindowItem, Quote

DEFAULT_PAGE_SIZE = 5
DEFAULT_WINDOW_RADIUS = 2


@dataclass(frozen=True)
class QueryState:
    """Inputs of the quote query: the fetched set plus search and page."""

    all_quotes: tuple[Quote, ...] = ()
    search_query: str = ""
    current_page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class DerivedState:
    """Filtered and paginated projection of a `QueryState`."""

    filtered_quotes: tuple[Quote, ...] = ()
    total_pages: int = 0
    page_quotes: tuple[Quote, ...] = ()


def matches_query(quote: Quote, search_query: str) -> bool:
    """Case-insensitive substring match against quote text or author."""
    needle = search_query.casefold()
    return needle in quote.text.casefold() or needle in quote.author.casefold()


def filter_quotes(all_quotes: Sequence[Quote], search_query: str) -> list[Quote]:
    """Return the quotes matching the search query, keeping their order.

    A blank query (empty or whitespace only) matches everything.
    """
    if not search_query.strip():
        return list(all_quotes)
    return [quote for quote in all_quotes if matches_query(quote, search_query)]


def paginate(
    filtered_quotes: Sequence[Quote], current_page: int, page_size: int
) -> tuple[int, list[Quote]]:
    """Slice out one page of quotes.

    Args:
        filtered_quotes: Quotes to page through
        current_page: 1-based page number, not clamped
        page_size: Quotes per page

    Returns:
        Tuple of (total_pages, quotes on the requested page). A page outside
        the available range yields an empty list.

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size < 1:
        raise ValueError(f"page_size must be positive, got {page_size}")

    count = len(filtered_quotes)
    total_pages = math.ceil(count / page_size)

    start_index = (current_page - 1) * page_size
    end_index = min(start_index + page_size, count)
    if start_index < 0 or start_index >= count or start_index >= end_index:
        return total_pages, []
    return total_pages, list(filtered_quotes[start_index:end_index])


def page_window(
    current_page: int, total_pages: int, radius: int = DEFAULT_WINDOW_RADIUS
) -> list[PageWindowItem]:
    """Compact list of page links around the current page.

    First and last page are always present, neighbours within `radius` of the
    current page are added, and an ellipsis marks every skipped run.

    Example:
        page_window(10, 20) -> [1, ..., 8, 9, 10, 11, 12, ..., 20]
    """
    if total_pages < 1:
        return []

    pages = {1, total_pages}
    pages.update(
        page
        for page in range(current_page - radius, current_page + radius + 1)
        if 1 <= page <= total_pages
    )

    window: list[PageWindowItem] = []
    last_page = 0
    for page in sorted(pages):
        if page > last_page + 1:
            window.append(ELLIPSIS)
        window.append(page)
        last_page = page
    return window


def derive(query: QueryState) -> DerivedState:
    """Run filter then paginate and bundle both results."""
    filtered = filter_quotes(query.all_quotes, query.search_query)
    total_pages, page_quotes = paginate(filtered, query.current_page, query.page_size)
    return DerivedState(
        filtered_quotes=tuple(filtered),
        total_pages=total_pages,
        page_quotes=tuple(page_quotes),
    )
