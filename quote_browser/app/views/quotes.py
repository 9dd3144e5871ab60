"""Rendering of the quote list, search bar and pagination controls."""

from collections.abc import Callable

import streamlit as st

from quote_browser.app.logic.screen_state import (
    DisplayAllRequested,
    Intent,
    PageChanged,
    ScreenView,
    SearchQueryChanged,
    SearchSubmitted,
)
from quote_browser.app.views.constants import SEARCH_INPUT_KEY
from quote_browser.core.domain_models import PageEllipsis, PageWindowItem, Quote

Dispatch = Callable[[Intent], object]


def render_search_bar(view: ScreenView, dispatch: Dispatch) -> None:
    """Search field with Search and Display All buttons.

    Pressing Enter in the field submits the search, like the Search button.
    """

    def on_text_submitted() -> None:
        dispatch(SearchQueryChanged(st.session_state[SEARCH_INPUT_KEY]))
        dispatch(SearchSubmitted())

    def on_display_all() -> None:
        dispatch(DisplayAllRequested())
        st.session_state[SEARCH_INPUT_KEY] = ""

    # Keep the widget in sync with the store (e.g. after a refetch)
    st.session_state[SEARCH_INPUT_KEY] = view.search_query

    col_input, col_search = st.columns([5, 1], vertical_alignment="bottom")
    with col_input:
        st.text_input(
            "Search for a quote or author",
            key=SEARCH_INPUT_KEY,
            on_change=on_text_submitted,
        )
    with col_search:
        st.button("Search", on_click=dispatch, args=(SearchSubmitted(),), type="primary")

    st.button("Display All Quotes", on_click=on_display_all, use_container_width=True)


def render_quote_card(quote: Quote) -> None:
    with st.container(border=True):
        st.markdown(f"“{quote.text}”")
        st.caption(f"— {quote.author}")


def render_quote_list(view: ScreenView) -> None:
    """Render the quotes of the current page."""
    if view.show_no_results:
        st.write(f'No quotes found for "{view.search_query}"')
        return
    for quote in view.page_quotes:
        render_quote_card(quote)


def render_pagination_controls(view: ScreenView, dispatch: Dispatch) -> None:
    """Previous/Next buttons around the page window.

    Hidden when everything fits on one page.
    """
    if view.total_pages <= 1:
        return

    items: list[PageWindowItem | str] = []
    if view.has_previous:
        items.append("previous")
    items.extend(view.page_window)
    if view.has_next:
        items.append("next")

    cols = st.columns(len(items))
    for col, item in zip(cols, items):
        with col:
            if item == "previous":
                st.button(
                    "Previous",
                    key="page_previous",
                    on_click=dispatch,
                    args=(PageChanged(view.previous_page),),
                )
            elif item == "next":
                st.button(
                    "Next",
                    key="page_next",
                    on_click=dispatch,
                    args=(PageChanged(view.current_page + 1),),
                )
            elif isinstance(item, PageEllipsis):
                st.markdown(f"<div style='text-align:center'>{item}</div>", unsafe_allow_html=True)
            elif item == view.current_page:
                st.button(str(item), key=f"page_{item}", disabled=True, type="primary")
            else:
                st.button(
                    str(item),
                    key=f"page_{item}",
                    on_click=dispatch,
                    args=(PageChanged(int(item)),),
                )
