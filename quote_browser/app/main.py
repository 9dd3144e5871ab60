"""Quotes App - single screen entry point.

Wiring layer connecting the quote screen store and its views.
The store lives in the Streamlit session, so each browser tab has its own
search and page state.
"""

import streamlit as st
from loguru import logger

from quote_browser.app.logic.data_loader import QuoteScreenLoader
from quote_browser.app.logic.screen_state import QuoteScreenStore, RetryRequested
from quote_browser.app.views.common import render_empty_state, render_error_state
from quote_browser.app.views.constants import PAGE_ICON, PAGE_TITLE, STORE_KEY
from quote_browser.app.views.quotes import (
    render_pagination_controls,
    render_quote_list,
    render_search_bar,
)
from quote_browser.core.config import configure_logging, settings
from quote_browser.etl.extract import QuoteExtractor

st.set_page_config(
    page_title=PAGE_TITLE,
    page_icon=PAGE_ICON,
    layout="centered",
)
configure_logging(settings.effective_log_level)


@st.cache_resource(show_spinner=False)  # type: ignore[misc]
def get_loader() -> QuoteScreenLoader:
    return QuoteScreenLoader()


@st.cache_resource(show_spinner=False)  # type: ignore[misc]
def get_extractor() -> QuoteExtractor:
    # one shared HTTP client for all sessions
    return get_loader().create_extractor()


st.title(f"{PAGE_ICON} {PAGE_TITLE}")
st.caption(f"{settings.app_name} v{settings.app_version}")

try:
    loader = get_loader()
except Exception as e:
    st.error(f"Failed to load configuration: {e}")
    logger.exception(f"Configuration error: {e}")
    raise e

if STORE_KEY not in st.session_state:
    st.session_state[STORE_KEY] = loader.create_store(extractor=get_extractor())
    with st.spinner("Loading quotes..."):
        st.session_state[STORE_KEY].load()

store: QuoteScreenStore = st.session_state[STORE_KEY]
view = store.view()

if view.loading:
    render_empty_state("Loading quotes...", icon="⏳")
    st.stop()

if view.error is not None:
    render_error_state(view.error, on_retry=lambda: store.dispatch(RetryRequested()))
    st.stop()

render_search_bar(view, store.dispatch)
st.divider()

if not view.filtered_quotes and not view.show_no_results:
    render_empty_state("No quotes available")
else:
    render_quote_list(view)

render_pagination_controls(view, store.dispatch)
