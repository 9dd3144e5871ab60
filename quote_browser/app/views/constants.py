"""Constants used by the view layer."""

PAGE_TITLE = "Quotes App"
PAGE_ICON = "💬"

# st.session_state keys
STORE_KEY = "quote_screen_store"
SEARCH_INPUT_KEY = "search_query_input"
