"""Common UI components shared across the screen.

Pure rendering functions for reusable Streamlit widgets.
"""

from collections.abc import Callable

import streamlit as st


def render_empty_state(message: str, icon: str = "💬") -> None:
    """Render empty state placeholder when no data is available.

    Args:
        message: Message to display
        icon: Emoji icon to show
    """
    st.info(f"{icon} {message}")


def render_error_state(message: str, on_retry: Callable[[], None]) -> None:
    """Show a fetch error with a retry button."""
    st.error(f"Error: {message}")
    st.button("Retry", on_click=on_retry, type="primary", key="retry_button")
