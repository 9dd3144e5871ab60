"""App logic package.

Business logic layer for the quote screen.
Pure Python - no Streamlit UI calls.
"""

__all__ = ["data_loader", "query_engine", "screen_state"]
