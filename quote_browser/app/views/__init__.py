"""App views package.

UI rendering layer for the quote screen.
Pure rendering - no business logic or calculations.
"""

__all__ = ["common", "constants", "quotes"]
