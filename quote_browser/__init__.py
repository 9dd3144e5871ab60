"""Quote Browser: search and page through quotes fetched from a REST API."""

__version__ = "0.1.0"
