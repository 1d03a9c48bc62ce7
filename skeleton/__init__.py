"""A small JSON HTTP service skeleton: configuration, logging, SQLite database, responses and helpers."""

__version__ = "1.0.0"