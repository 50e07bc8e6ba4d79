"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on port 3000
with ``books.json`` next to the project root as its backing file.
"""

import os
from dataclasses import dataclass


def _as_bool(value: str) -> bool:
    return value.lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Book Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Empty means console logging only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path to the JSON file holding the book collection.  Relative paths
    # are resolved against the project root by ``core.store``.
    books_file: str = os.getenv("BOOKS_FILE", "books.json")

    # Prefix under which the versioned router is mounted.  Left empty so
    # that routes are served as ``/books`` and ``/books/{isbn}``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))

    # When enabled, mutating requests run their load/modify/save cycle
    # under a single lock.  Off by default: concurrent writers may
    # overwrite each other's changes.
    serialize_writes: bool = _as_bool(os.getenv("BOOKS_SERIALIZE_WRITES", "false"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.
settings = Settings()
