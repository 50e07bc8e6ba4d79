"""
Durable storage of the book collection.

The collection is always loaded and saved as a whole: every service
call reads the full list, changes it in memory and writes the full
list back.  ``JsonFileStore`` keeps the list in a pretty‑printed JSON
file; ``InMemoryStore`` keeps it in a Python list and is meant for
tests and embedding.

Reads fail open.  If the file is missing, unreadable, not valid JSON
or does not hold a top‑level array, ``load_all`` returns an empty list
instead of raising.  The next successful save then replaces whatever
was in the file.  Each such read is logged as a warning so that a
corrupted file does not go unnoticed.
"""

from __future__ import annotations

import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

from .errors import StoreReadError

logger = logging.getLogger(__name__)

Book = Dict[str, Any]


def get_books_path(books_file: str) -> Path:
    """Compute the path to the JSON file.

    Absolute paths are used as is; relative ones are resolved against
    the project root (the directory containing ``book_store_api``).
    """
    if os.path.isabs(books_file):
        return Path(books_file)
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return (base_dir / books_file).resolve()


class BookStore(ABC):
    """Holder of the book collection, loaded and saved as one unit."""

    @abstractmethod
    def initialize(self) -> None:
        """Create an empty collection if none exists yet."""

    @abstractmethod
    def load_all(self) -> List[Book]:
        """Return the full collection, or ``[]`` if it cannot be read."""

    @abstractmethod
    def save_all(self, books: List[Book]) -> None:
        """Replace the stored collection with ``books``."""


class JsonFileStore(BookStore):
    """Book collection persisted as a JSON array in a single file."""

    def __init__(self, path: str | os.PathLike) -> None:
        self.path = Path(path)

    def initialize(self) -> None:
        if self.path.exists():
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.save_all([])
        logger.info("%s file created", self.path.name)

    def load_all(self) -> List[Book]:
        try:
            return self._read()
        except StoreReadError as exc:
            logger.warning("Treating book store %s as empty: %s", self.path, exc)
            return []

    def save_all(self, books: List[Book]) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(books, f, ensure_ascii=False, indent=2)

    def _read(self) -> List[Book]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StoreReadError(str(exc)) from exc
        if not isinstance(data, list):
            raise StoreReadError(f"expected a JSON array, got {type(data).__name__}")
        return data


class InMemoryStore(BookStore):
    """Book collection kept in process memory.

    Loads and saves copy the list so callers cannot change the stored
    state without going through ``save_all``.
    """

    def __init__(self, books: List[Book] | None = None) -> None:
        self._books: List[Book] = copy.deepcopy(books) if books else []

    def initialize(self) -> None:
        pass

    def load_all(self) -> List[Book]:
        return copy.deepcopy(self._books)

    def save_all(self, books: List[Book]) -> None:
        self._books = copy.deepcopy(books)
