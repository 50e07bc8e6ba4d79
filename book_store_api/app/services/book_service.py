"""
Service layer for books.

``BookService`` implements list, lookup, create, update and delete on
top of a ``BookStore``.  Every call reloads the full collection from
the store, and mutating calls write the full collection back, so the
store is the only source of truth and nothing is cached between
requests.

Without ``serialize_writes`` two concurrent mutations can interleave
their load and save steps and the later save wins.  With it, each
load/modify/save cycle runs under one lock per service instance.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from typing import Any, ContextManager, Dict, List, Mapping, Optional, Tuple

from book_store_api.app.core.errors import ConflictError, NotFoundError, ValidationError
from book_store_api.app.core.store import Book, BookStore
from book_store_api.app.core.validators import (
    REQUIRED_FIELDS,
    UPDATABLE_FIELDS,
    is_valid_isbn,
    missing_fields,
)

logger = logging.getLogger(__name__)

BOOK_NOT_FOUND = "Book not found"
CREATE_FIELDS_REQUIRED = "All fields are required and ISBN must be a valid 13-digit number"
UPDATE_FIELDS_REQUIRED = "All fields are required"
DUPLICATE_ISBN = "Book with this ISBN already exists"


class BookService:
    """Business logic for the book collection."""

    def __init__(self, store: BookStore, serialize_writes: bool = False) -> None:
        self.store = store
        self._write_lock: Optional[threading.Lock] = threading.Lock() if serialize_writes else None

    async def list_books(self) -> List[Book]:
        """Return the whole collection as stored."""
        return self.store.load_all()

    async def get_book(self, isbn: str) -> Book:
        """Return the book with ``isbn`` or raise ``NotFoundError``."""
        books = self.store.load_all()
        _, book = self._find(books, isbn)
        return book

    async def create_book(self, fields: Mapping[str, Any]) -> Book:
        """Append a new book built from the five required fields.

        Values are stored exactly as given.  Keys other than the five
        book fields are ignored.
        """
        if missing_fields(fields, REQUIRED_FIELDS) or not is_valid_isbn(fields.get("isbn")):
            raise ValidationError(CREATE_FIELDS_REQUIRED)

        with self._writing():
            books = self.store.load_all()
            if any(_isbn_of(book) == fields["isbn"] for book in books):
                raise ConflictError(DUPLICATE_ISBN)
            new_book = {name: fields[name] for name in REQUIRED_FIELDS}
            books.append(new_book)
            self.store.save_all(books)

        logger.info("Created book %s", new_book["isbn"])
        return new_book

    async def update_book(self, isbn: str, fields: Mapping[str, Any]) -> Book:
        """Overwrite the four editable fields of an existing book.

        A missing book is reported before the payload is checked.  The
        stored ISBN is kept even if the payload carries a different one.
        """
        with self._writing():
            books = self.store.load_all()
            index, current = self._find(books, isbn)
            if missing_fields(fields, UPDATABLE_FIELDS):
                raise ValidationError(UPDATE_FIELDS_REQUIRED)
            updated: Dict[str, Any] = {**current, **{name: fields[name] for name in UPDATABLE_FIELDS}}
            books[index] = updated
            self.store.save_all(books)

        logger.info("Updated book %s", isbn)
        return updated

    async def delete_book(self, isbn: str) -> None:
        """Remove the book with ``isbn`` or raise ``NotFoundError``."""
        with self._writing():
            books = self.store.load_all()
            index, _ = self._find(books, isbn)
            del books[index]
            self.store.save_all(books)

        logger.info("Deleted book %s", isbn)

    def _writing(self) -> ContextManager[Any]:
        if self._write_lock is None:
            return contextlib.nullcontext()
        return self._write_lock

    @staticmethod
    def _find(books: List[Book], isbn: str) -> Tuple[int, Book]:
        for index, book in enumerate(books):
            if _isbn_of(book) == isbn:
                return index, book
        raise NotFoundError(BOOK_NOT_FOUND)


def _isbn_of(book: Any) -> Any:
    # Entries that are not objects carry no ISBN and never match.
    return book.get("isbn") if isinstance(book, dict) else None
