"""
Error taxonomy for the book service.

Service methods raise subclasses of ``BookServiceError``; the
application registers a handler which renders them as
``{"message": ...}`` with the attached status code.  ``StoreReadError``
never leaves the store: a collection that cannot be read is reported
as empty.
"""

from fastapi import status


class BookServiceError(Exception):
    """Base class for errors reported to API clients."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(BookServiceError):
    """A required field is missing or the ISBN is malformed."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(BookServiceError):
    """A book with the same ISBN already exists.

    Reported as 400 rather than 409 to keep the public contract.
    """

    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(BookServiceError):
    """No book carries the requested ISBN."""

    status_code = status.HTTP_404_NOT_FOUND


class StoreReadError(Exception):
    """The backing file is missing, unreadable or not a JSON array."""
