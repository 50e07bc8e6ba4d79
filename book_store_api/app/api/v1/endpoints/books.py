"""
Book endpoints for API v1.

These routes expose CRUD operations on the book collection, keyed by
ISBN.  Request bodies are taken as raw JSON objects and handed to
``BookService``, which decides what is missing or invalid.  Service
errors propagate to the handlers registered in ``main`` and are
rendered as ``{"message": ...}``.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, status

from book_store_api.app.schemas.book import BookCreate, BookRead, BookUpdate, Message
from book_store_api.app.services.book_service import BookService

router = APIRouter()


def get_book_service(request: Request) -> BookService:
    """Return the service bound to the running application."""
    return request.app.state.book_service


# Stored records are returned exactly as they appear in the books file,
# so responses are not validated against ``BookRead``.  The schema is
# only used for the OpenAPI document.
@router.get("", response_model=None, responses={200: {"model": List[BookRead]}})
async def list_books(service: BookService = Depends(get_book_service)) -> List[Dict[str, Any]]:
    """Return every stored book in stored order."""
    return await service.list_books()


@router.get(
    "/{isbn}",
    response_model=None,
    responses={200: {"model": BookRead}, 404: {"model": Message}},
)
async def get_book(isbn: str, service: BookService = Depends(get_book_service)) -> Dict[str, Any]:
    """Retrieve a single book by ISBN.  Returns HTTP 404 if absent."""
    return await service.get_book(isbn)


@router.post(
    "",
    response_model=None,
    status_code=status.HTTP_201_CREATED,
    responses={201: {"model": BookRead}, 400: {"model": Message}},
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": BookCreate.model_json_schema()}}}},
)
async def create_book(
    payload: Dict[str, Any] = Body(...),
    service: BookService = Depends(get_book_service),
) -> Dict[str, Any]:
    """Create a new book.

    All five fields are required and the ISBN must be 13 digits.  A
    duplicate ISBN is rejected with HTTP 400.
    """
    return await service.create_book(payload)


@router.put(
    "/{isbn}",
    response_model=None,
    responses={200: {"model": BookRead}, 400: {"model": Message}, 404: {"model": Message}},
    openapi_extra={"requestBody": {"content": {"application/json": {"schema": BookUpdate.model_json_schema()}}}},
)
async def update_book(
    isbn: str,
    payload: Any = Body(None),
    service: BookService = Depends(get_book_service),
) -> Dict[str, Any]:
    """Update title, author, publisher and published date of a book.

    The ISBN is looked up before the body is examined, so an unknown
    ISBN is reported as 404 even when the body is absent or not an
    object.
    """
    fields = payload if isinstance(payload, dict) else {}
    return await service.update_book(isbn, fields)


@router.delete("/{isbn}", status_code=status.HTTP_204_NO_CONTENT, responses={404: {"model": Message}})
async def delete_book(isbn: str, service: BookService = Depends(get_book_service)) -> None:
    """Delete a book by ISBN."""
    await service.delete_book(isbn)
    return None
