"""
Top‑level router for version 1 of the API.

When new resources are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

# Collection routes are declared with an empty path so the list and
# create endpoints answer on ``/books`` without a trailing slash.
router.include_router(books.router, prefix="/books", tags=["books"])
