"""
Main entrypoint for the Book Store API.

This module assembles the FastAPI application, sets up logging,
creates the book store and service and includes the versioned router.
The ``create_app`` function builds and configures the app, which is
then instantiated at module import time as ``app``, e.g.::

    uvicorn book_store_api.app.main:app --port 3000

Every error response carries a single ``message`` field.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import BookServiceError
from .core.logging_config import setup_logging
from .core.store import BookStore, JsonFileStore, get_books_path
from .services.book_service import BookService

INVALID_BODY = "Request body must be a JSON object"


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.
    store : Optional[BookStore]
        Backing store for the collection.  Defaults to a
        ``JsonFileStore`` at ``settings.books_file``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the store can
    # report file creation during startup.
    setup_logging(settings.log_level, settings.log_file or None)

    if store is None:
        store = JsonFileStore(get_books_path(settings.books_file))

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Create the backing file with an empty collection if it does
        # not exist yet.
        store.initialize()
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.settings = settings
    app.state.book_service = BookService(store, serialize_writes=settings.serialize_writes)

    app.include_router(v1_router, prefix=settings.api_prefix)

    @app.exception_handler(BookServiceError)
    async def book_service_error_handler(request: Request, exc: BookServiceError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        # Only the JSON body is declared on the routes, so any parsing
        # failure means the body was absent, malformed or not an object.
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": INVALID_BODY})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
