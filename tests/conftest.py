import json

import pytest
from fastapi.testclient import TestClient

from book_store_api.app.core.config import Settings
from book_store_api.app.main import create_app


def make_book(isbn: str = "1234567890123", **overrides) -> dict:
    book = {
        "title": "X",
        "author": "Y",
        "publisher": "Z",
        "publishedDate": "2020-01-01",
        "isbn": isbn,
    }
    book.update(overrides)
    return book


@pytest.fixture
def books_file(tmp_path):
    # Each test gets its own backing file, created on app startup
    return tmp_path / "books.json"


@pytest.fixture
def app(books_file):
    return create_app(Settings(books_file=str(books_file)))


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


def read_books(path) -> list:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
