import json

from fastapi.testclient import TestClient

from book_store_api.app.core.config import Settings
from book_store_api.app.core.store import InMemoryStore
from book_store_api.app.main import create_app

from .conftest import make_book, read_books


def test_startup_creates_books_file(client, books_file):
    assert books_file.exists()
    assert read_books(books_file) == []


def test_end_to_end_lifecycle(client, books_file):
    book = make_book()

    resp = client.post("/books", json=book)
    assert resp.status_code == 201
    assert resp.json() == book

    resp = client.get("/books/1234567890123")
    assert resp.status_code == 200
    assert resp.json() == book

    update = {"title": "X2", "author": "Y", "publisher": "Z", "publishedDate": "2020-01-01"}
    resp = client.put("/books/1234567890123", json=update)
    assert resp.status_code == 200
    assert resp.json() == make_book(title="X2")
    assert read_books(books_file) == [make_book(title="X2")]

    resp = client.delete("/books/1234567890123")
    assert resp.status_code == 204
    assert resp.content == b""

    resp = client.get("/books/1234567890123")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_list_books_in_insertion_order(client):
    client.post("/books", json=make_book("2000000000000"))
    client.post("/books", json=make_book("1000000000000"))

    resp = client.get("/books")

    assert resp.status_code == 200
    assert [b["isbn"] for b in resp.json()] == ["2000000000000", "1000000000000"]


def test_list_books_empty(client):
    resp = client.get("/books")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_with_bad_isbn_is_rejected(client, books_file):
    resp = client.post("/books", json=make_book("12345678901a3"))

    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required and ISBN must be a valid 13-digit number"}
    assert read_books(books_file) == []


def test_create_with_missing_field_is_rejected(client):
    payload = make_book()
    del payload["publisher"]

    resp = client.post("/books", json=payload)

    assert resp.status_code == 400
    assert "message" in resp.json()


def test_create_duplicate_isbn_is_rejected(client, books_file):
    client.post("/books", json=make_book())

    resp = client.post("/books", json=make_book(title="Again"))

    assert resp.status_code == 400
    assert resp.json() == {"message": "Book with this ISBN already exists"}
    assert read_books(books_file) == [make_book()]


def test_update_unknown_book_is_not_found_before_validation(client):
    resp = client.put("/books/1234567890123", json={})

    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_update_with_missing_field_is_rejected(client, books_file):
    client.post("/books", json=make_book())

    resp = client.put("/books/1234567890123", json={"title": "X2"})

    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}
    assert read_books(books_file) == [make_book()]


def test_update_ignores_isbn_in_payload(client):
    client.post("/books", json=make_book())

    resp = client.put("/books/1234567890123", json=make_book("9999999999999", title="X2"))

    assert resp.status_code == 200
    assert resp.json()["isbn"] == "1234567890123"
    assert client.get("/books/9999999999999").status_code == 404


def test_delete_unknown_book_is_not_found(client):
    resp = client.delete("/books/1234567890123")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_non_object_body_is_rejected(client):
    resp = client.post("/books", json=[make_book()])
    assert resp.status_code == 400
    assert resp.json() == {"message": "Request body must be a JSON object"}

    resp = client.post("/books", content=b"{broken", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"message": "Request body must be a JSON object"}


def test_unknown_route_uses_message_body(client):
    resp = client.get("/authors")

    assert resp.status_code == 404
    assert resp.json() == {"message": "Not Found"}


def test_corrupt_store_is_served_as_empty(client, books_file):
    books_file.write_text("not json at all", encoding="utf-8")

    assert client.get("/books").json() == []

    resp = client.post("/books", json=make_book())
    assert resp.status_code == 201
    assert read_books(books_file) == [make_book()]


def test_app_with_injected_store():
    store = InMemoryStore([make_book()])
    app = create_app(Settings(books_file="unused.json"), store=store)

    with TestClient(app) as client:
        assert client.get("/books/1234567890123").json() == make_book()
        client.delete("/books/1234567890123")

    assert store.load_all() == []


def test_api_prefix_is_applied(tmp_path):
    settings = Settings(books_file=str(tmp_path / "books.json"), api_prefix="/api/v1")

    with TestClient(create_app(settings)) as client:
        assert client.get("/api/v1/books").status_code == 200
        assert client.get("/books").status_code == 404


def test_file_contents_are_pretty_printed(client, books_file):
    client.post("/books", json=make_book())

    assert books_file.read_text(encoding="utf-8") == json.dumps([make_book()], indent=2)


def test_hand_edited_records_are_served_verbatim(client, books_file):
    books = [make_book(publishedDate=2020), {"isbn": "legacy", "note": "hand edited"}]
    books_file.write_text(json.dumps(books), encoding="utf-8")

    resp = client.get("/books")
    assert resp.status_code == 200
    assert resp.json() == books

    resp = client.get("/books/1234567890123")
    assert resp.status_code == 200
    assert resp.json() == make_book(publishedDate=2020)


def test_update_unknown_book_without_object_body_is_not_found(client):
    resp = client.put("/books/1234567890123")
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}

    resp = client.put("/books/1234567890123", json=[])
    assert resp.status_code == 404
    assert resp.json() == {"message": "Book not found"}


def test_update_existing_book_with_array_body_is_rejected(client, books_file):
    client.post("/books", json=make_book())

    resp = client.put("/books/1234567890123", json=[make_book(title="X2")])

    assert resp.status_code == 400
    assert resp.json() == {"message": "All fields are required"}
    assert read_books(books_file) == [make_book()]


def test_non_object_entries_in_file_are_skipped_by_lookups(client, books_file):
    books_file.write_text(json.dumps([1, make_book()]), encoding="utf-8")

    assert client.get("/books/1234567890123").json() == make_book()
    assert client.get("/books/9780201616224").status_code == 404
    assert client.delete("/books/1234567890123").status_code == 204
    assert read_books(books_file) == [1]
