"""Integration tests for the book catalog API."""

from fastapi import status

BOOK_API = "/api/books"


def create_book_payload(**overrides) -> dict:
    payload = {"isbn": "123", "title": "As aventuras", "author": "Jefferson"}
    payload.update(overrides)
    return payload


def test_create_book(client):
    """Test registering a book in an empty catalog."""
    response = client.post(BOOK_API, json=create_book_payload())

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == {
        "id": 1,
        "isbn": "123",
        "title": "As aventuras",
        "author": "Jefferson",
    }


def test_create_book_with_duplicated_isbn(client):
    """Test a second book with the same ISBN is rejected with one message."""
    client.post(BOOK_API, json=create_book_payload())

    response = client.post(BOOK_API, json=create_book_payload(title="Outro"))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == ["Isbn já cadastrado"]


def test_create_invalid_book(client):
    """Test each missing field is reported with its own message."""
    response = client.post(BOOK_API, json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["errors"] == ["Field required"] * 3
    assert [field["loc"][-1] for field in data["fields"]] == ["isbn", "title", "author"]


def test_create_book_with_empty_fields(client):
    """Test empty strings are rejected."""
    response = client.post(BOOK_API, json=create_book_payload(title="", author=""))

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert len(response.json()["errors"]) == 2


def test_get_book(client):
    """Test getting book details."""
    book_id = client.post(BOOK_API, json=create_book_payload()).json()["id"]

    response = client.get(f"{BOOK_API}/{book_id}")

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["isbn"] == "123"
    assert response.json()["title"] == "As aventuras"


def test_get_unknown_book(client):
    """Test getting a book that does not exist."""
    response = client.get(f"{BOOK_API}/1")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert "errors" not in response.json()


def test_delete_book(client):
    """Test deleting a book."""
    book_id = client.post(BOOK_API, json=create_book_payload()).json()["id"]

    response = client.delete(f"{BOOK_API}/{book_id}")

    assert response.status_code == status.HTTP_204_NO_CONTENT
    assert client.get(f"{BOOK_API}/{book_id}").status_code == status.HTTP_404_NOT_FOUND


def test_delete_unknown_book(client):
    """Test deleting a book that does not exist."""
    response = client.delete(f"{BOOK_API}/1")

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_update_book(client):
    """Test updating title and author keeps the ISBN."""
    book_id = client.post(BOOK_API, json=create_book_payload()).json()["id"]

    response = client.put(
        f"{BOOK_API}/{book_id}",
        json=create_book_payload(isbn="999", title="Novo titulo", author="Maria"),
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "id": book_id,
        "isbn": "123",
        "title": "Novo titulo",
        "author": "Maria",
    }
    assert client.get(f"{BOOK_API}/{book_id}").json()["title"] == "Novo titulo"


def test_update_unknown_book(client):
    """Test updating a book that does not exist."""
    response = client.put(f"{BOOK_API}/1", json=create_book_payload())

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_find_books(client):
    """Test searching by example with pagination."""
    for isbn, title in [("1", "As aventuras"), ("2", "Aventuras no mar"), ("3", "Outro")]:
        client.post(BOOK_API, json=create_book_payload(isbn=isbn, title=title))

    response = client.get(BOOK_API, params={"title": "aventuras", "page": 0, "size": 1})

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["total_elements"] == 2
    assert data["total_pages"] == 2
    assert data["page"] == 0
    assert data["size"] == 1
    assert [book["isbn"] for book in data["content"]] == ["1"]


def test_find_books_default_page(client):
    """Test search without parameters returns the first default-sized page."""
    client.post(BOOK_API, json=create_book_payload())

    data = client.get(BOOK_API).json()

    assert data["total_elements"] == 1
    assert data["page"] == 0
    assert data["size"] == 10


def test_find_books_caps_page_size(client):
    """Test requested page sizes are capped at the configured maximum."""
    data = client.get(BOOK_API, params={"size": 1000}).json()

    assert data["size"] == 100


def test_find_books_invalid_page(client):
    """Test a negative page index is a validation error."""
    response = client.get(BOOK_API, params={"page": -1})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert len(response.json()["errors"]) == 1
