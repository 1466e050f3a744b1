"""Integration tests for the loan API."""

from datetime import date

import anyio
from fastapi import status

BOOK_API = "/api/books"
LOAN_API = "/api/loans"


def register_book(client, isbn: str = "123") -> int:
    response = client.post(
        BOOK_API, json={"isbn": isbn, "title": "As aventuras", "author": "Jefferson"}
    )
    return response.json()["id"]


def test_create_loan(client):
    """Test lending a book without active loans returns the loan id."""
    register_book(client)

    response = client.post(LOAN_API, json={"isbn": "123", "customer": "Jeff"})

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json() == 1


def test_create_loan_with_unknown_isbn(client):
    """Test lending a book that is not in the catalog."""
    response = client.post(LOAN_API, json={"isbn": "999", "customer": "Fulano"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == ["Book not found for passed isbn"]


def test_create_loan_of_loaned_book(client):
    """Test a book on an active loan cannot be lent again."""
    register_book(client)
    client.post(LOAN_API, json={"isbn": "123", "customer": "Fulano"})

    response = client.post(LOAN_API, json={"isbn": "123", "customer": "Beltrano"})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == ["Book already loaned"]


def test_loans_of_different_books(client):
    """Test each book can be lent once."""
    register_book(client, "123")
    register_book(client, "456")

    first = client.post(LOAN_API, json={"isbn": "123", "customer": "Fulano"})
    second = client.post(LOAN_API, json={"isbn": "456", "customer": "Fulano"})

    assert first.json() == 1
    assert second.json() == 2


def test_create_invalid_loan(client):
    """Test missing loan fields are reported one message per field."""
    response = client.post(LOAN_API, json={})

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == ["Field required", "Field required"]


def test_stored_loan(client, infrastructure):
    """Test the stored loan references the book and is dated today."""
    book_id = register_book(client)
    loan_id = client.post(LOAN_API, json={"isbn": "123", "customer": "Fulano"}).json()

    loan = anyio.run(infrastructure.get_loan_repository().find_by_id, loan_id)

    assert loan.book.id == book_id
    assert loan.customer == "Fulano"
    assert loan.isbn == "123"
    assert loan.loan_date == date.today()
    assert loan.active
