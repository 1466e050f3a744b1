"""
SQLite book repository implementation.

Example queries are translated to a WHERE clause of case-insensitive
LIKE conditions, one per populated example field.
"""

import sqlite3

from libraryapi.domain.models import Book, Page, PageRequest
from libraryapi.infrastructure.implementations.sqlite.database import SQLiteDatabase
from libraryapi.infrastructure.repositories.book_repository import BookRepository

BOOK_COLUMNS = "id, isbn, title, author"


def _row_to_book(row: sqlite3.Row) -> Book:
    return Book(id=row["id"], isbn=row["isbn"], title=row["title"], author=row["author"])


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLiteBookRepository(BookRepository):
    """Book storage in the `books` table."""

    def __init__(self, database: SQLiteDatabase):
        self.database = database

    async def exists_by_isbn(self, isbn: str) -> bool:
        rows = self.database.query("SELECT 1 FROM books WHERE isbn = ? LIMIT 1", (isbn,))
        return bool(rows)

    async def save(self, book: Book) -> Book:
        if book.id is None:
            cursor = self.database.execute(
                "INSERT INTO books (isbn, title, author) VALUES (?, ?, ?)",
                (book.isbn, book.title, book.author),
            )
            return Book(
                id=cursor.lastrowid, isbn=book.isbn, title=book.title, author=book.author
            )

        cursor = self.database.execute(
            "UPDATE books SET isbn = ?, title = ?, author = ? WHERE id = ?",
            (book.isbn, book.title, book.author, book.id),
        )
        if cursor.rowcount == 0:
            self.database.execute(
                "INSERT INTO books (id, isbn, title, author) VALUES (?, ?, ?, ?)",
                (book.id, book.isbn, book.title, book.author),
            )
        return Book(id=book.id, isbn=book.isbn, title=book.title, author=book.author)

    async def find_by_id(self, book_id: int) -> Book | None:
        rows = self.database.query(
            f"SELECT {BOOK_COLUMNS} FROM books WHERE id = ?", (book_id,)
        )
        return _row_to_book(rows[0]) if rows else None

    async def find_by_isbn(self, isbn: str) -> Book | None:
        rows = self.database.query(
            f"SELECT {BOOK_COLUMNS} FROM books WHERE isbn = ?", (isbn,)
        )
        return _row_to_book(rows[0]) if rows else None

    async def delete(self, book: Book) -> None:
        self.database.execute("DELETE FROM books WHERE id = ?", (book.id,))

    async def find_page(self, example: Book, page_request: PageRequest) -> Page[Book]:
        conditions: list[str] = []
        parameters: list = []

        if example.id is not None:
            conditions.append("id = ?")
            parameters.append(example.id)

        for column in ("isbn", "title", "author"):
            value = getattr(example, column)
            if value:
                conditions.append(f"LOWER({column}) LIKE ? ESCAPE '\\'")
                parameters.append(f"%{_escape_like(value.lower())}%")

        where = f" WHERE {' AND '.join(conditions)}" if conditions else ""

        total = self.database.query(
            f"SELECT COUNT(*) AS total FROM books{where}", tuple(parameters)
        )[0]["total"]
        rows = self.database.query(
            f"SELECT {BOOK_COLUMNS} FROM books{where} ORDER BY id LIMIT ? OFFSET ?",
            (*parameters, page_request.size, page_request.offset),
        )

        return Page(
            content=[_row_to_book(row) for row in rows],
            total_elements=total,
            page=page_request.page,
            size=page_request.size,
        )
