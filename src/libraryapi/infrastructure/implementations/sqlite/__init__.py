"""SQLite storage implementations."""

from libraryapi.infrastructure.implementations.sqlite.book_repository import (
    SQLiteBookRepository,
)
from libraryapi.infrastructure.implementations.sqlite.database import SQLiteDatabase
from libraryapi.infrastructure.implementations.sqlite.loan_repository import (
    SQLiteLoanRepository,
)

__all__ = [
    "SQLiteBookRepository",
    "SQLiteDatabase",
    "SQLiteLoanRepository",
]
