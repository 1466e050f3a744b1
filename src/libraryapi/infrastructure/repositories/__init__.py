"""Abstract repository interfaces for storage operations."""

from libraryapi.infrastructure.repositories.book_repository import BookRepository
from libraryapi.infrastructure.repositories.loan_repository import LoanRepository

__all__ = [
    "BookRepository",
    "LoanRepository",
]
