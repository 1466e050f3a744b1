"""Business rule services for the catalog and loans."""

from libraryapi.services.book_service import BookService
from libraryapi.services.loan_service import LoanService

__all__ = ["BookService", "LoanService"]
