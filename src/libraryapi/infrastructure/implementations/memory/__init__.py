"""In-memory storage implementations for development and tests."""

from libraryapi.infrastructure.implementations.memory.book_repository import (
    MemoryBookRepository,
)
from libraryapi.infrastructure.implementations.memory.loan_repository import (
    MemoryLoanRepository,
)

__all__ = [
    "MemoryBookRepository",
    "MemoryLoanRepository",
]
