"""
Domain records for the library catalog.

Books and loans are plain records owned by the storage layer. The rule
components only hold them for the duration of a single operation.
"""

import math
from dataclasses import dataclass, field
from datetime import date
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class Book:
    """
    A catalog entry.

    Attributes:
        isbn: International Standard Book Number (unique across the catalog)
        title: Book title
        author: Book author
        id: Storage-assigned identifier (None until persisted)
    """

    isbn: str | None = None
    title: str | None = None
    author: str | None = None
    id: int | None = None


@dataclass
class Loan:
    """
    A book lent to a customer.

    The loan references an existing book but does not own it.

    Attributes:
        book: Book being lent
        customer: Name of the borrowing customer
        isbn: ISBN of the book at loan time
        loan_date: Day the loan was made
        returned: None or False while the loan is active
        id: Storage-assigned identifier (None until persisted)
    """

    book: Book
    customer: str
    isbn: str | None = None
    loan_date: date = field(default_factory=date.today)
    returned: bool | None = None
    id: int | None = None

    @property
    def active(self) -> bool:
        """Whether the loan still holds the book."""
        return not self.returned


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page index and page size."""

    page: int = 0
    size: int = 10

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError("Page index must not be negative")
        if self.size < 1:
            raise ValueError("Page size must be at least 1")

    @property
    def offset(self) -> int:
        return self.page * self.size


@dataclass
class Page(Generic[T]):
    """A slice of query results plus the total number of matches."""

    content: list[T]
    total_elements: int
    page: int
    size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 0
