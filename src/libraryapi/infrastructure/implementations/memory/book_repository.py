"""
In-memory book repository implementation.

Keeps books in a dictionary keyed by identifier. Identifiers are assigned
sequentially starting at 1. Contents are lost when the process exits.
"""

from dataclasses import replace

from loguru import logger

from libraryapi.domain.models import Book, Page, PageRequest
from libraryapi.infrastructure.repositories.book_repository import BookRepository

# Book fields that can be used as filters in example queries
EXAMPLE_FIELDS = ("isbn", "title", "author")


def matches_example(book: Book, example: Book) -> bool:
    """
    Check whether a book matches an example book.

    Empty example fields match anything. Set fields match if they are a
    case-insensitive substring of the book's value.
    """
    if example.id is not None and book.id != example.id:
        return False

    for name in EXAMPLE_FIELDS:
        wanted = getattr(example, name)
        if not wanted:
            continue
        value = getattr(book, name) or ""
        if wanted.lower() not in value.lower():
            return False

    return True


class MemoryBookRepository(BookRepository):
    """
    Dictionary-backed storage for development and tests.

    Stored books are copies, so callers cannot mutate storage by holding
    on to returned records.
    """

    def __init__(self) -> None:
        self._books: dict[int, Book] = {}
        self._next_id = 1

        logger.info("Initialized MemoryBookRepository")

    async def exists_by_isbn(self, isbn: str) -> bool:
        """Check if any stored book has this ISBN."""
        return any(book.isbn == isbn for book in self._books.values())

    async def save(self, book: Book) -> Book:
        """
        Insert a new book or replace a stored one.

        Explicit identifiers move the sequence past them so later inserts
        never reuse a stored id.
        """
        book_id = book.id if book.id is not None else self._next_id
        self._next_id = max(self._next_id, book_id + 1)

        stored = replace(book, id=book_id)
        self._books[stored.id] = stored

        logger.debug(f"Saved book id={stored.id} isbn={stored.isbn}")

        return replace(stored)

    async def find_by_id(self, book_id: int) -> Book | None:
        """Get book by identifier."""
        book = self._books.get(book_id)
        return replace(book) if book else None

    async def find_by_isbn(self, isbn: str) -> Book | None:
        """Get book by ISBN."""
        for book in self._books.values():
            if book.isbn == isbn:
                return replace(book)
        return None

    async def delete(self, book: Book) -> None:
        """Delete book. Unknown identifiers are ignored."""
        if self._books.pop(book.id, None) is not None:
            logger.debug(f"Deleted book id={book.id}")

    async def find_page(self, example: Book, page_request: PageRequest) -> Page[Book]:
        """Filter stored books by example and slice the requested page."""
        matches = [
            replace(book)
            for _, book in sorted(self._books.items())
            if matches_example(book, example)
        ]
        start = page_request.offset

        return Page(
            content=matches[start : start + page_request.size],
            total_elements=len(matches),
            page=page_request.page,
            size=page_request.size,
        )
