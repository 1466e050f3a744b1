"""
Catalog service.

This service guards the book catalog:
- Create: Require an ISBN and reject ones already registered
- Update/Delete: Require a persisted book (identifier present)
- Lookups and example-based search are passed through to storage
"""

from libraryapi.core.logging import logger
from libraryapi.domain.errors import (
    BOOK_ID_REQUIRED,
    BOOK_ISBN_REQUIRED,
    DUPLICATED_ISBN,
    BusinessRuleViolation,
    InvalidArgument,
)
from libraryapi.domain.models import Book, Page, PageRequest
from libraryapi.domain.result import Err, Ok, Result
from libraryapi.infrastructure.repositories import BookRepository


class BookService:
    """
    Service for catalog operations.

    Stateless apart from the injected repository.
    """

    def __init__(self, repository: BookRepository):
        """
        Initialize book service.

        Args:
            repository: Book storage
        """
        self.repository = repository

    async def create(self, book: Book) -> Result[Book]:
        """
        Register a new book.

        Args:
            book: Book without identifier

        Returns:
            Ok with the stored book (identifier assigned), or Err with a
            BusinessRuleViolation if the ISBN is already registered

        Raises:
            InvalidArgument: If the book has no ISBN
        """
        if not book.isbn:
            raise InvalidArgument(BOOK_ISBN_REQUIRED)

        if await self.repository.exists_by_isbn(book.isbn):
            logger.warning(f"Rejected book with duplicated isbn={book.isbn}")
            return Err(BusinessRuleViolation(DUPLICATED_ISBN))

        saved = await self.repository.save(book)

        logger.info(f"Book created: id={saved.id} isbn={saved.isbn}")

        return Ok(saved)

    async def get_by_id(self, book_id: int) -> Book | None:
        """Get a book by identifier. None when it does not exist."""
        return await self.repository.find_by_id(book_id)

    async def get_by_isbn(self, isbn: str) -> Book | None:
        """Get a book by ISBN. None when it does not exist."""
        return await self.repository.find_by_isbn(isbn)

    async def update(self, book: Book) -> Book:
        """
        Store changes to a book.

        The book is written as given; callers load it first.

        Args:
            book: Persisted book carrying its identifier

        Returns:
            The stored book

        Raises:
            InvalidArgument: If the book has no identifier
        """
        if book.id is None:
            raise InvalidArgument(BOOK_ID_REQUIRED)

        updated = await self.repository.save(book)

        logger.info(f"Book updated: id={updated.id}")

        return updated

    async def delete(self, book: Book) -> None:
        """
        Delete a book.

        Args:
            book: Persisted book carrying its identifier

        Raises:
            InvalidArgument: If the book has no identifier
        """
        if book.id is None:
            raise InvalidArgument(BOOK_ID_REQUIRED)

        await self.repository.delete(book)

        logger.info(f"Book deleted: id={book.id}")

    async def find(self, filter_book: Book, page_request: PageRequest) -> Page[Book]:
        """
        Search books by example.

        Args:
            filter_book: Book whose populated fields act as filters
            page_request: Page index and size

        Returns:
            Page of matching books with the total number of matches
        """
        return await self.repository.find_page(filter_book, page_request)
