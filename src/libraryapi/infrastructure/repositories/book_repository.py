"""
Abstract interface for book storage.

Handles persistence of catalog entries:
- Create/read/update/delete of books
- ISBN existence checks
- Example-based paged queries
"""

from abc import ABC, abstractmethod

from libraryapi.domain.models import Book, Page, PageRequest


class BookRepository(ABC):
    """
    Abstract interface for book storage operations.

    Implementations must provide:
    - Identifier assignment on first save
    - ISBN lookups
    - Filtering by example with pagination
    """

    @abstractmethod
    async def exists_by_isbn(self, isbn: str) -> bool:
        """
        Check if a book with the given ISBN is stored.

        Args:
            isbn: ISBN to look for

        Returns:
            True if a book with this ISBN exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, book: Book) -> Book:
        """
        Insert or update a book.

        Args:
            book: Book to store. A book without id is inserted and
                  receives a new id; otherwise the stored row is replaced.

        Returns:
            The stored book, carrying its identifier
        """
        pass

    @abstractmethod
    async def find_by_id(self, book_id: int) -> Book | None:
        """
        Get a book by identifier.

        Args:
            book_id: Book identifier

        Returns:
            Book if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_isbn(self, isbn: str) -> Book | None:
        """
        Get a book by ISBN.

        Args:
            isbn: ISBN to look for

        Returns:
            Book if found, None otherwise
        """
        pass

    @abstractmethod
    async def delete(self, book: Book) -> None:
        """
        Delete a book.

        Args:
            book: Book to delete (identified by its id)
        """
        pass

    @abstractmethod
    async def find_page(self, example: Book, page_request: PageRequest) -> Page[Book]:
        """
        Find books matching an example.

        Fields left as None or empty in the example match anything. String
        fields that are set match case-insensitively by substring. Results
        are ordered by identifier.

        Args:
            example: Book whose populated fields act as filters
            page_request: Page index and size

        Returns:
            Requested page and the total number of matches
        """
        pass
