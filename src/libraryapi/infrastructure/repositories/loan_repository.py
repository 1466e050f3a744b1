"""
Abstract interface for loan storage.

Loans reference books owned by the book repository.
"""

from abc import ABC, abstractmethod

from libraryapi.domain.models import Book, Loan


class LoanRepository(ABC):
    """Abstract interface for loan storage operations."""

    @abstractmethod
    async def exists_active_loan_for_book(self, book: Book) -> bool:
        """
        Check if the book has a loan that was not returned.

        Args:
            book: Book to check (identified by its id)

        Returns:
            True if an active loan exists, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, loan: Loan) -> Loan:
        """
        Insert or update a loan.

        Args:
            loan: Loan to store. A loan without id receives a new id.

        Returns:
            The stored loan, carrying its identifier
        """
        pass

    @abstractmethod
    async def find_by_id(self, loan_id: int) -> Loan | None:
        """
        Get a loan by identifier.

        Args:
            loan_id: Loan identifier

        Returns:
            Loan if found, None otherwise
        """
        pass
