"""In-memory loan repository implementation."""

from dataclasses import replace

from loguru import logger

from libraryapi.domain.models import Book, Loan
from libraryapi.infrastructure.repositories.loan_repository import LoanRepository


class MemoryLoanRepository(LoanRepository):
    """Dictionary-backed loan storage for development and tests."""

    def __init__(self) -> None:
        self._loans: dict[int, Loan] = {}
        self._next_id = 1

        logger.info("Initialized MemoryLoanRepository")

    async def exists_active_loan_for_book(self, book: Book) -> bool:
        """Check for a loan of this book that was not returned."""
        return any(
            loan.book.id == book.id and loan.active for loan in self._loans.values()
        )

    async def save(self, loan: Loan) -> Loan:
        """Insert a new loan or replace a stored one."""
        loan_id = loan.id if loan.id is not None else self._next_id
        self._next_id = max(self._next_id, loan_id + 1)

        stored = replace(loan, id=loan_id)
        self._loans[stored.id] = stored

        logger.debug(f"Saved loan id={stored.id} book_id={stored.book.id}")

        return replace(stored)

    async def find_by_id(self, loan_id: int) -> Loan | None:
        """Get loan by identifier."""
        loan = self._loans.get(loan_id)
        return replace(loan) if loan else None
