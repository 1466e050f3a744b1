"""
Loan service.

A book can be lent to one customer at a time: a new loan is rejected while
the book has a loan that was not returned. The check and the insert are two
separate storage calls.
"""

from libraryapi.core.logging import logger
from libraryapi.domain.errors import BOOK_ALREADY_LOANED, BusinessRuleViolation
from libraryapi.domain.models import Loan
from libraryapi.domain.result import Err, Ok, Result
from libraryapi.infrastructure.repositories import LoanRepository


class LoanService:
    """Service for loan operations."""

    def __init__(self, repository: LoanRepository):
        self.repository = repository

    async def save(self, loan: Loan) -> Result[Loan]:
        """
        Register a loan for an existing book.

        Args:
            loan: Loan referencing a stored book

        Returns:
            Ok with the stored loan (identifier assigned), or Err with a
            BusinessRuleViolation if the book is already on an active loan
        """
        if await self.repository.exists_active_loan_for_book(loan.book):
            logger.warning(f"Rejected loan: book id={loan.book.id} already loaned")
            return Err(BusinessRuleViolation(BOOK_ALREADY_LOANED))

        saved = await self.repository.save(loan)

        logger.info(
            f"Loan created: id={saved.id} book_id={saved.book.id} "
            f"customer={saved.customer}"
        )

        return Ok(saved)
