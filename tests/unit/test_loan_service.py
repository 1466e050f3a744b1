"""
Unit tests for LoanService.

Tests the one-active-loan-per-book rule.
"""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from libraryapi.domain.errors import BusinessRuleViolation
from libraryapi.domain.models import Book, Loan
from libraryapi.domain.result import Err, Ok
from libraryapi.infrastructure.repositories import LoanRepository
from libraryapi.services import LoanService


@pytest.fixture
def mock_repository():
    """Mock LoanRepository."""
    return AsyncMock(spec=LoanRepository)


@pytest.fixture
def loan_service(mock_repository):
    """Create LoanService with mocked repository."""
    return LoanService(mock_repository)


@pytest.mark.asyncio
async def test_save_loan(loan_service, mock_repository):
    """Test a loan of a book without active loans is stored."""
    # Arrange
    book = Book(id=1)
    saving_loan = Loan(book=book, customer="Fulano", loan_date=date.today())
    saved_loan = Loan(id=1, book=book, customer="Fulano", loan_date=date.today())

    mock_repository.exists_active_loan_for_book.return_value = False
    mock_repository.save.return_value = saved_loan

    # Act
    result = await loan_service.save(saving_loan)

    # Assert
    assert isinstance(result, Ok)
    loan = result.value
    assert loan.id == saved_loan.id
    assert loan.book.id == saved_loan.book.id
    assert loan.customer == saved_loan.customer
    assert loan.loan_date == saved_loan.loan_date
    mock_repository.exists_active_loan_for_book.assert_awaited_once_with(book)
    mock_repository.save.assert_awaited_once_with(saving_loan)


@pytest.mark.asyncio
async def test_save_loan_of_loaned_book(loan_service, mock_repository):
    """Test a book already on loan cannot be lent again."""
    # Arrange
    book = Book(id=1)
    saving_loan = Loan(book=book, customer="Fulano", loan_date=date.today())
    mock_repository.exists_active_loan_for_book.return_value = True

    # Act
    result = await loan_service.save(saving_loan)

    # Assert
    assert isinstance(result, Err)
    assert isinstance(result.error, BusinessRuleViolation)
    assert result.error.message == "Book already loaned"
    mock_repository.save.assert_not_awaited()


def test_loan_defaults():
    """Test a new loan is dated today and active."""
    loan = Loan(book=Book(id=1), customer="Fulano")

    assert loan.loan_date == date.today()
    assert loan.returned is None
    assert loan.active


@pytest.mark.parametrize(
    ("returned", "active"), [(None, True), (False, True), (True, False)]
)
def test_loan_active_flag(returned, active):
    """Test unset or false returned flag means the loan is active."""
    loan = Loan(book=Book(id=1), customer="Fulano", returned=returned)

    assert loan.active is active
