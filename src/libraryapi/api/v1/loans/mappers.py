"""Conversions between loan DTOs and domain records."""

from datetime import date

from libraryapi.api.v1.loans.request import LoanRequest
from libraryapi.domain.models import Book, Loan


def to_loan(request: LoanRequest, book: Book) -> Loan:
    """Build a loan of `book` dated today."""
    return Loan(
        book=book,
        customer=request.customer,
        isbn=book.isbn,
        loan_date=date.today(),
    )
