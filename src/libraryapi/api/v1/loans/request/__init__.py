"""Loan Request Models."""

from pydantic import BaseModel, Field


class LoanRequest(BaseModel):
    """
    Request to lend a book.

    Attributes:
        isbn: ISBN of the book to lend
        customer: Name of the borrowing customer
    """

    isbn: str = Field(..., description="ISBN of the book to lend", min_length=1)
    customer: str = Field(..., description="Borrowing customer", min_length=1)
