"""
Loan API endpoints.

Resolves the requested book by ISBN and hands the loan to LoanService,
which rejects books that are already on loan.
"""

from fastapi import APIRouter, status

from libraryapi.api.v1.loans.mappers import to_loan
from libraryapi.api.v1.loans.request import LoanRequest
from libraryapi.di import BookServiceDep, LoanServiceDep
from libraryapi.domain.errors import BOOK_NOT_FOUND_FOR_ISBN, BusinessRuleViolation
from libraryapi.domain.result import Err
from libraryapi.models.errors import ProblemDetail

router = APIRouter()


@router.post(
    "",
    response_model=int,
    status_code=status.HTTP_201_CREATED,
    summary="Lend a book",
    responses={
        400: {
            "model": ProblemDetail,
            "description": "Unknown ISBN or book already loaned",
        }
    },
)
async def create_loan(
    request: LoanRequest,
    book_service: BookServiceDep,
    loan_service: LoanServiceDep,
) -> int:
    """
    Lend a book to a customer.

    Args:
        request: ISBN of the book and customer name
        book_service: Catalog service (injected)
        loan_service: Loan service (injected)

    Returns:
        Identifier of the new loan
    """
    book = await book_service.get_by_isbn(request.isbn)
    if book is None:
        raise BusinessRuleViolation(BOOK_NOT_FOUND_FOR_ISBN)

    result = await loan_service.save(to_loan(request, book))
    if isinstance(result, Err):
        raise result.error

    return result.value.id
