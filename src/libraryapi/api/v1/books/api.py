"""
Book catalog API endpoints.

Handles registration, lookup, update, deletion and search of books.
Business rules are enforced by BookService; this module translates
HTTP payloads to domain records and missing books to 404 responses.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from libraryapi.api.v1.books.mappers import (
    to_book,
    to_book_page_response,
    to_book_response,
    to_filter_book,
)
from libraryapi.api.v1.books.request import BookFilter, BookRequest
from libraryapi.api.v1.books.response import BookPageResponse, BookResponse
from libraryapi.di import BookServiceDep, SettingsDep
from libraryapi.domain.errors import NotFound
from libraryapi.domain.models import Book, PageRequest
from libraryapi.models.errors import ProblemDetail
from libraryapi.services import BookService

router = APIRouter()

NOT_FOUND_RESPONSE = {404: {"model": ProblemDetail, "description": "Book not found"}}


async def _get_book_or_404(service: BookService, book_id: int) -> Book:
    book = await service.get_by_id(book_id)
    if book is None:
        raise NotFound()
    return book


@router.post(
    "",
    response_model=BookResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a book",
    responses={400: {"model": ProblemDetail, "description": "ISBN already registered"}},
)
async def create_book(request: BookRequest, service: BookServiceDep) -> BookResponse:
    """
    Register a new book in the catalog.

    Args:
        request: Book data
        service: Catalog service (injected)

    Returns:
        Stored book with its identifier
    """
    result = await service.create(to_book(request))
    return to_book_response(result.unwrap())


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book",
    responses=NOT_FOUND_RESPONSE,
)
async def get_book(book_id: int, service: BookServiceDep) -> BookResponse:
    """Get book details by identifier."""
    book = await _get_book_or_404(service, book_id)
    return to_book_response(book)


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a book",
    responses=NOT_FOUND_RESPONSE,
)
async def delete_book(book_id: int, service: BookServiceDep) -> Response:
    """Delete a book by identifier."""
    book = await _get_book_or_404(service, book_id)
    await service.delete(book)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    responses=NOT_FOUND_RESPONSE,
)
async def update_book(
    book_id: int, request: BookRequest, service: BookServiceDep
) -> BookResponse:
    """
    Update title and author of a book.

    The ISBN sent in the payload is ignored; ISBNs never change.
    """
    book = await _get_book_or_404(service, book_id)
    book.title = request.title
    book.author = request.author

    updated = await service.update(book)
    return to_book_response(updated)


@router.get(
    "",
    response_model=BookPageResponse,
    summary="Search books",
)
async def find_books(
    book_filter: Annotated[BookFilter, Depends()],
    service: BookServiceDep,
    settings: SettingsDep,
    page: Annotated[int, Query(ge=0, description="Zero-based page index")] = 0,
    size: Annotated[int | None, Query(ge=1, description="Page size")] = None,
) -> BookPageResponse:
    """
    Search the catalog by example with pagination.

    Filters left empty match every book. The page size defaults to the
    configured default and is capped at the configured maximum.
    """
    page_size = min(size or settings.default_page_size, settings.max_page_size)

    result = await service.find(
        to_filter_book(book_filter), PageRequest(page=page, size=page_size)
    )
    return to_book_page_response(result)
