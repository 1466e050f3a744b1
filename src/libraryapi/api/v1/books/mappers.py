"""Conversions between book DTOs and domain records."""

from libraryapi.api.v1.books.request import BookFilter, BookRequest
from libraryapi.api.v1.books.response import BookPageResponse, BookResponse
from libraryapi.domain.models import Book, Page


def to_book(request: BookRequest) -> Book:
    return Book(isbn=request.isbn, title=request.title, author=request.author)


def to_filter_book(book_filter: BookFilter) -> Book:
    return Book(isbn=book_filter.isbn, title=book_filter.title, author=book_filter.author)


def to_book_response(book: Book) -> BookResponse:
    return BookResponse(id=book.id, isbn=book.isbn, title=book.title, author=book.author)


def to_book_page_response(page: Page[Book]) -> BookPageResponse:
    return BookPageResponse(
        content=[to_book_response(book) for book in page.content],
        total_elements=page.total_elements,
        total_pages=page.total_pages,
        page=page.page,
        size=page.size,
    )
