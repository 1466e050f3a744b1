"""Book Request Models."""

from pydantic import BaseModel, Field


class BookRequest(BaseModel):
    """
    Book payload for create and update.

    On update only title and author are applied; the stored ISBN is kept.

    Attributes:
        isbn: Book ISBN
        title: Book title
        author: Book author
    """

    isbn: str = Field(..., description="Book ISBN", min_length=1)
    title: str = Field(..., description="Book title", min_length=1)
    author: str = Field(..., description="Book author", min_length=1)


class BookFilter(BaseModel):
    """Query parameters for searching the catalog. Empty fields match anything."""

    isbn: str | None = Field(None, description="ISBN contains (case-insensitive)")
    title: str | None = Field(None, description="Title contains (case-insensitive)")
    author: str | None = Field(None, description="Author contains (case-insensitive)")
