"""Book Response Models."""

from pydantic import BaseModel, ConfigDict, Field


class BookResponse(BaseModel):
    """Book as returned to clients."""

    id: int = Field(..., description="Book identifier")
    isbn: str = Field(..., description="Book ISBN")
    title: str | None = Field(None, description="Book title")
    author: str | None = Field(None, description="Book author")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "isbn": "123",
                "title": "As aventuras",
                "author": "Jefferson",
            }
        }
    )


class BookPageResponse(BaseModel):
    """
    Page of books.

    Attributes:
        content: Books in this page
        total_elements: Number of books matching the filter
        total_pages: Number of pages for the requested size
        page: Zero-based page index
        size: Requested page size
    """

    content: list[BookResponse] = Field(..., description="Books in this page")
    total_elements: int = Field(..., description="Total matching books")
    total_pages: int = Field(..., description="Total pages")
    page: int = Field(..., description="Zero-based page index")
    size: int = Field(..., description="Page size")
