"""OpenAPI schema customization for the Library API."""

from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

PROBLEM_DETAIL_REF = {"$ref": "#/components/schemas/ProblemDetail"}


def custom_openapi(app: FastAPI) -> dict[str, Any]:
    """Generate customized OpenAPI schema for the API.

    Args:
        app: The FastAPI application instance.

    Returns:
        Customized OpenAPI schema dictionary.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description="""
# Library API

Book catalog and loan management for a small library.

## Features

- **Catalog**: Register, read, update and delete books
- **Search**: Filter books by ISBN, title or author with pagination
- **Loans**: Lend a book to a customer, one active loan per book

## API Endpoints

### Health Check
- `GET /health` - Service status and storage provider

### Books
- `POST /api/books` - Register a book (ISBN must be unique)
- `GET /api/books/{id}` - Get a book
- `PUT /api/books/{id}` - Update title and author
- `DELETE /api/books/{id}` - Delete a book
- `GET /api/books?isbn=&title=&author=&page=0&size=10` - Search books

### Loans
- `POST /api/loans` - Lend a book by ISBN, returns the loan id

## Error Handling

All errors follow [RFC 7807 Problem Details](https://datatracker.ietf.org/doc/html/rfc7807) format.
The `errors` list holds one message per problem:

```json
{
  "type": "https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.1",
  "title": "Business rule violation",
  "status": 400,
  "instance": "/api/loans",
  "errors": ["Book already loaned"]
}
```
        """,
        routes=app.routes,
        license_info={
            "name": "MIT License",
            "url": "https://opensource.org/licenses/MIT",
        },
    )

    openapi_schema["tags"] = [
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring",
        },
        {
            "name": "books",
            "description": "Book catalog management",
        },
        {
            "name": "loans",
            "description": "Book loans",
        },
    ]

    # Add RFC 7807 error response to all endpoints
    for path in openapi_schema["paths"].values():
        for operation in path.values():
            if isinstance(operation, dict) and "responses" in operation:
                responses = operation["responses"]
                responses.pop("422", None)
                responses.setdefault(
                    "400",
                    {
                        "description": "Validation Error",
                        "content": {"application/json": {"schema": PROBLEM_DETAIL_REF}},
                    },
                )
                responses["500"] = {
                    "description": "Internal Server Error",
                    "content": {"application/json": {"schema": PROBLEM_DETAIL_REF}},
                }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


def configure_openapi(app: FastAPI) -> None:
    """Configure the FastAPI app to use custom OpenAPI schema.

    Args:
        app: The FastAPI application instance.
    """
    app.openapi = lambda: custom_openapi(app)  # type: ignore[method-assign]
