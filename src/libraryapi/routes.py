"""
Routes registration for the FastAPI application.

Centralizes all router registrations for clean application setup.
"""

from fastapi import FastAPI

from libraryapi.api.v1.books.router import router as books_router
from libraryapi.api.v1.health.router import router as health_router
from libraryapi.api.v1.loans.router import router as loans_router


def register_routes(app: FastAPI) -> None:
    """
    Register all application routers.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, public)
    app.include_router(health_router)

    # Book catalog endpoints
    app.include_router(books_router)

    # Loan endpoints
    app.include_router(loans_router)
