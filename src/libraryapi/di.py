"""
Dependency injection container for the library backend.

This module provides centralized dependency injection using FastAPI's Depends
with typing.Annotated for clean type hints throughout the application.
"""

from typing import Annotated

from fastapi import Depends, Request

from libraryapi.config import Settings, get_settings
from libraryapi.infrastructure import InfrastructureFactory
from libraryapi.services import BookService, LoanService

# ============================================================================
# Settings Dependencies
# ============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings)]
"""Injected Settings instance (cached via lru_cache)."""


# ============================================================================
# Infrastructure Dependencies
# ============================================================================


def get_infrastructure_factory(request: Request) -> InfrastructureFactory:
    """
    Get the infrastructure factory owned by the running application.

    The factory is created once in create_app() so that every request
    shares the same storage.

    Args:
        request: Incoming request (injected)

    Returns:
        Application infrastructure factory
    """
    return request.app.state.infrastructure


InfrastructureFactoryDep = Annotated[
    InfrastructureFactory, Depends(get_infrastructure_factory)
]
"""Injected InfrastructureFactory instance."""


# ============================================================================
# Service Dependencies
# ============================================================================


def get_book_service(factory: InfrastructureFactoryDep) -> BookService:
    """
    Get catalog service.

    Args:
        factory: Infrastructure factory (injected)

    Returns:
        BookService bound to the configured book repository
    """
    return BookService(factory.get_book_repository())


BookServiceDep = Annotated[BookService, Depends(get_book_service)]
"""Injected BookService."""


def get_loan_service(factory: InfrastructureFactoryDep) -> LoanService:
    """
    Get loan service.

    Args:
        factory: Infrastructure factory (injected)

    Returns:
        LoanService bound to the configured loan repository
    """
    return LoanService(factory.get_loan_repository())


LoanServiceDep = Annotated[LoanService, Depends(get_loan_service)]
"""Injected LoanService."""
