"""
FastAPI application factory.

Creates and configures the FastAPI application with all middleware,
routers, and exception handlers.
"""

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException

from libraryapi import __version__
from libraryapi.config import Settings, get_settings
from libraryapi.core.logging import logger
from libraryapi.domain.errors import BusinessRuleViolation, NotFound
from libraryapi.exception_handlers import (
    business_rule_exception_handler,
    general_exception_handler,
    http_exception_handler,
    not_found_exception_handler,
    validation_exception_handler,
)
from libraryapi.infrastructure import InfrastructureFactory
from libraryapi.lifespan import lifespan
from libraryapi.middleware import TraceIDMiddleware
from libraryapi.openapi import configure_openapi
from libraryapi.routes import register_routes


def create_app(
    settings: Settings | None = None,
    infrastructure: InfrastructureFactory | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use (defaults to get_settings())
        infrastructure: Storage factory to use (defaults to one built from settings)

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    # Docs URLs must be set before creating the FastAPI instance
    docs_url = "/docs" if settings.enable_docs else None
    redoc_url = "/redoc" if settings.enable_docs else None
    openapi_url = "/openapi.json" if settings.enable_docs else None

    app = FastAPI(
        title=settings.project_name,
        description=settings.project_description,
        version=__version__,
        lifespan=lifespan,
        docs_url=docs_url,
        redoc_url=redoc_url,
        openapi_url=openapi_url,
    )

    # One storage factory per application, shared by all requests
    app.state.infrastructure = infrastructure or InfrastructureFactory.from_settings(
        settings
    )

    # Register exception handlers (RFC 7807 Problem Details)
    app.add_exception_handler(BusinessRuleViolation, business_rule_exception_handler)
    app.add_exception_handler(NotFound, not_found_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # Add middleware
    app.add_middleware(TraceIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_allowed_origins(),
        allow_credentials=True,
        allow_methods=settings.get_cors_allowed_methods(),
        allow_headers=settings.get_cors_allowed_headers(),
    )

    register_routes(app)

    configure_openapi(app)

    logger.info(f" FastAPI application created (v{__version__})")
    logger.info(f"Storage provider: {app.state.infrastructure.provider}")
    logger.info(f"CORS origins: {settings.get_allowed_origins()}")

    return app
