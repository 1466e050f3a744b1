"""
Main FastAPI application entry point.

This module creates the FastAPI application using the application factory
pattern for clean separation of concerns.
"""

from libraryapi.application import create_app
from libraryapi.config import get_settings
from libraryapi.core.logging import intercept_standard_logging

# Intercept logs from uvicorn and other libraries
intercept_standard_logging()

app = create_app()


def run() -> None:
    """Run the API with uvicorn using host and port from settings."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "libraryapi.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if settings.debug else "warning",
    )


if __name__ == "__main__":
    run()
