"""
Application lifecycle management.

Handles startup and shutdown events for the FastAPI application.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Logs startup and releases storage resources on shutdown.

    Args:
        app: FastAPI application instance
    """
    logger.info(" Starting library backend...")
    logger.info(f"Application version: {app.version}")

    yield

    logger.info(" Shutting down library backend...")

    infrastructure = getattr(app.state, "infrastructure", None)
    if infrastructure is not None:
        infrastructure.close()
