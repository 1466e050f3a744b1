"""
Health check endpoints.

Provides health check endpoints for monitoring service status.
"""

from fastapi import APIRouter

from libraryapi import __version__
from libraryapi.api.v1.health.models import HealthResponse
from libraryapi.di import InfrastructureFactoryDep

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(factory: InfrastructureFactoryDep) -> HealthResponse:
    """
    Health check endpoint.

    Returns:
        Service status, version and storage provider
    """
    return HealthResponse(
        status="ok",
        version=__version__,
        storage=factory.provider,
        message="Service is healthy",
    )
