"""Router for the service status endpoint, mounted outside the /api prefix."""

from fastapi import APIRouter

from libraryapi.api.v1.health import api

router = APIRouter(tags=["Health"])
router.include_router(api.router)
