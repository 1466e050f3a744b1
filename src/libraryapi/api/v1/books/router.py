"""Book Catalog API Routes - Route registration only."""

from fastapi import APIRouter

from libraryapi.api.v1 import BOOKS_PREFIX
from libraryapi.api.v1.books import api

router = APIRouter()
router.include_router(api.router, prefix=BOOKS_PREFIX, tags=["books"])
