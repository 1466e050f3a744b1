"""Loan API Routes - Route registration only."""

from fastapi import APIRouter

from libraryapi.api.v1 import LOANS_PREFIX
from libraryapi.api.v1.loans import api

router = APIRouter()
router.include_router(api.router, prefix=LOANS_PREFIX, tags=["loans"])
