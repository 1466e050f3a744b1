"""
API v1 endpoints.

Route prefix constants for consistent API versioning.
"""

API_V1_PREFIX: str = "/api"

# Module-specific prefixes
BOOKS_PREFIX: str = f"{API_V1_PREFIX}/books"
LOANS_PREFIX: str = f"{API_V1_PREFIX}/loans"

__all__ = [
    "API_V1_PREFIX",
    "BOOKS_PREFIX",
    "LOANS_PREFIX",
]
