"""
Infrastructure abstraction layer for storage operations.

This module provides repository interfaces and implementations for:
- Book catalog storage
- Loan storage

Supports multiple providers via factory pattern:
- memory: In-process storage for development and tests
- sqlite: SQLite database
"""

from libraryapi.infrastructure.factory import InfrastructureFactory

__all__ = ["InfrastructureFactory"]
