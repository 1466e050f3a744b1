"""
Infrastructure factory for storage provider selection.

Selects repository implementations based on configuration:
- memory: In-process dictionaries (development, tests)
- sqlite: SQLite database file (or ":memory:")

Repositories are created on first use and reused afterwards, so every
request served by the same application sees the same storage.

Usage:
    from libraryapi.infrastructure import InfrastructureFactory
    from libraryapi.config import get_settings

    # Option 1: From settings
    settings = get_settings()
    factory = InfrastructureFactory.from_settings(settings)

    # Option 2: Manual configuration
    factory = InfrastructureFactory(provider="sqlite", database_path=":memory:")

    # Get repositories
    book_repo = factory.get_book_repository()
    loan_repo = factory.get_loan_repository()
"""

from typing import TYPE_CHECKING, Literal, get_args

from loguru import logger

from libraryapi.infrastructure.repositories import BookRepository, LoanRepository

if TYPE_CHECKING:
    from libraryapi.config import Settings
    from libraryapi.infrastructure.implementations.sqlite import SQLiteDatabase

StorageProvider = Literal["memory", "sqlite"]


class InfrastructureFactory:
    """
    Factory for creating storage repository instances.

    Provides dependency injection for provider-agnostic storage.
    """

    def __init__(self, provider: StorageProvider | None = None, **config):
        """
        Initialize infrastructure factory.

        Args:
            provider: Storage provider ("memory", "sqlite").
                     If None, uses "memory" as default.
            **config: Provider-specific configuration options
                     (sqlite: database_path)

        Raises:
            ValueError: If provider is not supported
        """
        if provider is None:
            provider = "memory"

        if provider not in get_args(StorageProvider):
            raise ValueError(f"Unsupported provider: {provider}")

        self.provider = provider
        self.config = config

        self._database: "SQLiteDatabase | None" = None
        self._book_repository: BookRepository | None = None
        self._loan_repository: LoanRepository | None = None

        logger.info(f"Initialized InfrastructureFactory with provider: {provider}")

    @classmethod
    def from_settings(cls, settings: "Settings") -> "InfrastructureFactory":
        """
        Create factory from Settings object.

        Args:
            settings: Application settings from config.py

        Returns:
            InfrastructureFactory configured from settings
        """
        config = {
            "database_path": settings.sqlite_database_path,
        }

        return cls(provider=settings.storage_provider, **config)

    def _get_database(self) -> "SQLiteDatabase":
        if self._database is None:
            from libraryapi.infrastructure.implementations.sqlite import (
                SQLiteDatabase,
            )

            self._database = SQLiteDatabase(
                self.config.get("database_path", ":memory:")
            )
        return self._database

    def get_book_repository(self) -> BookRepository:
        """
        Get book repository for configured provider.

        Returns:
            BookRepository implementation
        """
        if self._book_repository is None:
            if self.provider == "memory":
                from libraryapi.infrastructure.implementations.memory import (
                    MemoryBookRepository,
                )

                self._book_repository = MemoryBookRepository()

            else:
                from libraryapi.infrastructure.implementations.sqlite import (
                    SQLiteBookRepository,
                )

                self._book_repository = SQLiteBookRepository(self._get_database())

        return self._book_repository

    def get_loan_repository(self) -> LoanRepository:
        """
        Get loan repository for configured provider.

        Returns:
            LoanRepository implementation
        """
        if self._loan_repository is None:
            if self.provider == "memory":
                from libraryapi.infrastructure.implementations.memory import (
                    MemoryLoanRepository,
                )

                self._loan_repository = MemoryLoanRepository()

            else:
                from libraryapi.infrastructure.implementations.sqlite import (
                    SQLiteLoanRepository,
                )

                self._loan_repository = SQLiteLoanRepository(self._get_database())

        return self._loan_repository

    def close(self) -> None:
        """Release storage resources (open database connections)."""
        if self._database is not None:
            self._database.close()
            self._database = None
            self._book_repository = None
            self._loan_repository = None
