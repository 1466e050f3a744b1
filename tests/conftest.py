"""Global pytest configuration and fixtures for all tests."""

import os

# Settings are read at import time, so the test environment must be in place
# before any libraryapi module is imported.
os.environ["STORAGE_PROVIDER"] = "memory"
os.environ["ENABLE_DOCS"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from libraryapi.application import create_app  # noqa: E402
from libraryapi.infrastructure import InfrastructureFactory  # noqa: E402


@pytest.fixture
def infrastructure():
    """Fresh in-memory storage for one test."""
    factory = InfrastructureFactory(provider="memory")
    yield factory
    factory.close()


@pytest.fixture
def client(infrastructure):
    """Test client for an application backed by fresh in-memory storage."""
    app = create_app(infrastructure=infrastructure)
    return TestClient(app)
