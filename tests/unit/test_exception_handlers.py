"""
Unit tests for exception handlers.

Tests error response formatting and status code mapping.
"""

import json
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from starlette.datastructures import State

from libraryapi.domain.errors import BusinessRuleViolation, NotFound
from libraryapi.exception_handlers import (
    business_rule_exception_handler,
    general_exception_handler,
    http_exception_handler,
    not_found_exception_handler,
    validation_exception_handler,
)


@pytest.fixture
def request_mock():
    """Mock request for /api/books."""
    request = MagicMock(spec=Request)
    request.url.path = "/api/books"
    request.method = "POST"
    request.state = State()
    return request


def body_of(response) -> dict:
    return json.loads(response.body)


# ===========================
# Business Rule Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_business_rule_handler_single_message(request_mock):
    """Test a violation renders a 400 with exactly its message."""
    # Act
    response = await business_rule_exception_handler(
        request_mock, BusinessRuleViolation("Isbn já cadastrado")
    )

    # Assert
    assert response.status_code == 400
    body = body_of(response)
    assert body["errors"] == ["Isbn já cadastrado"]
    assert body["status"] == 400
    assert body["instance"] == "/api/books"


# ===========================
# Not Found Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_not_found_handler_has_no_messages(request_mock):
    """Test not found renders a 404 without an errors list."""
    response = await not_found_exception_handler(request_mock, NotFound())

    assert response.status_code == 404
    body = body_of(response)
    assert "errors" not in body
    assert "detail" not in body
    assert body["title"] == "Not Found"


# ===========================
# HTTP Exception Handler Tests
# ===========================


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [400, 405, 500])
async def test_http_exception_handler(request_mock, status_code):
    """Test HTTPException keeps its status and detail as the message."""
    exc = HTTPException(status_code=status_code, detail="Something went wrong")

    response = await http_exception_handler(request_mock, exc)

    assert response.status_code == status_code
    assert body_of(response)["errors"] == ["Something went wrong"]


# ===========================
# General Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_general_exception_handler(request_mock):
    """Test unexpected errors render a generic 500."""
    response = await general_exception_handler(request_mock, RuntimeError("boom"))

    assert response.status_code == 500
    body = body_of(response)
    assert "boom" not in json.dumps(body)
    assert body["title"] == "Internal Server Error"
    assert "X-Trace-ID" not in response.headers


@pytest.mark.asyncio
async def test_general_exception_handler_keeps_trace_id(request_mock):
    """Test a 500 response carries the trace id recorded for the request."""
    request_mock.state.trace_id = "trace-500"

    response = await general_exception_handler(request_mock, RuntimeError("boom"))

    assert response.headers["X-Trace-ID"] == "trace-500"


# ===========================
# Validation Exception Handler Tests
# ===========================


@pytest.mark.asyncio
async def test_validation_exception_handler_no_errors(request_mock):
    """Test validation handler with an empty error list."""
    exc = RequestValidationError(errors=[])

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 400
    assert body_of(response)["errors"] == []


@pytest.mark.asyncio
async def test_validation_exception_handler_one_message_per_field(request_mock):
    """Test every invalid field contributes its message, in order."""
    exc = RequestValidationError(
        errors=[
            {"type": "missing", "loc": ("body", "isbn"), "msg": "Field required"},
            {
                "type": "string_too_short",
                "loc": ("body", "title"),
                "msg": "String should have at least 1 character",
                "input": "",
            },
        ]
    )

    response = await validation_exception_handler(request_mock, exc)

    assert response.status_code == 400
    body = body_of(response)
    assert body["errors"] == [
        "Field required",
        "String should have at least 1 character",
    ]
    assert [field["loc"] for field in body["fields"]] == [
        ["body", "isbn"],
        ["body", "title"],
    ]
