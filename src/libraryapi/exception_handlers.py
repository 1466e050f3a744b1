"""Global exception handlers for standardized error responses.

Implements RFC 7807 Problem Details for HTTP APIs. Every error body carries
an ordered ``errors`` list of messages, except "not found" responses which
carry none.
"""

from fastapi import HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from libraryapi.core.logging import logger
from libraryapi.domain.errors import BusinessRuleViolation, NotFound
from libraryapi.middleware import TRACE_ID_HEADER
from libraryapi.models.errors import ProblemDetail, ValidationErrorDetail


def _problem_response(problem_detail: ProblemDetail) -> JSONResponse:
    return JSONResponse(
        status_code=problem_detail.status,
        content=problem_detail.model_dump(exclude_none=True),
    )


async def business_rule_exception_handler(  # noqa: ASYNC100
    request: Request, exc: BusinessRuleViolation
) -> JSONResponse:
    """Handle a business rule violation with a single-message 400 response.

    Args:
        request: The FastAPI request object.
        exc: The violated rule.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.warning(
        f"Business rule violation on {request.method} {request.url.path}: "
        f"{exc.message}"
    )

    return _problem_response(
        ProblemDetail(
            title="Business rule violation",
            status=status.HTTP_400_BAD_REQUEST,
            instance=str(request.url.path),
            errors=[exc.message],
        )
    )


async def not_found_exception_handler(  # noqa: ASYNC100
    request: Request, exc: NotFound
) -> JSONResponse:
    """Handle a missing resource with a 404 response without messages.

    Args:
        request: The FastAPI request object.
        exc: The NotFound error raised by a request handler.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.info(f"Resource not found: {request.url.path}")

    return _problem_response(
        ProblemDetail(
            title="Not Found",
            status=status.HTTP_404_NOT_FOUND,
            detail=exc.message or None,
            instance=str(request.url.path),
        )
    )


async def http_exception_handler(
    request: Request, exc: HTTPException
) -> JSONResponse:  # noqa: ASYNC100
    """Handle HTTPException with RFC 7807 ProblemDetail response.

    Note: FastAPI requires exception handlers to be async even if they don't
    perform async operations.

    Args:
        request: The FastAPI request object.
        exc: The HTTPException that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.error(
        f"HTTPException: {exc.status_code} - {exc.detail}",
        extra={
            "status_code": exc.status_code,
            "detail": exc.detail,
            "path": str(request.url.path),
            "method": request.method,
        },
    )

    return _problem_response(
        ProblemDetail(
            title="An error occurred",
            status=exc.status_code,
            instance=str(request.url.path),
            errors=[str(exc.detail)],
        )
    )


async def general_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:  # noqa: ASYNC100
    """Handle unexpected exceptions with 500 Internal Server Error.

    Storage failures and contract misuse (InvalidArgument) end up here.
    These responses bypass TraceIDMiddleware, so the trace id recorded on
    the request state is copied to the response header here.

    Args:
        request: The FastAPI request object.
        exc: The exception that was raised.

    Returns:
        JSONResponse with ProblemDetail body.
    """
    logger.exception(
        f"Unexpected error: {type(exc).__name__}",
        extra={
            "exception_type": type(exc).__name__,
            "exception_message": str(exc),
            "path": str(request.url.path),
            "method": request.method,
        },
    )

    response = _problem_response(
        ProblemDetail(
            title="Internal Server Error",
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
            instance=str(request.url.path),
        )
    )

    trace_id = getattr(request.state, "trace_id", None)
    if trace_id:
        response.headers[TRACE_ID_HEADER] = trace_id

    return response


async def validation_exception_handler(  # noqa: ASYNC100
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle validation errors with one message per invalid field.

    Args:
        request: The FastAPI request object.
        exc: The RequestValidationError from Pydantic validation.

    Returns:
        JSONResponse with ProblemDetail body including validation errors.
    """
    logger.warning(
        f"Validation error: {len(exc.errors())} errors",
        extra={
            "error_count": len(exc.errors()),
            "path": str(request.url.path),
            "method": request.method,
        },
    )

    fields = [
        ValidationErrorDetail(
            type=error["type"],
            loc=tuple(str(loc) for loc in error["loc"]),
            msg=error["msg"],
            input=error.get("input"),
        )
        for error in exc.errors()
    ]

    return _problem_response(
        ProblemDetail(
            title="Validation Error",
            status=status.HTTP_400_BAD_REQUEST,
            detail=f"One or more validation errors occurred ({len(fields)} errors).",
            instance=str(request.url.path),
            errors=[field.msg for field in fields],
            fields=fields,
        )
    )
