"""Exception handlers for converting exceptions to HTTP responses.

Handlers are registered per base class; the HTTP status comes from the
error_code attribute via ERROR_CODE_TO_HTTP_STATUS.

To add a new exception:
1. Create the exception class (inheriting from ApplicationError or DomainException)
2. Add its error_code to ERROR_CODE_TO_HTTP_STATUS in error_codes.py
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from user_api.application.exceptions import ApplicationError
from user_api.domain.exceptions import DomainException
from user_api.presentation.error_codes import get_http_status_for_error_code

logger = logging.getLogger(__name__)


def _error_response(http_status: int, detail: str, error_code: str) -> JSONResponse:
    return JSONResponse(
        status_code=http_status,
        content={
            "detail": detail,
            "error_code": error_code,
        },
    )


async def application_error_handler(
    request: Request, exc: ApplicationError
) -> JSONResponse:
    """Handle ALL application layer exceptions (not found, conflict, invalid input)."""
    return _error_response(
        get_http_status_for_error_code(exc.error_code), exc.message, exc.error_code
    )


async def domain_exception_handler(
    request: Request, exc: DomainException
) -> JSONResponse:
    """Handle ALL domain layer exceptions."""
    return _error_response(
        get_http_status_for_error_code(exc.error_code), exc.message, exc.error_code
    )


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request data the framework could not bind.

    Covers un-parseable path ids, malformed bodies and out-of-range query
    parameters. Reported as INVALID_INPUT (400) with one entry per field.
    """
    validation_errors = []
    for error in exc.errors():
        # Build field path (e.g., "body.email" or "query.limit")
        field_location = ".".join(str(loc) for loc in error["loc"])

        validation_errors.append(
            {
                "field": field_location,
                "message": error["msg"],
            }
        )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Validation failed",
            "error_code": "INVALID_INPUT",
            "errors": validation_errors,
        },
    )


async def database_error_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    """Handle database errors without exposing internal details."""
    logger.error("Database error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal database error occurred",
        "DATABASE_ERROR",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all handler for any unexpected errors."""
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=True)

    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal server error occurred",
        "INTERNAL_SERVER_ERROR",
    )
