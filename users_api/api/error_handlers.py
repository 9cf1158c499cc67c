"""Error Handlers — map Users API failures to HTTP responses.

Invariants:
    - UsersApiError answers its own http_status with its to_response() envelope
    - RequestValidationError (bad fullName, malformed id) answers 400 with
      one detail per offending field
    - Anything else, including statement errors such as IntegrityError,
      answers a generic 500; the driver message only reaches the logs

Design Decisions:
    - Every body shares one {"error": {code, message, category, severity}} shape
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from users_api.core.errors import ErrorCategory, ErrorSeverity, UsersApiError

logger = logging.getLogger(__name__)

VALIDATION_ERROR = "VALIDATION_ERROR"
INTERNAL_ERROR = "INTERNAL_ERROR"


def register_error_handlers(app: FastAPI) -> None:
    """Register the three handlers, most specific first."""
    app.add_exception_handler(UsersApiError, handle_users_api_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def _error_body(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    **extra,
) -> dict:
    return {
        "error": {
            "code": code,
            "message": message,
            "category": category.value,
            "severity": severity.value,
            **extra,
        },
    }


async def handle_users_api_error(request: Request, exc: UsersApiError):
    # StoreConnectionError chains the driver error; log it, never render it
    logger.error(
        f"{exc.code} on {request.method} {request.url.path}: {exc.message}",
        exc_info=exc.__cause__,
        extra={"error_code": exc.code, "path": request.url.path},
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_validation_error(request: Request, exc: RequestValidationError):
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning(
        f"Rejected {request.method} {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": VALIDATION_ERROR, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            VALIDATION_ERROR, "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            details=details,
        ),
    )


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.error(
        f"Unhandled {type(exc).__name__} on {request.method} {request.url.path}",
        exc_info=exc,
        extra={"error_code": INTERNAL_ERROR, "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            INTERNAL_ERROR, "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )
