"""Global exception handlers.

Domain errors, request binding failures and anything unexpected all leave the
API in the same shape: ``{"message", "details", "timestamp"}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskapi.exceptions import AppError, InternalError
from taskapi.schemas.error import ErrorResponse

logger = logging.getLogger(__name__)

# Leading loc entries naming where a field came from, not the field itself
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def error_response(
    status_code: int,
    message: str,
    details: Any | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON error body used by every handler."""
    body = ErrorResponse(message=message, details=details)
    return JSONResponse(
        status_code=status_code, content=body.model_dump(mode="json"), headers=headers
    )


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Translate a domain error into its HTTP status."""
    if isinstance(exc, InternalError):
        logger.error("Internal error on %s: %s", request.url.path, exc.message)
        return error_response(exc.status_code, InternalError.public_message)

    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message, exc.details)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request binding failures as 400 with per-field messages."""
    logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
    return error_response(
        status.HTTP_400_BAD_REQUEST,
        "Validation failed",
        field_errors(exc.errors()),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Keep framework errors (unknown route, wrong method) in the same shape."""
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Catch-all; never leaks internal details."""
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, InternalError.public_message)


def field_errors(errors: Any) -> dict[str, str]:
    """Map pydantic error entries to ``{field: message}``; first message per field wins."""
    result: dict[str, str] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(loc) or "request"
        result.setdefault(field, error.get("msg", "Invalid value"))
    return result
