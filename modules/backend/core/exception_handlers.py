"""
Exception Handlers.

Turns exceptions into JSON error bodies of the ErrorResponse shape:

    {"message": ..., "code": ..., "details": ..., "error": ..., "requestId": ...}

Empty members are left out, so a typical body is just message, code and
requestId.
"""

from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from modules.backend.core.config import get_app_config
from modules.backend.core.exceptions import (
    ApplicationError,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    ProfileUpdateError,
    ValidationError,
)
from modules.backend.core.logging import get_logger
from modules.backend.schemas.base import ErrorResponse

logger = get_logger(__name__)

# Subclasses resolve through their MRO, so DuplicateUsernameError answers
# 400 as a ValidationError and NoteNotFoundError 404 as a NotFoundError.
EXCEPTION_STATUS_MAP: dict[type[ApplicationError], int] = {
    NotFoundError: 404,
    ValidationError: 400,
    AuthenticationError: 401,
    AuthorizationError: 403,
    ConflictError: 409,
    ProfileUpdateError: 500,
}


def status_for(exc: ApplicationError) -> int:
    """HTTP status of the nearest mapped ancestor, 500 if none is mapped."""
    return next(
        (EXCEPTION_STATUS_MAP[cls] for cls in type(exc).__mro__ if cls in EXCEPTION_STATUS_MAP),
        500,
    )


def _get_request_id(request: Request) -> str | None:
    """Id set by RequestContextMiddleware, else the raw request header."""
    return getattr(request.state, "request_id", None) or request.headers.get("x-request-id")


def _respond(request: Request, status_code: int, body: ErrorResponse, **log_context: Any) -> JSONResponse:
    context = {
        "status": status_code,
        "code": body.code,
        "path": request.url.path,
        "method": request.method,
        "request_id": body.request_id,
        **log_context,
    }
    if status_code >= 500:
        logger.error(body.message, extra=context)
    else:
        logger.warning(body.message, extra=context)

    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json", by_alias=True, exclude_none=True),
    )


async def application_error_handler(request: Request, exc: ApplicationError) -> JSONResponse:
    """
    Render any ApplicationError.

    ValidationError details are passed through. The cause of a
    ProfileUpdateError is echoed in ``error`` only while the
    ``api_detailed_errors`` feature flag is on.
    """
    body = ErrorResponse(message=exc.message, code=exc.code, request_id=_get_request_id(request))

    if isinstance(exc, ValidationError) and exc.details:
        body.details = exc.details
    if isinstance(exc, ProfileUpdateError) and get_app_config().features.api_detailed_errors:
        body.error = str(exc.cause)

    return _respond(request, status_for(exc), body)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Request bodies or parameters FastAPI could not parse: 422 with one entry per problem."""
    problems = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ())),
            "message": err.get("msg", "Validation error"),
            "type": err.get("type", "unknown"),
        }
        for err in exc.errors()
    ]
    body = ErrorResponse(
        message="Request validation failed",
        code="VAL_REQUEST_INVALID",
        details={"validation_errors": problems},
        request_id=_get_request_id(request),
    )
    return _respond(request, 422, body, error_count=len(problems))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Anything else: a generic 500. The exception text stays in the logs."""
    logger.exception(
        "Unhandled exception",
        extra={"exception_type": type(exc).__name__, "path": request.url.path},
    )
    body = ErrorResponse(
        message="An unexpected error occurred",
        code="SYS_INTERNAL_ERROR",
        request_id=_get_request_id(request),
    )
    return _respond(request, 500, body)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApplicationError, application_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
