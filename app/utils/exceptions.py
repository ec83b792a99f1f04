"""Custom exception classes and error handling utilities."""
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from loguru import logger


class EnglishGameError(Exception):
    """Base exception for the application."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    error: str = "BadRequest"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class NotFoundError(EnglishGameError):
    """Requested entity does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    error = "NotFound"


class ProgressConflictError(EnglishGameError):
    """Progress counters were submitted lower than the stored values."""

    status_code = status.HTTP_409_CONFLICT
    error = "Conflict"


class AuthenticationError(EnglishGameError):
    """No parent credentials were supplied."""

    status_code = status.HTTP_401_UNAUTHORIZED
    error = "Unauthorized"


class AuthorizationError(EnglishGameError):
    """Parent credentials were supplied but rejected."""

    status_code = status.HTTP_403_FORBIDDEN
    error = "Forbidden"


def _error_body(error: EnglishGameError) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": error.error, "message": error.message}
    if error.details:
        body["details"] = error.details
    return body


async def handle_application_error(request: Request, exc: EnglishGameError) -> JSONResponse:
    """Render an application exception as a JSON error body."""

    logger.warning(
        "Request failed",
        path=request.url.path,
        error=exc.error,
        message=exc.message,
    )
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc), headers=headers)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return the tagged ``ValidationError`` result for rejected payloads."""

    logger.warning("Validation failed", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "ValidationError", "details": jsonable_encoder(exc.errors())},
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler mirroring the exception class in the payload."""

    logger.exception("Unhandled error", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": type(exc).__name__, "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the application's error handlers to ``app``."""

    app.add_exception_handler(EnglishGameError, handle_application_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
