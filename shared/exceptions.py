# shared/exceptions.py
import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

GENERIC_SERVER_ERROR = "Server error"


class AppError(Exception):
    """Base error rendered as a ``{success: false, message}`` envelope."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class StorageError(AppError):
    """A storage call failed. Only the generic message reaches the client.

    Attributes:
        original_error: The underlying database error, kept for logging.
    """

    def __init__(self, message: str = GENERIC_SERVER_ERROR, original_error: Optional[Exception] = None) -> None:
        super().__init__(message)
        self.original_error = original_error


def error_response(status_code: int, message: str, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message}, headers=headers)


def format_validation_errors(errors) -> str:
    """Turn the first pydantic error into ``"<field>: <reason>"``."""
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [part for part in first.get("loc", ()) if isinstance(part, str) and part not in ("body", "query")]
    msg = first.get("msg", "Invalid value")
    if not loc:
        return msg
    return f"{'.'.join(loc)}: {msg}"


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, StorageError):
        logger.error("Storage error on %s %s: %r", request.method, request.url.path, exc.original_error)
    return error_response(exc.status_code, exc.message)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, format_validation_errors(exc.errors()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
