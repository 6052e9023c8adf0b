"""Centralized error translation.

``map_error`` is a total function from any exception to an HTTP status and
the standard error envelope. ``register_error_handlers`` wires it into the
FastAPI app once per failure category, so no router or service formats an
error response by hand.
"""

from collections.abc import Sequence
from typing import Any

from bson.errors import InvalidId
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from pymongo.errors import DuplicateKeyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from travestore.exceptions import AppError
from travestore.logging import get_logger
from travestore.schemas.error import ErrorResponse

logger = get_logger(__name__)

RESOURCE_NOT_FOUND_MESSAGE = "Resource not found"
DUPLICATE_KEY_MESSAGE = "Duplicate field value entered"
SERVER_ERROR_MESSAGE = "Server Error"

# Location prefixes FastAPI puts in front of request validation errors.
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _field_messages(errors: Sequence[Any]) -> list[str]:
    """Flatten pydantic error dicts into "field: message" strings."""
    messages: list[str] = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(loc)
        messages.append(f"{field}: {error['msg']}" if field else error["msg"])
    return messages


def map_error(exc: Exception) -> tuple[int, ErrorResponse]:
    """Translate an exception into (status_code, error envelope)."""
    if isinstance(exc, InvalidId):
        return 404, ErrorResponse(error=RESOURCE_NOT_FOUND_MESSAGE)

    if isinstance(exc, DuplicateKeyError):
        return 400, ErrorResponse(error=DUPLICATE_KEY_MESSAGE)

    if isinstance(exc, (PydanticValidationError, RequestValidationError)):
        return 400, ErrorResponse(error=_field_messages(exc.errors()))

    if isinstance(exc, AppError):
        return exc.status_code, ErrorResponse(error=exc.message)

    if isinstance(exc, StarletteHTTPException):
        return exc.status_code, ErrorResponse(error=str(exc.detail))

    return 500, ErrorResponse(error=str(exc) or SERVER_ERROR_MESSAGE)


async def error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Exception handler shared by every registered failure category."""
    status_code, body = map_error(exc)
    if status_code >= 500:
        logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    else:
        logger.warning(
            "request_failed",
            status_code=status_code,
            error=body.error,
            path=request.url.path,
        )
    headers = exc.headers if isinstance(exc, StarletteHTTPException) else None
    return JSONResponse(status_code=status_code, content=body.model_dump(), headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Route every failure category through map_error."""
    for exc_class in (
        AppError,
        InvalidId,
        DuplicateKeyError,
        PydanticValidationError,
        RequestValidationError,
        StarletteHTTPException,
        Exception,
    ):
        app.add_exception_handler(exc_class, error_handler)
