"""
Error taxonomy of the material order service and the FastAPI handlers that
render it. Every error leaves the API as ``{"message": ...}``.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from backend.app.core.logging_config import get_logger

log = get_logger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body."
SERVER_ERROR_MESSAGE = "Server error"


class MaterialOrderError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(MaterialOrderError):
    """Missing, malformed or inconsistent input."""
    status_code = 400


class NotFoundError(MaterialOrderError):
    """Identifier does not resolve to a record."""
    status_code = 404


class StorageError(MaterialOrderError):
    """
    Storage collaborator failure. ``message`` is the generic text sent to
    the caller; ``detail`` stays in the logs.
    """
    status_code = 500

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message)
        self.detail = detail


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


async def material_order_error_handler(request: Request, exc: MaterialOrderError):
    return _message(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    log.warning(f"{request.method} {request.url.path} rejected: {exc.errors()}")
    return _message(400, INVALID_BODY_MESSAGE)


async def unhandled_error_handler(request: Request, exc: Exception):
    log.critical(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return _message(500, SERVER_ERROR_MESSAGE)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MaterialOrderError, material_order_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
