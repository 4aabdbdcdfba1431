"""
Exception handlers for the FastAPI application.

Every error leaves the API in the same envelope:
``{"error": true, "message": ..., "status_code": ...}`` plus optional extras.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from appointment_manager.core.domain import DomainException, EntityNotFoundException

logger = logging.getLogger(__name__)

UNPROCESSABLE = 422


def error_response(
    status_code: int,
    message: Any,
    headers: dict[str, str] | None = None,
    **extra: Any,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": True, "message": message, "status_code": status_code, **extra},
        headers=headers,
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """HTTPException raised by routes, or by routing itself (404, 405)."""
    if not isinstance(exc, StarletteHTTPException):
        return await global_exception_handler(request, exc)
    return error_response(exc.status_code, exc.detail, headers=getattr(exc, "headers", None))


async def validation_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Malformed path, query or body; lists every offending field."""
    if not isinstance(exc, RequestValidationError):
        return error_response(UNPROCESSABLE, str(exc))

    details = [
        {
            "field": ".".join(str(part) for part in error["loc"]),
            "message": error["msg"],
            "type": error["type"],
        }
        for error in exc.errors()
    ]
    logger.warning(f"Rejected request to {request.url.path}: {details}")
    return error_response(UNPROCESSABLE, "Validation error", details=details)


async def domain_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Domain exceptions that escaped a use case (e.g. raised in a route)."""
    if not isinstance(exc, DomainException):
        return await global_exception_handler(request, exc)

    status_code = (
        status.HTTP_404_NOT_FOUND if isinstance(exc, EntityNotFoundException) else status.HTTP_400_BAD_REQUEST
    )
    logger.warning(f"Domain error on {request.url.path}: {exc.code} {exc.message}")
    body = exc.to_dict()
    return error_response(status_code, body["message"], code=body["error"], details=body["details"])


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last resort: log with traceback, answer without internals."""
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc!s}", exc_info=True)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
