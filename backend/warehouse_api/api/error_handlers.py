"""Mapping of warehouse errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from warehouse_api.exceptions import (
    MalformedInput,
    OrderNotFound,
    StorageUnavailable,
    WarehouseError,
)
from warehouse_api.models.request import ErrorResponse

logger = logging.getLogger(__name__)

EXCEPTION_STATUS_MAP: dict[type[WarehouseError], int] = {
    OrderNotFound: status.HTTP_404_NOT_FOUND,
    MalformedInput: status.HTTP_422_UNPROCESSABLE_CONTENT,
    StorageUnavailable: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def create_error_response(exc: WarehouseError, status_code: int, detail: str | None = None) -> JSONResponse:
    """Build the JSON body shared by every error response."""
    body = ErrorResponse(message=exc.message, error=exc.error_code, detail=detail)
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def warehouse_exception_handler(request: Request, exc: WarehouseError) -> JSONResponse:
    """Handle errors raised by the order operations."""
    status_code = EXCEPTION_STATUS_MAP.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    logger.warning(
        "%s on %s %s: %s",
        exc.error_code,
        request.method,
        request.url.path,
        exc.message,
    )
    return create_error_response(exc, status_code)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report request body validation failures as malformed input."""
    errors = exc.errors()
    logger.warning(
        "Malformed request on %s %s: %d error(s)",
        request.method,
        request.url.path,
        len(errors),
    )
    detail = "; ".join(
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', '')}"
        for error in errors
    )
    return create_error_response(
        MalformedInput(), status.HTTP_422_UNPROCESSABLE_CONTENT, detail=detail
    )


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler."""
    logger.error("Unhandled exception: %s", exc, exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``."""
    app.add_exception_handler(WarehouseError, warehouse_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, global_exception_handler)
