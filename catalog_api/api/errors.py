"""Exception handlers.

Maps domain, validation, and store errors onto the uniform
ErrorResponse body.
"""

from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog_api.domain.exceptions import (
    DomainError,
    ProductNotFoundError,
    ValidationFailure,
)

logger = structlog.get_logger()


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
) -> JSONResponse:
    """Build an error response in the standard format.

    Args:
        request: Current request.
        status_code: HTTP status.
        error_code: Machine-readable error code.
        message: Human-readable message.
        details: Optional field-level details.

    Returns:
        JSON error response.
    """
    return JSONResponse(
        status_code=status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details or [],
            "request_id": getattr(request.state, "request_id", None),
        },
    )


async def product_not_found_handler(request: Request, exc: ProductNotFoundError) -> JSONResponse:
    """Handle deletes of missing products."""
    logger.warning("Resource not found", product_id=exc.product_id, path=request.url.path)
    return error_response(
        request,
        status.HTTP_404_NOT_FOUND,
        "PRODUCT_NOT_FOUND",
        exc.message,
    )


async def validation_failure_handler(request: Request, exc: ValidationFailure) -> JSONResponse:
    """Handle domain validation failures."""
    logger.warning("Validation failed", field=exc.field, reason=exc.reason)
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        exc.message,
        [{"field": exc.field, "message": exc.reason}],
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Handle any other domain error."""
    logger.error("Domain error", error=exc.message, details=exc.details)
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "DOMAIN_ERROR",
        exc.message,
    )


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed bodies and query parameters."""
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or None,
            "message": error["msg"],
        }
        for error in exc.errors()
    ]
    logger.warning("Validation failed", errors=details)
    return error_response(
        request,
        status.HTTP_400_BAD_REQUEST,
        "VALIDATION_ERROR",
        "Request validation failed",
        details,
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return error_response(request, exc.status_code, error_code, message, details)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle record store failures."""
    logger.exception(
        "Record store failure",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return error_response(
        request,
        status.HTTP_503_SERVICE_UNAVAILABLE,
        "STORE_ERROR",
        "The product store is unavailable",
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.add_exception_handler(ValidationFailure, validation_failure_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
