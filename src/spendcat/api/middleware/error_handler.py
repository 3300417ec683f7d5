"""Global error handling.

This module provides consistent error responses across all API endpoints.
Every failure is returned as ``{"error": {"title": <ErrorKind>}}`` with the
status code from the error catalog.
"""

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from spendcat.config import settings
from spendcat.core.errors import ERROR_CATALOG, ErrorKind, error_body
from spendcat.core.exceptions import SpendcatError

logger = logging.getLogger(__name__)


async def handle_spendcat_error(request: Request, exc: SpendcatError) -> JSONResponse:
    """Handle domain exceptions raised by validation, stores and services.

    Args:
        request: The incoming request
        exc: The domain exception

    Returns:
        JSONResponse with the error kind and its catalog status
    """
    error_info = ERROR_CATALOG.get(exc.error_code, {})

    extra = {"error_code": exc.error_code.value, "path": request.url.path, "method": request.method}
    if settings.debug:
        extra["details"] = exc.details

    logger.warning(
        f"Request rejected: {exc.error_code.value} ({error_info.get('message', 'no description')})",
        extra=extra,
    )

    return JSONResponse(status_code=exc.http_status, content=error_body(exc.error_code))


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Handle FastAPI request validation errors (path/query parameters).

    Args:
        request: The incoming request
        exc: The validation error

    Returns:
        JSONResponse with InvalidRequest
    """
    errors = exc.errors()
    fields = ", ".join(".".join(str(x) for x in error.get("loc", [])) for error in errors)

    logger.warning(
        f"Validation error on {request.url.path}: {fields}",
        extra={"path": request.url.path, "method": request.method},
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(ErrorKind.INVALID_REQUEST),
    )


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Handle routing errors (unknown path, wrong method) in the common error shape.

    Args:
        request: The incoming request
        exc: The HTTP exception raised by the router

    Returns:
        JSONResponse with NotFound / MethodNotAllowed
    """
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        kind = ErrorKind.NOT_FOUND
    elif exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        kind = ErrorKind.METHOD_NOT_ALLOWED
    else:
        kind = ErrorKind.UNKNOWN

    logger.info(
        f"HTTP {exc.status_code} on {request.url.path}",
        extra={"path": request.url.path, "method": request.method, "status_code": exc.status_code},
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(kind),
        headers=getattr(exc, "headers", None),
    )


async def handle_generic_error(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions.

    Args:
        request: The incoming request
        exc: The unexpected exception

    Returns:
        JSONResponse with a generic error title
    """
    extra = {
        "error_type": type(exc).__name__,
        "path": request.url.path,
        "method": request.method,
    }
    if settings.debug:
        logger.exception(f"Unexpected error on {request.url.path}", extra=extra)
    else:
        logger.error(f"Unexpected error on {request.url.path}", extra=extra)

    # Don't expose internal details
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(ErrorKind.INTERNAL_SERVER_ERROR),
    )
