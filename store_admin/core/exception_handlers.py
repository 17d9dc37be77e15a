"""
FastAPI exception handlers for custom exceptions.

WHY: Exception handlers convert our custom exceptions into JSON responses
with the right status code, so routes only deal with the success path:
1. DomainError subclasses become the soft result body
   {"valid": false, "error": ..., "error_description": ...}
2. Body/path parsing errors use the same shape with error "Invalid payload"
3. Anything else is logged with its traceback and answered with a generic
   500 that leaks no internals
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_admin.core.exceptions import AppException, DomainError


logger = logging.getLogger(__name__)


async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
    """
    Handle custom AppException and its subclasses.

    Domain failures are expected outcomes and are logged at WARNING; other
    AppExceptions are server-side problems and are logged at ERROR.

    Args:
        request: The FastAPI request object
        exc: The custom exception instance

    Returns:
        JSONResponse with error details
    """
    if isinstance(exc, DomainError):
        logger.warning(
            f"{request.method} {request.url.path} rejected: {exc.error} {exc.message} "
            f"{exc.filtered_context()}"
        )
    else:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")

    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Request bodies are loosely typed, so this mostly fires for bodies that are
    not JSON objects, wrongly shaped nested values, or non-integer path ids.

    Args:
        request: The FastAPI request object
        exc: The Pydantic validation error

    Returns:
        JSONResponse in the soft result shape, with field-level details
    """
    errors = []
    for error in exc.errors():
        errors.append(
            {
                "field": ".".join(str(loc) for loc in error["loc"]),
                "message": error["msg"],
                "type": error["type"],
            }
        )

    description = "; ".join(f"{e['field']}: {e['message']}" for e in errors)
    logger.warning(f"{request.method} {request.url.path} invalid request: {description}")

    return JSONResponse(
        status_code=400,
        content={
            "valid": False,
            "error": "Invalid payload",
            "error_description": description or "Request validation failed",
            "details": {"errors": errors},
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """
    Handle Starlette HTTP exceptions.

    WHY: Some HTTP exceptions (404, 405) are raised by Starlette/FastAPI
    before reaching our routes. This handler ensures they match our error format.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "valid": False,
            "error": "HTTPException",
            "error_description": exc.detail,
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Catch-all handler for unexpected exceptions.

    The full traceback goes to the log; the caller gets a generic message.
    """
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )

    return JSONResponse(
        status_code=500,
        content={
            "valid": False,
            "error": "InternalServerError",
            "error_description": "An unexpected error occurred",
        },
    )
