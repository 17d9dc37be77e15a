"""
Main FastAPI application.

WHY: This is the entry point for the application. It configures logging,
middleware, routes and exception handlers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_admin.core.config import settings
from store_admin.core.exceptions import AppException
from store_admin.core.exception_handlers import (
    app_exception_handler,
    validation_exception_handler,
    http_exception_handler,
    generic_exception_handler,
)
from store_admin.core.logging_config import setup_logging
from store_admin.middleware import RequestContextMiddleware
from store_admin.api import stores, employees, packages, bookings


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    WHY: Factory pattern allows easier testing with different configurations
    and makes it possible to create multiple app instances if needed.

    Returns:
        Configured FastAPI application instance
    """
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Store administration API: stores, employees, packages and bookings",
        version=settings.VERSION,
        docs_url=f"{settings.API_PREFIX}/docs",
        redoc_url=f"{settings.API_PREFIX}/redoc",
        openapi_url=f"{settings.API_PREFIX}/openapi.json",
    )

    # Register exception handlers
    # DomainError subclasses render as {"valid": false, "error", "error_description"}
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Request IDs must be set before any handler logs
    app.add_middleware(RequestContextMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["health"])
    async def health_check() -> dict:
        """
        Health check endpoint.

        Does not touch the database, so it reports process liveness only.
        """
        return {
            "status": "healthy",
            "version": settings.VERSION,
        }

    app.include_router(stores.router, prefix=settings.API_PREFIX)
    app.include_router(employees.router, prefix=settings.API_PREFIX)
    app.include_router(packages.router, prefix=settings.API_PREFIX)
    app.include_router(bookings.router, prefix=settings.API_PREFIX)

    return app


# Create app instance
# WHY: Allows `uvicorn store_admin.main:app` and imports from tests.
app = create_app()


if __name__ == "__main__":
    import uvicorn

    # Development entry point: `python -m store_admin.main`
    uvicorn.run(
        "store_admin.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
        log_level="info" if settings.DEBUG else "warning",
    )
