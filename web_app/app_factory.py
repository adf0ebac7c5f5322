"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from shortlink.errors import InternalError
from .api import api_router
from .web import web_router
from .middleware.logging import LoggingMiddleware


logger = logging.getLogger("shortlink.web")


async def internal_error_handler(request: Request, exc: InternalError) -> JSONResponse:
    """Log store and digest failures with context and answer 500."""
    logger.error(
        f"Internal error on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def create_app(
    store_instance,
    service_instance,
    config,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        store_instance: Link store instance
        service_instance: Link service instance
        config: Configuration instance

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="Shortlink",
        description="URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config

    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(InternalError, internal_error_handler)

    # API first so /api/* is never read as a short code
    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Links"])

    return app
