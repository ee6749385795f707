"""
FastAPI application entrypoint with middleware, lifecycle, and error handling.
"""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..config import get_settings
from ..db.client import DatabaseClient, get_client
from ..logger import setup_logging
from .routes import health_router, page_router
from .schemas import ErrorResponse

LOGGER = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# Application Lifespan
# -----------------------------------------------------------------------------


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan context manager.

    Attaches the database client to ``app.state.db`` unless one was injected,
    and releases pooled connections of a client it obtained itself on shutdown.
    """
    settings = get_settings()
    setup_logging(settings)

    LOGGER.info(
        "Starting %s v%s in %s environment",
        settings.app.name,
        settings.app.version,
        settings.environment.value,
    )

    owns_client = getattr(app.state, "db", None) is None
    if owns_client:
        app.state.db = get_client(settings)

    try:
        yield
    finally:
        if owns_client:
            await app.state.db.dispose()
            app.state.db = None
        LOGGER.info("Application shutdown complete.")


# -----------------------------------------------------------------------------
# Application Factory
# -----------------------------------------------------------------------------


def create_app(client: DatabaseClient | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        client: Optional DatabaseClient. If None, one is obtained in the lifespan.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description="Lists every user as JSON on a single page",
        docs_url="/docs" if settings.app.debug else None,
        redoc_url=None,
        openapi_url="/openapi.json" if settings.app.debug else None,
        lifespan=lifespan,
    )

    if client is not None:
        app.state.db = client

    # -------------------------------------------------------------------------
    # Request Logging Middleware
    # -------------------------------------------------------------------------

    @app.middleware("http")
    async def request_logging_middleware(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        """Log request details and add request ID header."""
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        start_time = time.perf_counter()
        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            LOGGER.exception(
                "Unhandled exception for %s %s [%s]",
                request.method,
                request.url.path,
                request_id,
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        LOGGER.info(
            "%s %s -> %d (%.2fms) [%s]",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            request_id,
        )

        response.headers["X-Request-ID"] = request_id
        return response

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request,
        exc: StarletteHTTPException,
    ) -> JSONResponse:
        """Handle HTTP exceptions with consistent error format."""
        error_response = ErrorResponse(
            error=exc.__class__.__name__,
            message=str(exc.detail),
            request_id=getattr(request.state, "request_id", None),
        )
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response.model_dump(exclude_none=True),
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Turn a failed render or query into a 500 response."""
        request_id = getattr(request.state, "request_id", None)
        LOGGER.error("Unhandled exception: %s [%s]", exc, request_id)

        # Hide internal errors unless debugging
        message = str(exc) if settings.app.debug else "An internal error occurred"

        error_response = ErrorResponse(
            error="InternalServerError",
            message=message,
            request_id=request_id,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response.model_dump(exclude_none=True),
        )

    # -------------------------------------------------------------------------
    # Route Registration
    # -------------------------------------------------------------------------

    app.include_router(health_router)
    app.include_router(page_router)

    return app


# -----------------------------------------------------------------------------
# Application Instance
# -----------------------------------------------------------------------------

app = create_app()


__all__ = ["app", "create_app", "lifespan"]
