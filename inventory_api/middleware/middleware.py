# inventory_api/middleware/middleware.py
"""
Middleware components for the Inventory API.

This module contains middleware for security headers, request logging
and CORS handling, plus the lifespan event handler that logs service
startup and cleans up on shutdown.
"""

from asyncio import get_running_loop
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from logging import basicConfig, getLogger
from time import perf_counter

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from rich.logging import RichHandler
from rich.traceback import install
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from uvloop import Loop

from inventory_api.configs import settings
from inventory_api.managers.rate_limiter import close_limiter
from inventory_api.repositories import inventory_store
from inventory_api.utils.helpers import file_logger, get_summary, host

# --- Logging Configuration ---
basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(message)s",
    datefmt="%X",
    handlers=[RichHandler(rich_tracebacks=True)],
)
logger = file_logger(getLogger("rich"))

install()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """Manage application startup and shutdown events."""
    logger.info(f"Starting {app.title}...")
    logger.info(f"{app.description}")

    if settings.LOG_TO_FILE:
        logger.info(f"Logging to file enabled: {settings.LOG_FILE}")
    logger.info(f"is uvloop: {type(get_running_loop()) is Loop}")
    logger.info(f"Inventory holds {len(inventory_store)} items")
    logger.info("Services:")
    logger.info("  - Backend API: http://localhost:8000")
    logger.info("  - API Documentation: http://localhost:8000/docs")
    logger.info("  - Health Check: http://localhost:8000/health")
    logger.info("  - Metrics: http://localhost:8000/metrics")

    yield

    logger.info(f"Shutting down {app.title}...")
    try:
        await close_limiter()
        logger.info("Services cleaned up successfully")
    except Exception:
        logger.exception("Error during service cleanup")


def configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware for the application."""
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    if frontend_url := settings.PRODUCTION_FRONTEND_URL:
        allowed_origins.append(frontend_url)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Log request summary and timing information."""

        start_time = perf_counter()
        summary = get_summary(request)

        route_info = summary or f"{request.method} {request.url.path}"
        logger.info(f"Request: {route_info}, from ip: {host(request)}")

        response = await call_next(request)
        duration = perf_counter() - start_time

        logger.info(
            f"Response: {response.status_code} for {request.method} {request.url.path} "
            f"in {duration:.2f}s",
        )

        return response


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        """Add security headers to all responses."""

        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response
