# inventory_api/main.py

"""Inventory API - in-memory inventory CRUD service."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse, Response
from slowapi.errors import RateLimitExceeded

from inventory_api.configs import settings
from inventory_api.errors import (
    InventoryError,
    inventory_exception_handler,
    validation_exception_handler,
)
from inventory_api.managers import (
    get_system_metrics,
    limiter,
    inventory_metrics,
    rate_limit_exceeded_handler,
)
from inventory_api.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from inventory_api.repositories import inventory_store
from inventory_api.routes import items_router
from inventory_api.schemas import HealthCheckResponse, InventoryStatus
from inventory_api.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="In-memory inventory CRUD API",
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)

app.include_router(items_router)

errors = [
    (InventoryError, inventory_exception_handler),
    (RateLimitExceeded, rate_limit_exceeded_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]

app.state.limiter = limiter


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2025-01-01 00:00:00",
                        "inventory": {"items": 0},
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
@limiter.exempt
async def health_check(request: Request) -> HealthCheckResponse:
    """
    Health check endpoint.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    HealthCheckResponse
        Service version, status and inventory size.

    Examples
    --------
    Request
        GET /health
    Response
        200 OK
        {"version": "1.0.0", "status": "ok", "timestamp": "...", "inventory": {"items": 0}}
    """
    return HealthCheckResponse(
        version=app.version,
        status="ok",
        timestamp=today_str(),
        inventory=InventoryStatus(items=len(inventory_store)),
    )


@app.get(
    "/metrics",
    tags=["📈 Metrics"],
    response_class=ORJSONResponse,
    summary="Get metrics",
    description="Get API performance metrics.",
    responses={
        429: {
            "description": "Rate limit exceeded",
            "content": {"application/json": {"example": {"detail": "Rate limit exceeded"}}},
        },
    },
    operation_id="get_metrics",
)
@limiter.limit(settings.RATE_LIMIT_METRICS)
async def get_metrics(request: Request, response: Response) -> ORJSONResponse:
    """
    Get API performance metrics.

    Parameters
    ----------
    request : Request
        Current request context.
    response : Response
        Current response context.

    Returns
    -------
    ORJSONResponse
        Per-operation outcome counts and latency, rate limit rejections
        per path, and system metrics.
    """
    return ORJSONResponse(
        content={
            "timestamp": today_str(),
            "api_metrics": inventory_metrics.snapshot(),
            "system_metrics": await get_system_metrics(),
        },
    )


@app.get(
    "/",
    tags=["🏠 Root"],
    summary="Root access",
    response_model=dict[str, str],
    response_class=ORJSONResponse,
    operation_id="root_access",
)
@limiter.exempt
async def root(request: Request) -> ORJSONResponse:
    """Root endpoint."""
    return ORJSONResponse(content={"message": f"Welcome to {app.title}"})
