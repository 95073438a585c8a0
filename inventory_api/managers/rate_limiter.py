# inventory_api/managers/rate_limiter.py

"""
Rate limiting for the inventory routes using slowapi.

Reads (get-item, all-items) and writes (create, update, delete) share
one limit string each, taken from settings, so a client's quota is
counted per route but configured per kind of operation.
"""

from logging import getLogger
from typing import cast

from fastapi import Request
from fastapi.responses import ORJSONResponse
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.status import HTTP_429_TOO_MANY_REQUESTS

from inventory_api.configs import LimiterConfig, settings
from inventory_api.managers.metrics import inventory_metrics
from inventory_api.utils.helpers import file_logger, host

logger = file_logger(getLogger(__name__))


def get_identifier(request: Request) -> str:
    """
    Key a client by its ``X-API-Key`` header, or by address without one.

    Args:
        request: FastAPI request object.

    Returns:
        ``apikey:<key>`` or ``ip:<address>``.
    """
    if api_key := request.headers.get("X-API-Key"):
        return f"apikey:{api_key}"
    return f"ip:{get_remote_address(request)}"


limiter = Limiter(**LimiterConfig().model_dump(), key_func=get_identifier)

read_limit = limiter.limit(settings.RATE_LIMIT_READ)
write_limit = limiter.limit(settings.RATE_LIMIT_WRITE)


async def close_limiter() -> None:
    """Drop every stored hit counter. Called on application shutdown."""
    limiter.reset()
    logger.info("✓ Rate limiter counters cleared")


async def rate_limit_exceeded_handler(
    request: Request,
    exc: Exception,
) -> ORJSONResponse:
    """
    Answer a rejected request with 429 and count it against its path.

    Args:
        request: FastAPI request object.
        exc: RateLimitExceeded exception.

    Returns:
        ``{"detail", "allowed_requests", "retry_after"}`` with status 429.
    """
    http_exc = cast(RateLimitExceeded, exc)
    inventory_metrics.record_rate_limited(request.url.path)
    logger.warning(f"Rate limit exceeded for ip: {host(request)} at {request.url.path}")

    # slowapi's own handler computes Retry-After from the limiter window
    retry_after = _rate_limit_exceeded_handler(request, http_exc).headers["retry-after"]
    return ORJSONResponse(
        status_code=HTTP_429_TOO_MANY_REQUESTS,
        content={
            "detail": "Rate limit exceeded",
            "allowed_requests": http_exc.detail,
            "retry_after": f"{retry_after} seconds",
        },
        headers={"Retry-After": retry_after},
    )
