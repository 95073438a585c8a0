# tests/managers/test_rate_limiter.py
"""Tests for inventory_api/managers/rate_limiter.py module."""

from unittest.mock import MagicMock, patch

import orjson
import pytest

from inventory_api.managers.metrics import inventory_metrics
from inventory_api.managers.rate_limiter import (
    close_limiter,
    get_identifier,
    limiter,
    rate_limit_exceeded_handler,
)


class TestGetIdentifier:
    """Tests for get_identifier function."""

    def test_returns_api_key_when_present(self) -> None:
        request = MagicMock()
        request.headers.get.return_value = "test-api-key-123"

        assert get_identifier(request) == "apikey:test-api-key-123"

    def test_returns_ip_when_no_api_key(self) -> None:
        request = MagicMock()
        request.headers.get.return_value = None

        with patch(
            "inventory_api.managers.rate_limiter.get_remote_address",
            return_value="192.168.1.100",
        ):
            assert get_identifier(request) == "ip:192.168.1.100"


class TestRateLimitExceededHandler:
    """Tests for rate_limit_exceeded_handler function."""

    @pytest.mark.asyncio
    async def test_returns_429_and_counts_path(self) -> None:
        request = MagicMock()
        request.client.host = "127.0.0.1"
        request.url.path = "/update-item/9"
        exc = MagicMock()
        exc.detail = "30 per 1 minute"

        fallback = MagicMock()
        fallback.headers = {"retry-after": "60"}
        before = inventory_metrics.snapshot()["rate_limited"].get("/update-item/9", 0)

        with patch(
            "inventory_api.managers.rate_limiter._rate_limit_exceeded_handler",
            return_value=fallback,
        ):
            response = await rate_limit_exceeded_handler(request, exc)

        assert response.status_code == 429
        assert response.headers["retry-after"] == "60"
        assert orjson.loads(response.body) == {
            "detail": "Rate limit exceeded",
            "allowed_requests": "30 per 1 minute",
            "retry_after": "60 seconds",
        }
        assert inventory_metrics.snapshot()["rate_limited"]["/update-item/9"] == before + 1


class TestCloseLimiter:
    @pytest.mark.asyncio
    async def test_resets_storage(self) -> None:
        with patch.object(limiter, "reset") as reset:
            await close_limiter()
        reset.assert_called_once_with()
