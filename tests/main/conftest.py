# tests/main/conftest.py
"""Pytest configuration and fixtures for main tests."""

from collections.abc import AsyncGenerator

from httpx import ASGITransport, AsyncClient
from pytest import fixture

from inventory_api.main import app
from inventory_api.managers.rate_limiter import limiter


@fixture
async def client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for testing FastAPI endpoints."""
    was_enabled = limiter.enabled
    limiter.enabled = True
    try:
        async with AsyncClient(
            base_url="http://test",
            transport=ASGITransport(app=app),
        ) as ac:
            yield ac
    finally:
        limiter.enabled = was_enabled
        limiter.reset()
