from collections.abc import AsyncGenerator

from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from pytest import fixture

from inventory_api.main import app
from inventory_api.managers.rate_limiter import limiter
from inventory_api.repositories import inventory_store


async def _client(*, rate_limited: bool) -> AsyncGenerator[AsyncClient]:
    was_enabled = limiter.enabled
    limiter.enabled = rate_limited
    inventory_store.clear()
    try:
        async with (
            LifespanManager(app),
            AsyncClient(base_url="http://test", transport=ASGITransport(app=app)) as ac,
        ):
            yield ac
    finally:
        limiter.enabled = was_enabled
        limiter.reset()
        inventory_store.clear()


@fixture
async def client() -> AsyncGenerator[AsyncClient]:
    async for ac in _client(rate_limited=False):
        yield ac


@fixture
async def limited_client() -> AsyncGenerator[AsyncClient]:
    async for ac in _client(rate_limited=True):
        yield ac
