# tests/conftest.py
from __future__ import annotations

import os

# Settings are resolved when the app module is imported; pin a test environment first.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("REDIS_URL", "redis://localhost:6379/15")

from collections.abc import AsyncGenerator, Generator  # noqa: E402
from typing import Any  # noqa: E402

import fakeredis  # noqa: E402
import fakeredis.aioredis  # noqa: E402
import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402

from rediscache_api.dependencies.cache import get_product_source  # noqa: E402
from rediscache_api.infrastructure.caching import redis_client as redis_client_module  # noqa: E402
from rediscache_api.infrastructure.catalog.simulated_catalog import (  # noqa: E402
    SimulatedProductCatalog,
)
from rediscache_api.main import create_app  # noqa: E402


class FailingRedis:
    """Redis stand-in whose every call fails like an unreachable server."""

    async def ping(self) -> Any:
        raise ConnectionError("redis unavailable")

    async def close(self) -> None:
        return None

    async def get(self, key: str) -> Any:
        raise ConnectionError("redis unavailable")

    async def set(self, key: str, value: Any, **kwargs: Any) -> Any:
        raise ConnectionError("redis unavailable")

    async def delete(self, *keys: str) -> Any:
        raise ConnectionError("redis unavailable")


@pytest.fixture
def fake_redis(monkeypatch: pytest.MonkeyPatch) -> fakeredis.aioredis.FakeRedis:
    """Wire a private fakeredis instance into the global Redis client."""
    fake = fakeredis.aioredis.FakeRedis(server=fakeredis.FakeServer(), decode_responses=True)
    monkeypatch.setattr(redis_client_module, "_client", fake)
    return fake


@pytest.fixture
def failing_redis() -> FailingRedis:
    return FailingRedis()


@pytest.fixture
def zero_latency_catalog() -> SimulatedProductCatalog:
    return SimulatedProductCatalog(item_latency_s=0, list_latency_s=0)


@pytest.fixture
def app(
    fake_redis: fakeredis.aioredis.FakeRedis,
    zero_latency_catalog: SimulatedProductCatalog,
) -> Generator[FastAPI, None, None]:
    """Per-test app backed by fakeredis and a zero-latency catalog."""
    app = create_app()
    app.dependency_overrides[get_product_source] = lambda: zero_latency_catalog
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def app_client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    """Async HTTP client bound to the per-test FastAPI app."""
    transport = httpx.ASGITransport(app=app)
    client = httpx.AsyncClient(transport=transport, base_url="http://testserver")
    try:
        yield client
    finally:
        await client.aclose()
