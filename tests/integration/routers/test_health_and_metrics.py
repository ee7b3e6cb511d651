# tests/integration/routers/test_health_and_metrics.py
from __future__ import annotations

import pytest

from rediscache_api.adapters.routers.health_router import HealthProbe, get_health_probe
from rediscache_api.infrastructure.health.probe import RedisProbe


class _BadProbe(HealthProbe):
    async def redis(self) -> tuple[bool, str | None]:
        return False, "redis down"


@pytest.mark.asyncio
async def test_liveness(app_client):
    r = await app_client.get("/health/z")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_readiness_ok_with_reachable_redis(app_client):
    r = await app_client.get("/health/readiness")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert [c["name"] for c in body["checks"]] == ["redis"]
    assert body["checks"][0]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_503_when_redis_down(app, app_client):
    app.dependency_overrides[get_health_probe] = lambda: _BadProbe()

    r = await app_client.get("/health/readiness")
    assert r.status_code == 503
    body = r.json()
    assert body["status"] == "degraded"
    assert body["checks"][0] == {
        "name": "redis",
        "status": "down",
        "detail": "redis down",
        "duration_ms": body["checks"][0]["duration_ms"],
    }



@pytest.mark.asyncio
async def test_redis_probe_reports_failure(failing_redis):
    ok, detail = await RedisProbe(failing_redis).redis()
    assert ok is False
    assert detail == "redis unavailable"


@pytest.mark.asyncio
async def test_metrics_exposition(app_client):
    await app_client.get("/api/products/3")
    await app_client.get("/api/products/3")

    r = await app_client.get("/metrics")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    text = r.text
    assert "cache_operations_total" in text
    assert 'cache_aside_requests_total{resource="product",source="cache"}' in text
    assert "readyz_redis_latency_seconds_bucket" in text


@pytest.mark.asyncio
async def test_openapi_lists_cache_and_product_routes(app_client):
    r = await app_client.get("/openapi.json")
    assert r.status_code == 200
    paths = r.json()["paths"]
    for path in (
        "/api/cache",
        "/api/cache/{key}",
        "/api/cache/exists/{key}",
        "/api/cache/health",
        "/api/products",
        "/api/products/{product_id}",
    ):
        assert path in paths


@pytest.mark.asyncio
async def test_readiness_uses_real_probe_against_failing_redis(
    app, app_client, failing_redis
):
    app.dependency_overrides[get_health_probe] = lambda: RedisProbe(failing_redis)

    r = await app_client.get("/health/readiness")
    assert r.status_code == 503
    assert r.json()["checks"][0]["detail"] == "redis unavailable"
