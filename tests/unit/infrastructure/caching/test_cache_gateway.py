# tests/unit/infrastructure/caching/test_cache_gateway.py
from __future__ import annotations

import json
from datetime import timedelta

import pytest
from prometheus_client import REGISTRY

from rediscache_api.application.interfaces.cache_port import CacheStatus
from rediscache_api.infrastructure.caching.cache_gateway import DEFAULT_TTL, RedisCacheGateway


def _ops(operation: str, result: str) -> float:
    value = REGISTRY.get_sample_value(
        "cache_operations_total", {"operation": operation, "result": result}
    )
    return value or 0.0


@pytest.mark.asyncio
async def test_set_then_get_uses_prefixed_key(fake_redis):
    cache = RedisCacheGateway()
    payload = {"text": "hello", "n": 1}

    await cache.set("greeting", payload)

    assert await fake_redis.get("RedisApi_greeting") == json.dumps(payload)
    assert await cache.get("greeting") == payload
    assert await cache.exists("greeting") is True


@pytest.mark.asyncio
async def test_custom_prefix_is_applied(fake_redis):
    cache = RedisCacheGateway(prefix="tenant_a:")
    await cache.set("k", [1, 2, 3])

    assert await fake_redis.get("tenant_a:k") == "[1, 2, 3]"
    assert await fake_redis.get("RedisApi_k") is None


@pytest.mark.asyncio
async def test_set_without_ttl_applies_thirty_minutes(fake_redis):
    cache = RedisCacheGateway()
    await cache.set("k", "v")

    pttl = await fake_redis.pttl("RedisApi_k")
    assert DEFAULT_TTL == timedelta(minutes=30)
    assert 1_790_000 < pttl <= 1_800_000


@pytest.mark.asyncio
async def test_explicit_ttl_overrides_default(fake_redis):
    cache = RedisCacheGateway()
    await cache.set("k", "v", timedelta(minutes=1))

    pttl = await fake_redis.pttl("RedisApi_k")
    assert 0 < pttl <= 60_000


@pytest.mark.asyncio
async def test_gateway_default_ttl_is_configurable(fake_redis):
    cache = RedisCacheGateway(default_ttl=timedelta(seconds=90))
    await cache.set("k", "v")

    assert cache.default_ttl == timedelta(seconds=90)
    assert 0 < await fake_redis.pttl("RedisApi_k") <= 90_000


@pytest.mark.asyncio
async def test_never_set_key_is_absent(fake_redis):
    cache = RedisCacheGateway()

    assert await cache.get("missing") is None
    assert await cache.exists("missing") is False
    assert (await cache.lookup("missing")).status is CacheStatus.MISS


@pytest.mark.asyncio
async def test_remove_makes_key_absent(fake_redis):
    cache = RedisCacheGateway()
    await cache.set("k", {"a": 1})

    await cache.remove("k")

    assert await cache.exists("k") is False
    assert await cache.get("k") is None


@pytest.mark.asyncio
async def test_remove_of_missing_key_is_a_noop(fake_redis):
    await RedisCacheGateway().remove("never-there")


@pytest.mark.asyncio
async def test_malformed_json_reads_as_absent(fake_redis):
    await fake_redis.set("RedisApi_bad", "{not json")
    cache = RedisCacheGateway()

    lookup = await cache.lookup("bad")
    assert lookup.status is CacheStatus.MISS
    assert lookup.value is None
    assert await cache.get("bad") is None
    # Raw presence is still reported.
    assert await cache.exists("bad") is True


@pytest.mark.asyncio
async def test_decoder_rejection_reads_as_absent(fake_redis):
    await fake_redis.set("RedisApi_k", json.dumps({"unexpected": True}))
    cache = RedisCacheGateway()

    def _decode(payload):
        return payload["id"]

    assert (await cache.lookup("k", _decode)).status is CacheStatus.MISS


@pytest.mark.asyncio
async def test_json_null_reads_as_absent(fake_redis):
    cache = RedisCacheGateway()
    await cache.set("k", None)

    assert await fake_redis.get("RedisApi_k") == "null"
    assert await cache.get("k") is None


@pytest.mark.asyncio
async def test_falsy_json_values_are_hits(fake_redis):
    cache = RedisCacheGateway()
    await cache.set("zero", 0)
    await cache.set("empty", {})

    assert await cache.get("zero") == 0
    assert await cache.get("empty") == {}


@pytest.mark.asyncio
@pytest.mark.parametrize("ttl", [timedelta(0), timedelta(minutes=-5)])
async def test_non_positive_ttl_is_logged_and_nothing_stored(fake_redis, ttl):
    cache = RedisCacheGateway()
    await cache.set("k", "v", ttl)

    assert await fake_redis.get("RedisApi_k") is None


@pytest.mark.asyncio
async def test_store_failure_fails_open(failing_redis):
    cache = RedisCacheGateway(client=failing_redis)

    lookup = await cache.lookup("k")
    assert lookup.status is CacheStatus.ERROR
    assert lookup.hit is False
    assert await cache.get("k") is None
    assert await cache.exists("k") is False
    # Writes and deletes swallow the error.
    await cache.set("k", {"a": 1})
    await cache.remove("k")


@pytest.mark.asyncio
async def test_store_failure_is_logged_with_key(failing_redis, caplog):
    cache = RedisCacheGateway(client=failing_redis)

    with caplog.at_level("ERROR"):
        await cache.get("the-key")

    records = [r for r in caplog.records if r.getMessage() == "cache.get_failed"]
    assert records
    assert records[-1].extra["cache_key"] == "the-key"


@pytest.mark.asyncio
async def test_operations_are_counted_by_outcome(fake_redis, failing_redis):
    hit_before = _ops("get", "hit")
    miss_before = _ops("get", "miss")
    err_before = _ops("get", "error")

    cache = RedisCacheGateway()
    await cache.set("k", 1)
    await cache.get("k")
    await cache.get("absent")
    await RedisCacheGateway(client=failing_redis).get("k")

    assert _ops("get", "hit") == hit_before + 1
    assert _ops("get", "miss") == miss_before + 1
    assert _ops("get", "error") == err_before + 1
