# src/rediscache_api/infrastructure/caching/cache_gateway.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Cache Gateway (Redis-backed).

Synopsis:
    Adapter that implements the application CachePort Protocol on top of the
    shared Redis client provided by `infrastructure/caching/redis_client.py`.
    Provides prefixed JSON get/set with a default TTL, delete, and an
    existence check.

Design:
    * Pure JSON (utf-8) serialization; no pickle.
    * Key policy: every key is stored as ``{prefix}{key}`` where the prefix
      is the instance name (``RedisApi_`` by default).
    * Fail open: store errors are logged and reported as a miss / ``False``;
      writes and deletes never raise. ``lookup`` keeps the miss/error
      distinction visible to callers that want it.
    * Malformed payloads (bad JSON, decoder rejection) count as a miss.

Layer:
    infrastructure/caching

See Also:
    - rediscache_api.infrastructure.caching.redis_client
    - rediscache_api.application.interfaces.cache_port.CachePort
"""

from __future__ import annotations

import json
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager, suppress
from datetime import timedelta
from typing import Any, TypeVar

from rediscache_api.application.interfaces.cache_port import CacheLookup, CachePort, CacheStatus
from rediscache_api.infrastructure.caching.redis_client import RedisClient, get_redis_client
from rediscache_api.infrastructure.logging.logger import get_json_logger
from rediscache_api.infrastructure.observability.metrics import (
    get_cache_operation_duration_seconds,
    get_cache_operations_total,
)

__all__ = ["DEFAULT_TTL", "RedisCacheGateway"]

T = TypeVar("T")

#: TTL applied when the caller does not pass one.
DEFAULT_TTL = timedelta(minutes=30)

logger = get_json_logger(__name__)


class _Outcome:
    """Mutable holder for the metrics ``result`` label of one operation."""

    __slots__ = ("result",)

    def __init__(self, result: str) -> None:
        self.result = result


@contextmanager
def _observe(operation: str, default_result: str) -> Iterator[_Outcome]:
    """Time one gateway operation and record it on exit."""
    outcome = _Outcome(default_result)
    start = time.perf_counter()
    try:
        yield outcome
    finally:
        duration = time.perf_counter() - start
        with suppress(Exception):
            get_cache_operation_duration_seconds().labels(operation=operation).observe(duration)
            get_cache_operations_total().labels(
                operation=operation, result=outcome.result
            ).inc()


def _ttl_ms(ttl: timedelta) -> int:
    """Convert a TTL to whole milliseconds for ``SET ... PX``.

    Raises:
        ValueError: If the TTL is not strictly positive.
    """
    ms = int(ttl.total_seconds() * 1000)
    if ms <= 0:
        raise ValueError(f"ttl must be positive, got {ttl!r}")
    return ms


class RedisCacheGateway(CachePort):
    """Redis-backed implementation of the CachePort Protocol."""

    def __init__(
        self,
        *,
        prefix: str = "RedisApi_",
        default_ttl: timedelta = DEFAULT_TTL,
        client: RedisClient | None = None,
    ) -> None:
        """Initialize the gateway.

        Args:
            prefix: Instance prefix applied to all keys.
            default_ttl: TTL used by :meth:`set` when none is given.
            client: Explicit Redis client; defaults to the shared process client.
        """
        self._prefix = prefix
        self._default_ttl = default_ttl
        self._client = client

    @property
    def default_ttl(self) -> timedelta:
        return self._default_ttl

    def _redis(self) -> RedisClient:
        return self._client if self._client is not None else get_redis_client()

    def _k(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def lookup(
        self, key: str, decode: Callable[[Any], T] | None = None
    ) -> CacheLookup[T]:
        """Read and deserialize ``key``.

        Args:
            key: Unprefixed cache key.
            decode: Optional callable that turns the parsed JSON into the
                requested value shape. Any ``ValueError``, ``TypeError`` or
                ``KeyError`` it raises marks the entry as malformed.

        Returns:
            CacheLookup with ``HIT`` and the value, ``MISS`` when the entry is
            absent, empty, or malformed, or ``ERROR`` when Redis failed.
        """
        with _observe("get", CacheStatus.MISS.value) as outcome:
            try:
                raw = await self._redis().get(self._k(key))
            except Exception:
                logger.exception(
                    "cache.get_failed", extra={"extra": {"cache_key": key}}
                )
                outcome.result = CacheStatus.ERROR.value
                return CacheLookup(CacheStatus.ERROR)

            if not raw:
                return CacheLookup(CacheStatus.MISS)

            try:
                parsed = json.loads(raw)
                value = decode(parsed) if decode is not None else parsed
            except (ValueError, TypeError, KeyError):
                logger.exception(
                    "cache.deserialize_failed", extra={"extra": {"cache_key": key}}
                )
                return CacheLookup(CacheStatus.MISS)

            if value is None:
                return CacheLookup(CacheStatus.MISS)

            outcome.result = CacheStatus.HIT.value
            return CacheLookup(CacheStatus.HIT, value)

    async def get(self, key: str, decode: Callable[[Any], T] | None = None) -> T | None:
        """Return the cached value for ``key`` or ``None`` (absent, malformed, or error)."""
        return (await self.lookup(key, decode)).value

    async def set(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Serialize ``value`` to JSON and store it with an absolute expiry.

        Args:
            key: Unprefixed cache key.
            value: JSON-serializable value.
            ttl: Time-to-live; ``None`` applies the gateway default (30 minutes).
        """
        effective = ttl if ttl is not None else self._default_ttl
        with _observe("set", "ok") as outcome:
            try:
                payload = json.dumps(value)
                await self._redis().set(self._k(key), payload, px=_ttl_ms(effective))
            except Exception:
                logger.exception(
                    "cache.set_failed",
                    extra={"extra": {"cache_key": key, "ttl_s": effective.total_seconds()}},
                )
                outcome.result = "error"

    async def remove(self, key: str) -> None:
        """Delete ``key``; errors are logged and dropped."""
        with _observe("remove", "ok") as outcome:
            try:
                await self._redis().delete(self._k(key))
            except Exception:
                logger.exception(
                    "cache.remove_failed", extra={"extra": {"cache_key": key}}
                )
                outcome.result = "error"

    async def exists(self, key: str) -> bool:
        """Return True iff a non-empty raw value is stored under ``key``."""
        with _observe("exists", "miss") as outcome:
            try:
                raw = await self._redis().get(self._k(key))
            except Exception:
                logger.exception(
                    "cache.exists_failed", extra={"extra": {"cache_key": key}}
                )
                outcome.result = "error"
                return False
            if raw:
                outcome.result = "hit"
                return True
            return False
