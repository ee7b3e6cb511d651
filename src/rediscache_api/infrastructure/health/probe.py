# src/rediscache_api/infrastructure/health/probe.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Readiness probe for Redis (with a Prometheus latency histogram).

The probe issues a single ``PING`` and records its latency whether it
succeeds or fails. The histogram is obtained lazily from the observability
module so it stays registry-aware in tests.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

from rediscache_api.infrastructure.caching.redis_client import RedisClient as RedisProto
from rediscache_api.infrastructure.observability.metrics import (
    get_readyz_redis_latency_seconds,
)

if TYPE_CHECKING:
    from prometheus_client import Histogram

__all__ = ["RedisProbe"]


class RedisProbe:
    """Readiness probe for the Redis cache."""

    def __init__(self, redis: RedisProto) -> None:
        self._redis: RedisProto = redis
        self._redis_hist: Histogram = get_readyz_redis_latency_seconds()

    async def redis(self) -> tuple[bool, str | None]:
        """Probe Redis using ``PING``.

        Returns:
            tuple[bool, str | None]: (success, diagnostic detail or None).
        """
        start = time.perf_counter()
        ok = True
        detail: str | None = None
        try:
            pong = await self._redis.ping()
            ok = bool(pong)
            if not ok:
                detail = "unexpected PONG value"
        except Exception as exc:
            ok = False
            detail = str(exc)
        finally:
            self._redis_hist.observe(time.perf_counter() - start)
        return ok, detail
