# src/rediscache_api/infrastructure/caching/redis_client.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Async Redis client factory (process-wide singleton)."""

from __future__ import annotations

from contextlib import suppress
from typing import Any, Protocol, cast, runtime_checkable

import redis.asyncio as aioredis

from rediscache_api.config.settings import Settings, get_settings
from rediscache_api.infrastructure.logging.logger import get_json_logger

__all__ = [
    "RedisClient",
    "init_redis",
    "close_redis",
    "get_redis_client",
]

logger = get_json_logger(__name__)


@runtime_checkable
class RedisClient(Protocol):
    """Minimal async Redis protocol used by the cache gateway and probes."""

    async def ping(self) -> Any: ...
    async def close(self) -> None: ...

    async def get(self, key: str) -> Any: ...
    async def set(
        self,
        key: str,
        value: Any,
        *,
        ex: int | None = None,
        px: int | None = None,
        nx: bool | None = None,
        xx: bool | None = None,
    ) -> Any: ...
    async def delete(self, *keys: str) -> Any: ...


_client: RedisClient | None = None


def _create_aioredis_client(settings: Settings) -> RedisClient:
    """Build the concrete asyncio Redis client from settings."""
    _from_url: Any = aioredis.from_url
    client = _from_url(
        url=settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        health_check_interval=settings.redis_health_check_interval_s,
        socket_timeout=settings.redis_socket_timeout_s,
        socket_connect_timeout=settings.redis_socket_connect_timeout_s,
    )
    return cast(RedisClient, client)


def init_redis(settings: Settings) -> None:
    """Initialize the global async Redis client (idempotent)."""
    global _client
    if _client is not None:
        return
    _client = _create_aioredis_client(settings)
    logger.info("redis.initialized")


async def close_redis() -> None:
    """Close the global Redis client at shutdown."""
    global _client
    if _client is not None:
        with suppress(RuntimeError):
            await _client.close()
        _client = None


def get_redis_client() -> RedisClient:
    """Return the initialized Redis client (lazy-inits in tests)."""
    if _client is None:
        init_redis(get_settings())
    if _client is None:
        raise RuntimeError("Redis client not initialized (init_redis failed)")
    return _client
