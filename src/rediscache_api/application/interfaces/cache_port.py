# src/rediscache_api/application/interfaces/cache_port.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Application Interface: Cache Port.

Synopsis:
    Best-effort, fail-open cache behavior used by routers and use cases.
    Enables swapping Redis for another store without touching callers.

Layer:
    application/interfaces
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")


class CacheStatus(str, Enum):
    """Outcome of a cache read."""

    HIT = "hit"
    MISS = "miss"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class CacheLookup(Generic[T]):
    """Result of a cache read.

    Attributes:
        status: ``HIT`` when a value was decoded, ``MISS`` when nothing usable
            was stored, ``ERROR`` when the store itself failed.
        value: Decoded value on ``HIT``; ``None`` otherwise.
    """

    status: CacheStatus
    value: T | None = None

    @property
    def hit(self) -> bool:
        return self.status is CacheStatus.HIT


class CachePort(Protocol):
    """Typed cache with JSON serialization and a default TTL.

    Implementations never raise for store failures: reads degrade to a miss,
    writes and deletes are logged and dropped.
    """

    async def lookup(
        self, key: str, decode: Callable[[Any], T] | None = None
    ) -> CacheLookup[T]:
        """Read ``key`` and report whether it was a hit, miss, or store error."""
        ...

    async def get(self, key: str, decode: Callable[[Any], T] | None = None) -> T | None:
        """Return the decoded value for ``key`` or ``None`` when absent."""
        ...

    async def set(self, key: str, value: Any, ttl: timedelta | None = None) -> None:
        """Store ``value`` under ``key``; ``ttl=None`` applies the default TTL."""
        ...

    async def remove(self, key: str) -> None:
        """Delete ``key`` if present."""
        ...

    async def exists(self, key: str) -> bool:
        """Return True iff a non-empty value is stored under ``key``."""
        ...
