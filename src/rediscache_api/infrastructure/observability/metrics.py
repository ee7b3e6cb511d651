# src/rediscache_api/infrastructure/observability/metrics.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Prometheus metrics utilities (registry-aware, hot-reload safe).

Accessors such as :func:`get_cache_operations_total` return a *singleton*
collector bound to the **current** ``prometheus_client.REGISTRY``:

    * Safe under hot reload and tests that swap the default registry.
    * No duplicate-registration errors.
    * Cache automatically resets when the active registry changes.

Histograms use explicit buckets so ``_bucket/_count/_sum`` series appear
after the first ``observe(...)`` call.

Example:
    get_cache_operations_total().labels(operation="get", result="hit").inc()
    get_readyz_redis_latency_seconds().observe(0.004)
"""

from __future__ import annotations

import logging
import threading
from contextlib import suppress
from typing import Final, TypeVar

import prometheus_client as prom
from prometheus_client import Counter, Histogram

_log = logging.getLogger(__name__)

_BUCKETS: Final[tuple[float, ...]] = (
    0.001,
    0.005,
    0.010,
    0.025,
    0.050,
    0.100,
    0.250,
    0.500,
    1.000,
    2.500,
    5.000,
)

_registry_id: int | None = None
_cache: dict[str, Counter | Histogram] = {}
_lock = threading.RLock()

_C = TypeVar("_C", Counter, Histogram)


def _ensure_registry() -> None:
    """Reset caches if the active registry changed (common in tests)."""
    global _registry_id
    with _lock:
        rid = id(prom.REGISTRY)
        if _registry_id != rid:
            _cache.clear()
            _registry_id = rid


def _lookup_existing(name: str, kind: type[_C]) -> _C | None:
    """Return a previously-registered collector of ``kind`` from the active registry."""
    with _lock, suppress(Exception):
        mapping = getattr(prom.REGISTRY, "_names_to_collectors", None)
        if isinstance(mapping, dict):
            col = mapping.get(name)
            if isinstance(col, kind):
                return col
    return None


def _get_or_create(
    kind: type[_C],
    name: str,
    help_text: str,
    *,
    labelnames: tuple[str, ...] = (),
    buckets: tuple[float, ...] = _BUCKETS,
) -> _C:
    """Get or create a registry-bound collector with stable identity.

    Strategy:
        1. Return from module cache if present for the active registry.
        2. If the registry already has a collector by this name, reuse it.
        3. Otherwise, register a new collector on the active registry.

    Args:
        kind: ``Counter`` or ``Histogram``.
        name: Metric name (snake_case).
        help_text: Human-readable description.
        labelnames: Optional label names tuple.
        buckets: Histogram buckets in seconds (ignored for counters).

    Returns:
        The collector bound to ``prom.REGISTRY``.
    """
    _ensure_registry()
    with _lock:
        cached = _cache.get(name)
        if isinstance(cached, kind):
            return cached

        existing = _lookup_existing(name, kind)
        if existing is not None:
            _cache[name] = existing
            return existing

        try:
            if kind is Histogram:
                col: Counter | Histogram = Histogram(
                    name, help_text, labelnames, buckets=buckets, registry=prom.REGISTRY
                )
            else:
                col = Counter(name, help_text, labelnames, registry=prom.REGISTRY)
        except ValueError:
            _log.exception("Failed to register Prometheus collector %s", name)
            raise
        _cache[name] = col
        return col  # type: ignore[return-value]


# ---------------------------------------------------------------------------
# Cache gateway metrics


def get_cache_operations_total() -> Counter:
    """Return the counter of cache gateway operations.

    Labels:
        operation: ``get|set|remove|exists``.
        result: ``hit|miss|error|ok``.
    """
    return _get_or_create(
        Counter,
        "cache_operations_total",
        "Cache gateway operations by outcome",
        labelnames=("operation", "result"),
    )


def get_cache_operation_duration_seconds() -> Histogram:
    """Return the histogram of cache gateway round-trip latency.

    Labels:
        operation: ``get|set|remove|exists``.
    """
    return _get_or_create(
        Histogram,
        "cache_operation_duration_seconds",
        "Latency of cache gateway operations (seconds)",
        labelnames=("operation",),
    )


# ---------------------------------------------------------------------------
# Cache-aside metrics


def get_cache_aside_requests_total() -> Counter:
    """Return the counter of cache-aside reads by where the data came from.

    Labels:
        resource: ``product|product_list``.
        source: ``cache|database``.
    """
    return _get_or_create(
        Counter,
        "cache_aside_requests_total",
        "Cache-aside reads by data source",
        labelnames=("resource", "source"),
    )


# ---------------------------------------------------------------------------
# Health metrics


def get_readyz_redis_latency_seconds() -> Histogram:
    """Return (and cache) the Redis readiness latency histogram."""
    return _get_or_create(
        Histogram,
        "readyz_redis_latency_seconds",
        "Latency of Redis readiness probe (seconds).",
    )
