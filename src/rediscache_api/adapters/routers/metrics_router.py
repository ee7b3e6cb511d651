# src/rediscache_api/adapters/routers/metrics_router.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

Lazily created collectors are touched before rendering so their series
appear on the very first scrape.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from rediscache_api.infrastructure.logging.logger import get_json_logger
from rediscache_api.infrastructure.observability.metrics import (
    get_cache_aside_requests_total,
    get_cache_operation_duration_seconds,
    get_cache_operations_total,
    get_readyz_redis_latency_seconds,
)

logger = get_json_logger(__name__)
router = APIRouter()


def _warm_collectors() -> None:
    """Register every collector and give the unlabeled histogram one sample."""
    get_cache_operations_total()
    get_cache_operation_duration_seconds()
    get_cache_aside_requests_total()
    try:
        get_readyz_redis_latency_seconds().observe(0.0)
    except ValueError as exc:
        logger.debug(
            "metrics_router: failed warming histogram",
            extra={"extra": {"metric": "readyz_redis_latency_seconds", "error": str(exc)}},
        )


@router.get("/metrics", include_in_schema=False)
async def metrics_probe() -> Response:
    """Expose Prometheus metrics in the text exposition format."""
    _warm_collectors()
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
