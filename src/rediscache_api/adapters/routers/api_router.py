# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""API Router Aggregator (Adapters Layer).

Responsibilities:
    • Mount health endpoints under `/health`.
    • Mount cache key/value endpoints under `/api/cache`.
    • Mount cache-aside product endpoints under `/api/products`.

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter

from rediscache_api.adapters.routers.cache_router import router as cache_router
from rediscache_api.adapters.routers.health_router import router as health_router
from rediscache_api.adapters.routers.products_router import router as products_router

router = APIRouter()

router.include_router(health_router, prefix="/health", tags=["Health"])

# Prefixes live on the feature routers themselves.
router.include_router(cache_router)
router.include_router(products_router)
