# src/rediscache_api/application/use_cases/products/get_all_products.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Use Case: Get All Products (cache-aside)

Purpose:
    Serve the full product listing from the cache when present; otherwise read
    it from the product source and write it back under a single key.

Layer: application/use_cases
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from rediscache_api.application.interfaces.cache_port import CachePort
from rediscache_api.application.schemas.dto.products import (
    DataSource,
    ProductDTO,
    ProductListDTO,
)
from rediscache_api.domain.entities.product import Product
from rediscache_api.domain.interfaces.product_source import ProductSourceProtocol
from rediscache_api.infrastructure.logging.logger import get_json_logger
from rediscache_api.infrastructure.observability.metrics import get_cache_aside_requests_total

#: Cache key holding the whole listing.
ALL_PRODUCTS_KEY = "all_products"

#: TTL for the listing written on a miss.
TTL_PRODUCT_LIST = timedelta(minutes=5)

logger = get_json_logger(__name__)


def _decode_listing(payload: Any) -> list[Product]:
    """Rebuild the cached listing; any bad element rejects the whole entry."""
    if not isinstance(payload, list):
        raise TypeError(f"expected a list, got {type(payload).__name__}")
    return [Product.from_payload(item) for item in payload]


class GetAllProducts:
    """Use case to fetch the whole catalog.

    Args:
        cache: Cache port used for the read and the write-back.
        source: Product system of record.
        ttl: TTL applied when populating the cache.
    """

    def __init__(
        self,
        cache: CachePort,
        source: ProductSourceProtocol,
        *,
        ttl: timedelta = TTL_PRODUCT_LIST,
    ) -> None:
        self._cache = cache
        self._source = source
        self._ttl = ttl

    async def execute(self) -> ProductListDTO:
        cached = await self._cache.lookup(ALL_PRODUCTS_KEY, _decode_listing)
        if cached.hit and cached.value is not None:
            logger.info("product_list.cache_hit", extra={"extra": {"count": len(cached.value)}})
            get_cache_aside_requests_total().labels(
                resource="product_list", source="cache"
            ).inc()
            return ProductListDTO(
                source=DataSource.CACHE,
                products=[ProductDTO.from_entity(p) for p in cached.value],
            )

        products = await self._source.fetch_all()
        await self._cache.set(ALL_PRODUCTS_KEY, [p.to_payload() for p in products], self._ttl)

        logger.info(
            "product_list.cache_miss",
            extra={"extra": {"count": len(products), "lookup": cached.status.value}},
        )
        get_cache_aside_requests_total().labels(resource="product_list", source="database").inc()
        return ProductListDTO(
            source=DataSource.DATABASE,
            products=[ProductDTO.from_entity(p) for p in products],
        )
