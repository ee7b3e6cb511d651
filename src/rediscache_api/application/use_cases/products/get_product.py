# src/rediscache_api/application/use_cases/products/get_product.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Use Case: Get Product (cache-aside)

Purpose:
    Serve a single product from the cache when present; otherwise read it from
    the product source, write it back to the cache, and return it.

Notes:
    Concurrent misses for the same id each read the source and overwrite the
    entry; there is no single-flight lock on this path.

Layer: application/use_cases
"""

from __future__ import annotations

from datetime import timedelta

from rediscache_api.application.interfaces.cache_port import CachePort
from rediscache_api.application.schemas.dto.products import (
    DataSource,
    ProductDTO,
    ProductResultDTO,
)
from rediscache_api.domain.entities.product import Product
from rediscache_api.domain.exceptions.products import ProductNotFound
from rediscache_api.domain.interfaces.product_source import ProductSourceProtocol
from rediscache_api.infrastructure.logging.logger import get_json_logger
from rediscache_api.infrastructure.observability.metrics import get_cache_aside_requests_total

#: TTL for a single product written on a miss.
TTL_PRODUCT = timedelta(minutes=10)

logger = get_json_logger(__name__)


def product_cache_key(product_id: int) -> str:
    """Build the cache key for a single product."""
    return f"product_{product_id}"


class GetProduct:
    """Use case to fetch one product by id.

    Args:
        cache: Cache port used for the read and the write-back.
        source: Product system of record.
        ttl: TTL applied when populating the cache.

    Raises:
        ProductNotFound: If the source has no such product.
    """

    def __init__(
        self,
        cache: CachePort,
        source: ProductSourceProtocol,
        *,
        ttl: timedelta = TTL_PRODUCT,
    ) -> None:
        self._cache = cache
        self._source = source
        self._ttl = ttl

    async def execute(self, product_id: int) -> ProductResultDTO:
        key = product_cache_key(product_id)

        cached = await self._cache.lookup(key, Product.from_payload)
        if cached.hit and cached.value is not None:
            logger.info("product.cache_hit", extra={"extra": {"product_id": product_id}})
            get_cache_aside_requests_total().labels(resource="product", source="cache").inc()
            return ProductResultDTO(
                source=DataSource.CACHE,
                product=ProductDTO.from_entity(cached.value),
            )

        product = await self._source.fetch_by_id(product_id)
        if product is None:
            raise ProductNotFound(product_id)

        await self._cache.set(key, product.to_payload(), self._ttl)

        logger.info(
            "product.cache_miss",
            extra={"extra": {"product_id": product_id, "lookup": cached.status.value}},
        )
        get_cache_aside_requests_total().labels(resource="product", source="database").inc()
        return ProductResultDTO(source=DataSource.DATABASE, product=ProductDTO.from_entity(product))
