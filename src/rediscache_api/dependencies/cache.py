# src/rediscache_api/dependencies/cache.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the cache gateway and product use cases.

Overview:
    FastAPI dependency providers consumed by the cache and product routers.
    Tests override :func:`get_cache_gateway` or :func:`get_product_source`
    through ``app.dependency_overrides`` to run against fakeredis and a
    zero-latency catalog.

Layer:
    dependencies
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from rediscache_api.application.interfaces.cache_port import CachePort
from rediscache_api.application.use_cases.products.get_all_products import GetAllProducts
from rediscache_api.application.use_cases.products.get_product import GetProduct
from rediscache_api.config.settings import Settings, get_settings
from rediscache_api.domain.interfaces.product_source import ProductSourceProtocol
from rediscache_api.infrastructure.caching.cache_gateway import RedisCacheGateway
from rediscache_api.infrastructure.catalog.simulated_catalog import SimulatedProductCatalog


def get_cache_gateway(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CachePort:
    """Return a cache gateway bound to the shared Redis client."""
    return RedisCacheGateway(
        prefix=settings.redis_key_prefix,
        default_ttl=settings.cache_default_ttl,
    )


def get_product_source(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ProductSourceProtocol:
    """Return the simulated product backing store."""
    return SimulatedProductCatalog(
        item_latency_s=settings.catalog_item_latency_s,
        list_latency_s=settings.catalog_list_latency_s,
    )


def get_product_uc(
    cache: Annotated[CachePort, Depends(get_cache_gateway)],
    source: Annotated[ProductSourceProtocol, Depends(get_product_source)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> GetProduct:
    return GetProduct(cache, source, ttl=settings.product_cache_ttl)


def get_all_products_uc(
    cache: Annotated[CachePort, Depends(get_cache_gateway)],
    source: Annotated[ProductSourceProtocol, Depends(get_product_source)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> GetAllProducts:
    return GetAllProducts(cache, source, ttl=settings.product_list_cache_ttl)
