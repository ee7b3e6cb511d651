# src/rediscache_api/infrastructure/catalog/simulated_catalog.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Simulated product backing store.

Synopsis:
    Fixed, read-only catalog standing in for a real database. Each read sleeps
    for a configured latency so cache hits and misses are easy to tell apart.

Design:
    * ``CATALOG`` is an immutable tuple built once at import; safe to share
      across concurrent requests without locking.
    * Latency uses ``asyncio.sleep`` so a slow read holds only its own request.
"""

from __future__ import annotations

import asyncio
from decimal import Decimal
from typing import Final

from rediscache_api.domain.entities.product import Product
from rediscache_api.domain.interfaces.product_source import ProductSourceProtocol

__all__ = ["CATALOG", "SimulatedProductCatalog"]

CATALOG: Final[tuple[Product, ...]] = (
    Product(id=1, name="Laptop", price=Decimal("999.99"), category="Electronics"),
    Product(id=2, name="Mouse", price=Decimal("29.99"), category="Electronics"),
    Product(id=3, name="Keyboard", price=Decimal("79.99"), category="Electronics"),
    Product(id=4, name="Monitor", price=Decimal("299.99"), category="Electronics"),
    Product(id=5, name="Desk Chair", price=Decimal("199.99"), category="Furniture"),
)


class SimulatedProductCatalog(ProductSourceProtocol):
    """In-memory product source with fixed per-call latency."""

    def __init__(
        self,
        *,
        item_latency_s: float = 1.0,
        list_latency_s: float = 2.0,
        products: tuple[Product, ...] = CATALOG,
    ) -> None:
        """Initialize the catalog.

        Args:
            item_latency_s: Delay before answering :meth:`fetch_by_id`.
            list_latency_s: Delay before answering :meth:`fetch_all`.
            products: Catalog contents.
        """
        self._item_latency_s = item_latency_s
        self._list_latency_s = list_latency_s
        self._by_id = {p.id: p for p in products}
        self._products = products

    async def fetch_by_id(self, product_id: int) -> Product | None:
        if self._item_latency_s > 0:
            await asyncio.sleep(self._item_latency_s)
        return self._by_id.get(product_id)

    async def fetch_all(self) -> list[Product]:
        if self._list_latency_s > 0:
            await asyncio.sleep(self._list_latency_s)
        return list(self._products)
