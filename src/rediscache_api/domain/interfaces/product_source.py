# src/rediscache_api/domain/interfaces/product_source.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Product Source Protocol.

Synopsis:
    Domain-level Protocol (PEP 544) over the product system of record. The
    cache-aside use cases only depend on this contract, so they can be
    exercised with an in-memory source and no simulated latency.

Layer:
    domain/interfaces
"""

from __future__ import annotations

from typing import Protocol

from rediscache_api.domain.entities.product import Product


class ProductSourceProtocol(Protocol):
    """Read-only access to the product backing store."""

    async def fetch_by_id(self, product_id: int) -> Product | None:
        """Return the product with ``product_id`` or ``None`` if unknown."""
        ...

    async def fetch_all(self) -> list[Product]:
        """Return every product in catalog order."""
        ...
