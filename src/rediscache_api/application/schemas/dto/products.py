# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Product DTOs (Application Layer).

Purpose:
    Results of the product cache-aside use cases, tagged with where the data
    was served from.

Layer: application/schemas/dto
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum

from pydantic import Field

from rediscache_api.application.schemas.dto.base import BaseDTO
from rediscache_api.domain.entities.product import Product


class DataSource(str, Enum):
    """Where a cache-aside read was answered from."""

    CACHE = "cache"
    DATABASE = "database"


class ProductDTO(BaseDTO):
    """Transport-agnostic product."""

    id: int
    name: str
    price: Decimal
    category: str

    @classmethod
    def from_entity(cls, product: Product) -> ProductDTO:
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            category=product.category,
        )


class ProductResultDTO(BaseDTO):
    """A single product and its source."""

    source: DataSource
    product: ProductDTO


class ProductListDTO(BaseDTO):
    """The full catalog listing and its source."""

    source: DataSource
    products: list[ProductDTO] = Field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.products)
