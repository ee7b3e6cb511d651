# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Product Entity

Purpose:
    Immutable domain representation of a catalog product (no I/O).

Layer: domain/entities
"""
from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any


@dataclass(frozen=True, slots=True)
class Product:
    """Catalog product.

    Args:
        id: Catalog identifier, unique within the catalog.
        name: Display name (non-empty).
        price: Unit price (non-negative).
        category: Category label.

    Raises:
        ValueError: If invariants are violated (e.g., negative price).
    """

    id: int
    name: str
    price: Decimal
    category: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be non-empty")
        if self.price < 0:
            raise ValueError("price must be >= 0")

    def to_payload(self) -> dict[str, Any]:
        """Serialize into a cache-friendly mapping (price as a JSON number)."""
        return {
            "id": self.id,
            "name": self.name,
            "price": float(self.price),
            "category": self.category,
        }

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Product:
        """Rebuild a product from :meth:`to_payload` output.

        Raises:
            KeyError: If a field is missing.
            TypeError: If ``payload`` is not a mapping.
            ValueError: If a field cannot be coerced or violates invariants.
        """
        if not isinstance(payload, Mapping):
            raise TypeError(f"expected a mapping, got {type(payload).__name__}")
        try:
            price = Decimal(str(payload["price"]))
            if not price.is_finite():
                raise ValueError("price must be finite")
        except InvalidOperation as exc:
            raise ValueError(f"invalid price: {payload['price']!r}") from exc
        return cls(
            id=int(payload["id"]),
            name=str(payload["name"]),
            price=price,
            category=str(payload["category"]),
        )
