# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Product Domain Exceptions

Purpose:
    Error conditions raised by product use cases. Mapped to HTTP by adapters.

Layer: domain/exceptions
"""
from __future__ import annotations

from .base import DomainError


class ProductNotFound(DomainError):
    """The backing store has no product with the requested id."""

    code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int) -> None:
        super().__init__(f"Product {product_id} not found", details={"id": product_id})
        self.product_id = product_id
