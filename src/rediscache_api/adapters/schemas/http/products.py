# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Product HTTP Schemas (Adapters Layer)

Purpose:
    Response contracts for `/api/products`. Prices are emitted as JSON numbers.

Layer: adapters/schemas/http
"""
from __future__ import annotations

from typing import Literal

from pydantic import Field

from rediscache_api.adapters.schemas.http.base import BaseHTTPSchema, JsonDecimal
from rediscache_api.application.schemas.dto.products import (
    ProductDTO,
    ProductListDTO,
    ProductResultDTO,
)

Source = Literal["cache", "database"]


class ProductSchema(BaseHTTPSchema):
    """HTTP representation of a product."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Laptop"])
    price: JsonDecimal = Field(..., examples=[999.99])
    category: str = Field(..., examples=["Electronics"])

    @classmethod
    def from_dto(cls, dto: ProductDTO) -> ProductSchema:
        return cls(id=dto.id, name=dto.name, price=dto.price, category=dto.category)


class ProductResponse(BaseHTTPSchema):
    source: Source
    product: ProductSchema

    @classmethod
    def from_dto(cls, dto: ProductResultDTO) -> ProductResponse:
        return cls(source=dto.source.value, product=ProductSchema.from_dto(dto.product))


class ProductListResponse(BaseHTTPSchema):
    source: Source
    products: list[ProductSchema]
    count: int

    @classmethod
    def from_dto(cls, dto: ProductListDTO) -> ProductListResponse:
        return cls(
            source=dto.source.value,
            products=[ProductSchema.from_dto(p) for p in dto.products],
            count=dto.count,
        )
