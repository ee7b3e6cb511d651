# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Products Router.

Summary:
    Cache-aside product reads under `/api/products`. Each response reports
    whether it was served from the cache or the backing store.

Layer:
    adapters/routers
"""
from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from rediscache_api.adapters.schemas.http.cache import MessageResponse
from rediscache_api.adapters.schemas.http.products import ProductListResponse, ProductResponse
from rediscache_api.application.use_cases.products.get_all_products import GetAllProducts
from rediscache_api.application.use_cases.products.get_product import GetProduct
from rediscache_api.dependencies.cache import get_all_products_uc, get_product_uc
from rediscache_api.domain.exceptions.products import ProductNotFound

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get(
    "/{product_id}",
    response_model=ProductResponse,
    responses={404: {"description": "Unknown product", "model": MessageResponse}},
    summary="Get a product (cache-aside)",
    operation_id="products_get",
)
async def get_product(
    product_id: int,
    uc: Annotated[GetProduct, Depends(get_product_uc)],
) -> ProductResponse | JSONResponse:
    try:
        dto = await uc.execute(product_id)
    except ProductNotFound as exc:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content=MessageResponse(message=str(exc)).model_dump_http(),
        )
    return ProductResponse.from_dto(dto)


@router.get(
    "",
    response_model=ProductListResponse,
    summary="List all products (cache-aside)",
    operation_id="products_list",
)
async def get_all_products(
    uc: Annotated[GetAllProducts, Depends(get_all_products_uc)],
) -> ProductListResponse:
    return ProductListResponse.from_dto(await uc.execute())
