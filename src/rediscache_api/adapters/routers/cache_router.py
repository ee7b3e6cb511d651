# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Cache Router.

Summary:
    Generic key/value endpoints over the cache gateway under `/api/cache`.
    Store failures never surface here: reads degrade to "not found" and
    writes/deletes always report success.

Layer:
    adapters/routers
"""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from rediscache_api.adapters.schemas.http.cache import (
    CacheEntryResponse,
    CacheExistsResponse,
    CacheHealthResponse,
    CacheSetRequest,
    CacheSetResponse,
    MessageResponse,
)
from rediscache_api.application.interfaces.cache_port import CachePort
from rediscache_api.dependencies.cache import get_cache_gateway

router = APIRouter(prefix="/api/cache", tags=["Cache"])

_NOT_FOUND = {404: {"description": "Key not present", "model": MessageResponse}}
_BAD_REQUEST = {400: {"description": "Key missing", "model": MessageResponse}}


def _message(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=MessageResponse(message=message).model_dump_http(),
    )


# Literal paths are registered before `/{key}` so they take precedence.
@router.get(
    "/health",
    response_model=CacheHealthResponse,
    summary="Cache configuration status",
    operation_id="cache_health",
)
async def cache_health() -> CacheHealthResponse:
    """Report that the cache is configured (does not contact Redis)."""
    return CacheHealthResponse(
        status="Redis cache is configured",
        timestamp=datetime.now(tz=UTC),
    )


@router.get(
    "/exists/{key}",
    response_model=CacheExistsResponse,
    summary="Check whether a key is cached",
    operation_id="cache_exists",
)
async def cache_exists(
    key: str,
    cache: Annotated[CachePort, Depends(get_cache_gateway)],
) -> CacheExistsResponse:
    return CacheExistsResponse(key=key, exists=await cache.exists(key))


@router.get(
    "/{key}",
    response_model=CacheEntryResponse,
    responses=_NOT_FOUND,
    summary="Get a cached value",
    operation_id="cache_get",
)
async def cache_get(
    key: str,
    cache: Annotated[CachePort, Depends(get_cache_gateway)],
) -> CacheEntryResponse | JSONResponse:
    value = await cache.get(key)
    if value is None:
        return _message(status.HTTP_404_NOT_FOUND, f"Key '{key}' not found in cache")
    return CacheEntryResponse(key=key, value=value)


@router.post(
    "",
    response_model=CacheSetResponse,
    responses=_BAD_REQUEST,
    summary="Cache a value",
    operation_id="cache_set",
)
async def cache_set(
    body: CacheSetRequest,
    cache: Annotated[CachePort, Depends(get_cache_gateway)],
) -> CacheSetResponse | JSONResponse:
    """Store ``value`` under ``key`` with an optional TTL in minutes.

    A write that fails at the store is logged by the gateway; this endpoint
    still answers 200.
    """
    if not body.key:
        return _message(status.HTTP_400_BAD_REQUEST, "Key is required")

    ttl = (
        timedelta(minutes=body.expiration_minutes)
        if body.expiration_minutes is not None
        else None
    )
    await cache.set(body.key, body.value, ttl)
    return CacheSetResponse(message="Value cached successfully", key=body.key)


@router.delete(
    "/{key}",
    response_model=MessageResponse,
    summary="Remove a cached value",
    operation_id="cache_delete",
)
async def cache_delete(
    key: str,
    cache: Annotated[CachePort, Depends(get_cache_gateway)],
) -> MessageResponse:
    await cache.remove(key)
    return MessageResponse(message=f"Key '{key}' removed from cache")
