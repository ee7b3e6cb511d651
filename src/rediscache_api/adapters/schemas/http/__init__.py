"""HTTP schema exports (adapters layer)."""

from __future__ import annotations

from .base import BaseHTTPSchema, JsonDecimal
from .cache import (
    CacheEntryResponse,
    CacheExistsResponse,
    CacheHealthResponse,
    CacheSetRequest,
    CacheSetResponse,
    MessageResponse,
)
from .products import ProductListResponse, ProductResponse, ProductSchema

__all__ = [
    "BaseHTTPSchema",
    "CacheEntryResponse",
    "CacheExistsResponse",
    "CacheHealthResponse",
    "CacheSetRequest",
    "CacheSetResponse",
    "JsonDecimal",
    "MessageResponse",
    "ProductListResponse",
    "ProductResponse",
    "ProductSchema",
]
