# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Cache HTTP Schemas (Adapters Layer)

Purpose:
    Request/response contracts for the generic `/api/cache` endpoints.
    Keys are opaque: they are stored and echoed byte-for-byte, so these
    schemas opt out of whitespace stripping.

Layer: adapters/schemas/http
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Final

from pydantic import ConfigDict, Field

from rediscache_api.adapters.schemas.http.base import BaseHTTPSchema

#: Bounds for `expirationMinutes` (signed 32-bit).
MIN_EXPIRATION_MINUTES: Final[int] = -(2**31)
MAX_EXPIRATION_MINUTES: Final[int] = 2**31 - 1


class _OpaqueKeySchema(BaseHTTPSchema):
    model_config = ConfigDict(str_strip_whitespace=False)


class CacheSetRequest(_OpaqueKeySchema):
    """Body of `POST /api/cache`.

    ``key`` is optional at the schema level so a missing key surfaces as a
    400 from the router instead of a 422 validation error.
    """

    model_config = ConfigDict(extra="ignore")

    key: str | None = Field(default=None, examples=["greeting"])
    value: Any = Field(default_factory=dict, examples=[{"text": "hello"}])
    expiration_minutes: int | None = Field(
        default=None,
        alias="expirationMinutes",
        ge=MIN_EXPIRATION_MINUTES,
        le=MAX_EXPIRATION_MINUTES,
        description="TTL in minutes; omitted means the cache default (30).",
        examples=[15],
    )


class CacheEntryResponse(_OpaqueKeySchema):
    key: str
    value: Any


class CacheSetResponse(_OpaqueKeySchema):
    message: str
    key: str


class MessageResponse(_OpaqueKeySchema):
    """Plain message body used for deletes and 4xx errors."""

    message: str


class CacheExistsResponse(_OpaqueKeySchema):
    key: str
    exists: bool


class CacheHealthResponse(BaseHTTPSchema):
    """Static configuration status; does not contact Redis."""

    status: str
    timestamp: datetime
