# src/rediscache_api/config/settings.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""RedisCache API Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated application configuration. This module centralizes
    environment parsing and validation. Only adapters/infrastructure read the
    process environment at runtime; other layers receive `Settings` via DI.

Design:
    - Pydantic v2 BaseSettings with `extra='forbid'` to catch unknown env.
    - Explicit field declarations with constrained types and ranges.
    - Environment enumeration for behavior toggles (includes TEST).
    - Singleton accessor `get_settings()` with LRU cache.
    - Safe, structured logging (no secrets).
"""

from __future__ import annotations

import logging
from datetime import timedelta
from enum import Enum
from functools import lru_cache

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    CI = "ci"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed application configuration for the RedisCache API."""

    # ---------------------------
    # Core environment
    # ---------------------------
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
        validation_alias="ENVIRONMENT",
    )

    # ---------------------------
    # Redis (cache store)
    # ---------------------------
    redis_url: str = Field(
        ...,
        description="Redis connection URL for the distributed cache.",
        validation_alias="REDIS_URL",
    )
    redis_key_prefix: str = Field(
        default="RedisApi_",
        description="Instance prefix prepended to every cache key.",
        validation_alias="REDIS_KEY_PREFIX",
    )
    redis_health_check_interval_s: int = Field(
        default=15,
        ge=1,
        le=3600,
        description="Health check interval for Redis clients in seconds.",
        validation_alias="REDIS_HEALTH_CHECK_INTERVAL_S",
    )
    redis_socket_timeout_s: float = Field(
        default=3.0,
        ge=0.1,
        le=60.0,
        description="Socket timeout in seconds for Redis commands.",
        validation_alias="REDIS_SOCKET_TIMEOUT_S",
    )
    redis_socket_connect_timeout_s: float = Field(
        default=3.0,
        ge=0.1,
        le=60.0,
        description="Socket connect timeout in seconds for Redis.",
        validation_alias="REDIS_SOCKET_CONNECT_TIMEOUT_S",
    )

    # ---------------------------
    # Cache TTL policy
    # ---------------------------
    cache_default_ttl_minutes: int = Field(
        default=30,
        ge=1,
        le=7 * 24 * 60,
        description="TTL applied by the cache gateway when the caller passes none.",
        validation_alias="CACHE_DEFAULT_TTL_MINUTES",
    )
    product_cache_ttl_minutes: int = Field(
        default=10,
        ge=1,
        le=24 * 60,
        description="TTL for a single cached product.",
        validation_alias="PRODUCT_CACHE_TTL_MINUTES",
    )
    product_list_cache_ttl_minutes: int = Field(
        default=5,
        ge=1,
        le=24 * 60,
        description="TTL for the cached product listing.",
        validation_alias="PRODUCT_LIST_CACHE_TTL_MINUTES",
    )

    # ---------------------------
    # Simulated backing store
    # ---------------------------
    catalog_item_latency_s: float = Field(
        default=1.0,
        ge=0.0,
        le=30.0,
        description="Simulated latency of a single-product backing-store read.",
        validation_alias="CATALOG_ITEM_LATENCY_S",
    )
    catalog_list_latency_s: float = Field(
        default=2.0,
        ge=0.0,
        le=30.0,
        description="Simulated latency of a full-listing backing-store read.",
        validation_alias="CATALOG_LIST_LATENCY_S",
    )

    # ---------------------------
    # CORS
    # ---------------------------
    cors_allow_origins_raw: str | None = Field(
        default=None,
        description="Raw env for allowed CORS origins (comma-separated).",
        validation_alias="ALLOWED_ORIGINS",
    )
    cors_allow_origins: list[str] = Field(
        default_factory=list,
        description="Allowed CORS origins, derived from ALLOWED_ORIGINS.",
    )

    # ---------------------------
    # OpenAPI / docs
    # ---------------------------
    docs_url: str | None = Field(
        default="/docs",
        description="Swagger UI docs URL. Set to None to disable interactive docs.",
        validation_alias="DOCS_URL",
    )
    redoc_url: str | None = Field(
        default=None,
        description="ReDoc docs URL. Set to None to disable ReDoc.",
        validation_alias="REDOC_URL",
    )
    openapi_url: str | None = Field(
        default="/openapi.json",
        description="OpenAPI JSON schema URL. Set to None to disable OpenAPI exposure.",
        validation_alias="OPENAPI_URL",
    )

    # ---------------------------
    # Service identity / logging
    # ---------------------------
    service_name: str = Field(
        default="rediscache-api",
        description="Logical service name for logging.",
        validation_alias="SERVICE_NAME",
    )
    service_version: str | None = Field(
        default=None,
        description="Service version reported in OpenAPI and startup logs.",
        validation_alias="SERVICE_VERSION",
    )
    log_level: str | None = Field(
        default=None,
        description="Override log level (e.g., 'DEBUG', 'INFO').",
        validation_alias="LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def _compute_cors(self) -> Settings:
        """Parse the raw CORS string into a list.

        Raises:
            ValueError: If '*' is configured outside development/test.
        """
        raw = (self.cors_allow_origins_raw or "").strip()
        entries = [e.strip() for e in raw.split(",") if e.strip()]
        if any(e == "*" for e in entries) and self.environment not in (
            Environment.DEVELOPMENT,
            Environment.TEST,
        ):
            raise ValueError(
                "'*' CORS origin is only allowed in development/test environments.",
            )
        self.cors_allow_origins = entries
        return self

    @property
    def cache_default_ttl(self) -> timedelta:
        return timedelta(minutes=self.cache_default_ttl_minutes)

    @property
    def product_cache_ttl(self) -> timedelta:
        return timedelta(minutes=self.product_cache_ttl_minutes)

    @property
    def product_list_cache_ttl(self) -> timedelta:
        return timedelta(minutes=self.product_list_cache_ttl_minutes)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid application configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc

    logger.info(
        "Settings initialized",
        extra={
            "extra": {
                "environment": settings.environment.value,
                "redis_url_set": bool(settings.redis_url),
                "redis_key_prefix": settings.redis_key_prefix,
                "cache_default_ttl_minutes": settings.cache_default_ttl_minutes,
                "cors_count": len(settings.cors_allow_origins),
                "docs_url": settings.docs_url,
            }
        },
    )
    return settings
