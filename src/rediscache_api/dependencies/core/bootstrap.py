# src/rediscache_api/dependencies/core/bootstrap.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Core bootstrap for shared infrastructure.

The single public surface is :func:`bootstrap`, an async context manager that
resolves settings, opens the process-wide Redis client and closes it on exit.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI

from rediscache_api.config.settings import Settings, get_settings
from rediscache_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


@dataclass
class BootstrapState:
    """State yielded by the bootstrap context manager."""

    settings: Settings


@asynccontextmanager
async def bootstrap(app: FastAPI) -> AsyncGenerator[BootstrapState, None]:
    """Initialize and teardown shared infrastructure.

    Args:
        app: FastAPI application instance.

    Yields:
        BootstrapState: Resolved settings.
    """
    settings: Settings = get_settings()
    logger.info("bootstrap.start", extra={"extra": {"service": settings.service_name}})

    # Imported here so tests can monkeypatch module functions.
    import rediscache_api.infrastructure.caching.redis_client as redis_client

    redis_client.init_redis(settings)

    try:
        yield BootstrapState(settings=settings)
    finally:
        try:
            await redis_client.close_redis()
        except Exception:
            logger.exception("bootstrap.redis_close_failed")

        logger.info("bootstrap.stop")
