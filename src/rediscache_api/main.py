# src/rediscache_api/main.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires middleware, exception handlers and routers.
    Provides an application factory (`create_app`) and a module-level eager
    app (`app`) for ASGI servers and tests.

Design:
    • Bootstrap only (no business logic).
    • Lifespan opens the shared Redis client and closes it on shutdown.
    • Root JSON logging is configured at import time.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response as StarletteResponse

from rediscache_api.adapters.routers import api_router, metrics
from rediscache_api.config.settings import Environment, Settings, get_settings
from rediscache_api.dependencies.core.bootstrap import bootstrap
from rediscache_api.infrastructure.http.errors import (
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from rediscache_api.infrastructure.logging.logger import (
    configure_root_logging,
    get_json_logger,
)
from rediscache_api.infrastructure.middleware.request_context import (
    AccessLogMiddleware,
    RequestIdMiddleware,
)

configure_root_logging()
logger = get_json_logger(__name__)


@asynccontextmanager
async def runtime_lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize and teardown shared infrastructure via the core bootstrap."""
    async with bootstrap(app) as state:
        app.state.settings = state.settings
        yield


def _attach_middlewares(app: FastAPI) -> None:
    """Attach core middleware.

    Starlette runs the last-added middleware first, so the access log is
    added before the request-ID middleware in order to see the id.
    """
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)


def _attach_cors(app: FastAPI, settings: Settings) -> None:
    """Attach CORS middleware when origins are configured."""
    if not settings.cors_allow_origins:
        return
    wildcard = settings.cors_allow_origins == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _patch_exception_handlers(app: FastAPI) -> None:
    """Replace the default exception handlers with structured envelopes."""

    async def _http_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, StarletteHTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    async def _unhandled_error_handler(request: Request, exc: Exception) -> StarletteResponse:
        return await handle_unhandled_exception(request, exc)

    app.add_exception_handler(StarletteHTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        FastAPI: Fully configured application instance.
    """
    settings: Settings = get_settings()
    if settings.log_level:
        configure_root_logging(settings.log_level)
    service_version = settings.service_version or "0.0.0"

    # Interactive docs are only served outside production.
    docs_enabled = settings.environment is not Environment.PRODUCTION

    app = FastAPI(
        title="RedisCache API",
        version=service_version,
        description="HTTP façade over a Redis cache with cache-aside product reads.",
        lifespan=runtime_lifespan,
        docs_url=settings.docs_url if docs_enabled else None,
        redoc_url=settings.redoc_url if docs_enabled else None,
        openapi_url=settings.openapi_url if docs_enabled else None,
    )

    _patch_exception_handlers(app)
    _attach_middlewares(app)
    _attach_cors(app, settings)

    app.include_router(api_router)
    app.include_router(metrics)

    logger.info(
        "service_startup",
        extra={
            "extra": {
                "service": settings.service_name,
                "env": settings.environment.value,
                "version": service_version,
                "status": "starting",
            }
        },
    )
    return app


app: FastAPI = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "rediscache_api.main:create_app",
        factory=True,
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        reload=get_settings().environment is Environment.DEVELOPMENT,
    )
