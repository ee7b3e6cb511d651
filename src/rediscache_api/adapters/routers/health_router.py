# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Health endpoints (Adapters Layer).

Routes:
    GET /health/z          process liveness, no I/O.
    GET /health/readiness  Redis ``PING``; 200 ``ok`` or 503 ``degraded``.

The readiness probe is resolved through :func:`get_health_probe`, which tests
replace via ``app.dependency_overrides``.
"""

from __future__ import annotations

import time
import typing as t
from typing import Annotated, Protocol

from fastapi import APIRouter, Depends, Response, status

from rediscache_api.adapters.schemas.http.base import BaseHTTPSchema
from rediscache_api.infrastructure.caching.redis_client import get_redis_client
from rediscache_api.infrastructure.health.probe import RedisProbe
from rediscache_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)
router = APIRouter()


class RedisCheck(BaseHTTPSchema):
    name: t.Literal["redis"] = "redis"
    status: t.Literal["ok", "down"]
    detail: str | None = None
    duration_ms: float


class ReadinessResponse(BaseHTTPSchema):
    status: t.Literal["ok", "degraded"]
    checks: list[RedisCheck]


class LivenessResponse(BaseHTTPSchema):
    status: t.Literal["ok"] = "ok"


class HealthProbe(Protocol):
    async def redis(self) -> tuple[bool, str | None]: ...


def get_health_probe() -> HealthProbe:
    """Return a PING probe over the shared Redis client."""
    return RedisProbe(get_redis_client())


@router.get(
    "/z",
    summary="Liveness",
    operation_id="health_liveness",
    response_model=LivenessResponse,
)
async def liveness() -> LivenessResponse:
    return LivenessResponse()


@router.get(
    "/readiness",
    summary="Readiness (Redis)",
    operation_id="health_readiness",
    response_model=ReadinessResponse,
    responses={503: {"description": "Redis unreachable", "model": ReadinessResponse}},
)
async def readiness(
    response: Response,
    probe: Annotated[HealthProbe, Depends(get_health_probe)],
) -> ReadinessResponse:
    started = time.perf_counter()
    ok, detail = await probe.redis()
    check = RedisCheck(
        status="ok" if ok else "down",
        detail=detail,
        duration_ms=(time.perf_counter() - started) * 1000.0,
    )
    if not ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        logger.warning("readiness.redis_down", extra={"extra": {"detail": detail}})

    return ReadinessResponse(status="ok" if ok else "degraded", checks=[check])
