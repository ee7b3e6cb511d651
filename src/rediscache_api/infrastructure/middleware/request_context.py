# src/rediscache_api/infrastructure/middleware/request_context.py
# Copyright (c) RedisCache API.
# SPDX-License-Identifier: MIT
"""Per-request correlation and access logging.

``RequestIdMiddleware`` resolves the correlation id (caller's
``X-Request-ID`` when well formed, else a UUID4), stores it on
``request.state`` and the logging contextvar, and echoes it back.
``AccessLogMiddleware`` writes one ``http.access`` record per request.

Add ``AccessLogMiddleware`` first so the request-id middleware wraps it.
"""

from __future__ import annotations

import re
import time
import uuid
from typing import Final

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from rediscache_api.infrastructure.logging.logger import get_json_logger, set_request_context

REQUEST_ID_HEADER: Final[str] = "X-Request-ID"
_ACCEPTED_ID: Final[re.Pattern[str]] = re.compile(r"[\w\-.:@]{1,128}", re.ASCII)

logger = get_json_logger(__name__)


def resolve_request_id(header_value: str | None) -> str:
    if header_value is not None and _ACCEPTED_ID.fullmatch(header_value):
        return header_value
    return uuid.uuid4().hex


class RequestIdMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = resolve_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        set_request_context(request_id=request_id)

        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


class AccessLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            logger.info(
                "http.access",
                extra={
                    "extra": {
                        "method": request.method,
                        "path": request.url.path,
                        "status": status_code,
                        "duration_ms": round((time.perf_counter() - started) * 1000.0, 2),
                        "client": request.client.host if request.client else None,
                    }
                },
            )
