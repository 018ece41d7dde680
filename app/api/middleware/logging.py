# 📄 File: app/api/middleware/logging.py
# 🧭 Purpose (Layman Explanation):
# Keeps a diary of every request to the billing service: what was asked for, how it was
# answered and how long it took.
# 🧪 Purpose (Technical Summary):
# Request logging middleware emitting one structured record per request (method, path, status,
# duration, client) with level chosen by status class and slow-request thresholds.
# 🔗 Dependencies:
# FastAPI, starlette, logging, time
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import time
from typing import Any, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from . import get_middleware_config, should_exclude_path

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging middleware

    Server errors are logged at ERROR, slow requests at WARNING and
    everything else at INFO.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        config = get_middleware_config("logging")
        self.slow_request_threshold = config.get("slow_request_threshold", 2.0)

    async def dispatch(self, request: Request, call_next) -> Response:
        if should_exclude_path("logging", request.url.path):
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration = time.perf_counter() - start_time

        self._log_response(request, response.status_code, duration)
        return response

    def _log_response(self, request: Request, status_code: int, duration: float) -> None:
        extra: Dict[str, Any] = {
            "http_method": request.method,
            "http_path": request.url.path,
            "http_status": status_code,
            "duration_ms": round(duration * 1000, 2),
            "client_ip": request.client.host if request.client else None,
        }
        message = f"{request.method} {request.url.path} -> {status_code} ({duration * 1000:.1f}ms)"

        if status_code >= 500:
            level = logging.ERROR
        elif duration >= self.slow_request_threshold:
            level = logging.WARNING
        else:
            level = logging.INFO

        logger.log(level, message, extra=extra)
