# 📄 File: app/api/middleware/error_handling.py
# 🧭 Purpose (Layman Explanation):
# Gives every request a tracking number, times it, and if something crashes unexpectedly,
# replies with a plain "internal error" message instead of leaking technical details.
# 🧪 Purpose (Technical Summary):
# Outermost middleware: propagates or generates X-Request-ID, binds it to the logging context,
# adds X-Response-Time, and converts unhandled exceptions into an opaque 500 JSON envelope
# logged with traceback. Typed service errors are rendered earlier by app.main exception handlers.
# 🔗 Dependencies:
# FastAPI, starlette, app.shared.utils.logging, logging, uuid
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration)

import logging
import time
import uuid
from typing import Any, Dict

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from app.shared.config.settings import get_settings
from app.shared.utils.logging import log_context
from . import get_middleware_config

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "INTERNAL_SERVER_ERROR"
INTERNAL_ERROR_MESSAGE = "internal server error"


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """
    Global error handling middleware for the Subscription Billing API

    Catches every exception that escapes the application and converts it
    into the standard error envelope with status 500. The exception detail
    is logged, never returned.
    """

    def __init__(self, app: ASGIApp):
        super().__init__(app)
        self.settings = get_settings()
        config = get_middleware_config("error_handling")
        self.request_id_header = config.get("request_id_header", "X-Request-ID")
        self.response_time_header = config.get("response_time_header", "X-Response-Time")

    async def dispatch(self, request: Request, call_next) -> Response:
        """
        Process request and handle any exceptions that occur

        Args:
            request: HTTP request
            call_next: Next middleware or endpoint

        Returns:
            HTTP response
        """
        request_id = request.headers.get(self.request_id_header) or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()

        with log_context(request_id):
            try:
                response = await call_next(request)
            except Exception as exc:
                response = self._handle_exception(request, exc, request_id)

        response.headers[self.request_id_header] = request_id
        response.headers[self.response_time_header] = f"{time.perf_counter() - start_time:.3f}s"
        return response

    def _handle_exception(self, request: Request, exc: Exception, request_id: str) -> JSONResponse:
        logger.error(
            f"Unhandled exception on {request.method} {request.url.path}: "
            f"{type(exc).__name__}: {exc}",
            exc_info=exc,
        )

        error: Dict[str, Any] = {
            "code": INTERNAL_ERROR_CODE,
            "message": INTERNAL_ERROR_MESSAGE,
            "details": {},
            "request_id": request_id,
        }
        if self.settings.DEBUG and not self.settings.is_production:
            error["details"] = {"exception_type": type(exc).__name__}

        return JSONResponse(status_code=500, content={"error": error})
