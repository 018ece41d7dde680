# 📄 File: app/api/middleware/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the helpers that wrap every request to the billing service: one keeps a record of
# each request, the other turns unexpected crashes into a tidy error reply.
# 🧪 Purpose (Technical Summary):
# Package initialization for API middleware components with shared per-middleware configuration
# (excluded paths, slow-request thresholds) and lookup helpers.
# 🔗 Dependencies:
# FastAPI / Starlette middleware components
# 🔄 Connected Modules / Calls From:
# app.main.py (middleware registration), app.api.middleware.logging

"""
Subscription Billing API Middleware Package

Middleware Components:
    - ErrorHandlingMiddleware: Request correlation and last-resort error formatting
    - RequestLoggingMiddleware: HTTP request and response logging

Middleware Stack Order (applied in reverse order):
    1. ErrorHandlingMiddleware (outermost - binds request ID, catches all errors)
    2. RequestLoggingMiddleware (logs all requests/responses)
    3. Application Routes (innermost)
"""

from typing import Any, Dict

MIDDLEWARE_CONFIG = {
    "error_handling": {
        "enabled": True,
        "request_id_header": "X-Request-ID",
        "response_time_header": "X-Response-Time",
    },
    "logging": {
        "enabled": True,
        "exclude_paths": [
            "/health",
            "/health/ready",
        ],
        "slow_request_threshold": 2.0,
    },
}

def get_middleware_config(middleware_name: str) -> Dict[str, Any]:
    """
    Get configuration for a specific middleware

    Args:
        middleware_name: Name of the middleware

    Returns:
        Middleware configuration dictionary
    """
    return MIDDLEWARE_CONFIG.get(middleware_name, {})


def should_exclude_path(middleware_name: str, path: str) -> bool:
    """
    Check if a path should be excluded from middleware processing

    Args:
        middleware_name: Name of the middleware
        path: Request path to check

    Returns:
        True if path should be excluded, False otherwise
    """
    exclude_paths = get_middleware_config(middleware_name).get("exclude_paths", [])
    return path.rstrip("/") in exclude_paths


from .error_handling import ErrorHandlingMiddleware  # noqa: E402
from .logging import RequestLoggingMiddleware  # noqa: E402

__all__ = [
    "MIDDLEWARE_CONFIG",
    "get_middleware_config",
    "should_exclude_path",
    "ErrorHandlingMiddleware",
    "RequestLoggingMiddleware",
]
