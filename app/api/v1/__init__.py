# 📄 File: app/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes version 1 of the billing service's web API so a later version can be added
# without breaking existing callers.
# 🧪 Purpose (Technical Summary):
# Package initialization for API version 1: version metadata and route prefixes used by the
# router aggregation.
# 🔗 Dependencies:
# app.shared.config.settings
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, app.main.py

from typing import Any, Dict

from app.shared.config.settings import get_settings

__api_version__ = "v1"

# Routes are served at the root; the prefix table keeps module mounts in one place
ROUTE_PREFIXES: Dict[str, str] = {
    "subscriptions": "/subscriptions",
}

API_TAGS = [
    {"name": "Subscriptions", "description": "Subscription billing records and monthly summaries"},
    {"name": "Health Check", "description": "Liveness and readiness probes"},
]


def get_api_info() -> Dict[str, Any]:
    """Version information for the running API."""
    settings = get_settings()
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "api_version": __api_version__,
        "environment": settings.ENVIRONMENT,
        "endpoints": {
            "subscriptions": ROUTE_PREFIXES["subscriptions"],
            "monthly_summary": f"{ROUTE_PREFIXES['subscriptions']}/summary",
            "health_check": "/health",
            "readiness_probe": "/health/ready",
        },
    }
