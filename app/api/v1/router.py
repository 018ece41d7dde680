# 📄 File: app/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# Acts like a traffic director for the billing API, sending subscription requests to the
# subscription endpoints and health checks to the health endpoints.
# 🧪 Purpose (Technical Summary):
# API v1 router aggregation combining module routers with their route prefixes.
# 🔗 Dependencies:
# FastAPI, app.api.v1.health, app.modules.subscriptions.presentation.api.v1
# 🔄 Connected Modules / Calls From:
# app.main.py

import logging

from fastapi import APIRouter

from app.modules.subscriptions.presentation.api.v1.subscriptions import subscriptions_router
from . import ROUTE_PREFIXES, get_api_info
from .health import health_router

logger = logging.getLogger(__name__)

# Create main API v1 router
api_v1_router = APIRouter()

api_v1_router.include_router(health_router, tags=["Health Check"])

api_v1_router.include_router(
    subscriptions_router,
    prefix=ROUTE_PREFIXES["subscriptions"],
    tags=["Subscriptions"],
)


@api_v1_router.get("/",
                  summary="API Information",
                  description="Get API version information and available endpoints",
                  tags=["API Info"])
async def api_v1_info() -> dict:
    return get_api_info()
