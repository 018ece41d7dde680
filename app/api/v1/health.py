# 📄 File: app/api/v1/health.py
# 🧭 Purpose (Layman Explanation):
# Health check endpoints that tell load balancers whether the billing service is alive and
# whether it can currently reach its database.
# 🧪 Purpose (Technical Summary):
# Liveness (/health) and readiness (/health/ready) probes; readiness pings the database
# through the connection manager and answers 503 when it is unreachable.
# 🔗 Dependencies:
# FastAPI, app.shared.infrastructure.database.connection, datetime
# 🔄 Connected Modules / Calls From:
# app.api.v1.router, monitoring systems, load balancers

import logging
from datetime import datetime, timezone

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.shared.config.settings import get_settings
from app.shared.infrastructure.database.connection import database_health_check
from app.shared.utils.logging import SERVICE_NAME

logger = logging.getLogger(__name__)

# Create router for health endpoints
health_router = APIRouter()


@health_router.get("/health",
                  summary="Basic Health Check",
                  description="Liveness check for load balancers and monitoring")
async def health_check() -> JSONResponse:
    """
    Basic health check endpoint

    Returns OK as long as the process is serving requests.
    """
    return JSONResponse(
        status_code=200,
        content={
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": SERVICE_NAME,
            "version": get_settings().APP_VERSION,
        }
    )


@health_router.get("/health/ready",
                  summary="Readiness Probe",
                  description="Ready when the database answers")
async def readiness_probe() -> JSONResponse:
    """
    Readiness probe

    Returns 200 if the application is ready to serve traffic, 503 when the
    database cannot be reached.
    """
    db_health = await database_health_check()

    if db_health["status"] == "healthy":
        return JSONResponse(
            status_code=200,
            content={"status": "ready", "timestamp": db_health["timestamp"]}
        )

    logger.warning(f"Readiness probe failed: {db_health.get('error')}")
    return JSONResponse(
        status_code=503,
        content={
            "status": "not_ready",
            "reason": "database_unhealthy",
            "timestamp": db_health["timestamp"],
        }
    )
