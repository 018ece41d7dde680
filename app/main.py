# 📄 File: app/main.py
#
# 🧭 Purpose (Layman Explanation):
# The main control center that starts the Subscription Billing service, connects to the database
# (trying again a few times if it is not up yet), and makes sure every request gets a proper answer.
#
# 🧪 Purpose (Technical Summary):
# FastAPI application factory and entry point with lifespan-managed database/session setup,
# middleware registration, router registration and exception handlers rendering the
# standard error envelope.
#
# 🔗 Dependencies:
# - FastAPI framework, uvicorn
# - app.shared.config.settings
# - app.shared.infrastructure.database (connection and session managers)
# - app.api (routers and middleware)
#
# 🔄 Connected Modules / Calls From:
# - uvicorn server startup
# - Docker container entry point
# - tests (application factory)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.shared.config.settings import get_settings
from app.shared.core.exceptions import BillingServiceException, ValidationError, is_client_error
from app.shared.infrastructure.database.connection import close_database, initialize_database
from app.shared.infrastructure.database.session import initialize_sessions
from app.shared.utils.logging import request_id_var, setup_logging
from app.api.middleware import ErrorHandlingMiddleware, RequestLoggingMiddleware, get_middleware_config
from app.api.v1 import API_TAGS
from app.api.v1.router import api_v1_router

# Get application settings
settings = get_settings()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Startup verifies database connectivity (with bounded retries) and
    prepares the session factory; shutdown disposes the connection pool.
    """
    setup_logging()
    logger.info(f"{settings.APP_NAME} starting up ({settings.ENVIRONMENT})...")

    try:
        await initialize_database()
        logger.info("Database connection initialized")

        initialize_sessions()
        logger.info("Session manager initialized")
    except Exception as e:
        logger.error(f"Startup failed: {e}")
        await close_database()
        raise

    logger.info(f"{settings.APP_NAME} startup complete")
    try:
        yield  # Application is running
    finally:
        logger.info(f"{settings.APP_NAME} shutting down...")
        await close_database()
        logger.info("Database connections closed")


def _error_response(exc: BillingServiceException, request: Request) -> JSONResponse:
    request_id = getattr(request.state, "request_id", None) or request_id_var.get() or None
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(request_id))


def create_application() -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with middleware,
    routers and exception handlers.

    Returns:
        FastAPI: Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description=settings.APP_DESCRIPTION,
        version=settings.APP_VERSION,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
        openapi_tags=API_TAGS,
        lifespan=lifespan,
        debug=settings.DEBUG,
    )

    # =========================================================================
    # MIDDLEWARE CONFIGURATION
    # =========================================================================

    # Request logging middleware
    if get_middleware_config("logging").get("enabled") and not settings.is_testing:
        app.add_middleware(RequestLoggingMiddleware)

    # Error handling middleware (added last so it wraps everything)
    if get_middleware_config("error_handling").get("enabled"):
        app.add_middleware(ErrorHandlingMiddleware)

    # =========================================================================
    # ROUTER REGISTRATION
    # =========================================================================

    app.include_router(api_v1_router)

    # =========================================================================
    # EXCEPTION HANDLERS
    # =========================================================================

    @app.exception_handler(BillingServiceException)
    async def billing_service_exception_handler(
        request: Request,
        exc: BillingServiceException
    ) -> JSONResponse:
        """Handle custom Subscription Billing exceptions."""
        if is_client_error(exc):
            logger.info(f"{request.method} {request.url.path} rejected: {exc.message}")
        else:
            logger.error(f"{request.method} {request.url.path} failed: {exc.error_code} {exc.message}")

        return _error_response(exc, request)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Render routing errors (unknown path, wrong method) in the same envelope."""
        code = "NOT_FOUND" if exc.status_code == 404 else "HTTP_ERROR"
        response = _error_response(
            BillingServiceException(str(exc.detail), status_code=exc.status_code, error_code=code),
            request,
        )
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return _error_response(ValidationError("invalid request"), request)

    return app


# Create the FastAPI application
app = create_application()


def main():
    """
    Main function for running the application.

    Used when running with python -m app.main or as a script entry point.
    """
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.HTTP_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
