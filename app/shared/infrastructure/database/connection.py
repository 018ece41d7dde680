# 📄 File: app/shared/infrastructure/database/connection.py
#
# 🧭 Purpose (Layman Explanation):
# Manages the connection to our PostgreSQL database, making sure the service can reach its
# data storage at startup (trying a few times if the database is slow to come up) and
# sharing a limited number of connections between all requests.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy engine management with connection pooling, startup
# connectivity verification with bounded retries and fixed incremental backoff,
# health checks and schema bootstrap.
#
# 🔗 Dependencies:
# - sqlalchemy (async engine)
# - app/shared/config/settings.py (database configuration)
# - asyncpg (PostgreSQL async driver)
#
# 🔄 Connected Modules / Calls From:
# - app/shared/infrastructure/database/session.py (session management)
# - app/main.py (lifespan startup/shutdown)
# - app/api/health.py (readiness probe)

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Awaitable, Callable, Dict, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.shared.config.settings import Settings, get_settings
from app.shared.core.exceptions import ConfigurationError
from app.shared.infrastructure.database.base import Base

logger = logging.getLogger(__name__)


class DatabaseConnectionManager:
    """
    Manages database connections with connection pooling,
    health monitoring, and startup retry logic.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ):
        self._settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._health_check_query = text("SELECT 1")
        self._sleep = sleep

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    async def initialize(self) -> None:
        """
        Create the engine and verify connectivity.

        Tries ``DB_CONNECT_ATTEMPTS`` times; attempt *n* that fails waits
        ``n * DB_CONNECT_BACKOFF_SECONDS`` before the next one.

        Raises:
            ConfigurationError: If the database stays unreachable
        """
        if self._engine is not None:
            logger.warning("Database engine already initialized")
            return

        attempts = self.settings.DB_CONNECT_ATTEMPTS
        backoff = self.settings.DB_CONNECT_BACKOFF_SECONDS

        logger.info("Initializing database connection pool...")
        engine = create_async_engine(
            self.settings.database_url,
            **self.settings.get_engine_config()
        )

        last_error: Optional[Exception] = None
        for attempt in range(1, attempts + 1):
            try:
                async with engine.connect() as conn:
                    await conn.execute(self._health_check_query)
                self._engine = engine
                logger.info(
                    f"Database connection pool initialized (attempt {attempt}/{attempts})"
                )
                return
            except Exception as e:
                last_error = e
                logger.warning(
                    f"Database connection failed (attempt {attempt}/{attempts}): {e}"
                )
                if attempt < attempts:
                    await self._sleep(attempt * backoff)

        await engine.dispose()
        logger.error("Database unreachable after all connection attempts")
        raise ConfigurationError(
            f"connect to database: {last_error}",
            component="database",
            details={"attempts": attempts},
        ) from last_error

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform database health check and return structured status.
        """
        timestamp = datetime.now(timezone.utc).isoformat()
        if self._engine is None:
            return {
                "status": "unhealthy",
                "error": "Database engine not initialized",
                "timestamp": timestamp,
            }

        try:
            async with self._engine.connect() as conn:
                await conn.execute(self._health_check_query)
        except Exception as e:
            logger.warning(f"Database health check failed: {e}")
            return {
                "status": "unhealthy",
                "error": type(e).__name__,
                "timestamp": timestamp,
            }

        return {"status": "healthy", "timestamp": timestamp}

    async def create_schema(self) -> None:
        """Create all tables known to the ORM metadata (idempotent)."""
        if self._engine is None:
            raise RuntimeError("Database engine not initialized")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database schema ensured")

    async def close(self) -> None:
        """Close database engine and all connections."""
        if self._engine is None:
            logger.warning("Database engine not initialized, nothing to close")
            return

        logger.info("Closing database connection pool...")
        await self._engine.dispose()
        self._engine = None
        logger.info("Database connection pool closed successfully")

    @property
    def engine(self) -> Optional[AsyncEngine]:
        """Get the SQLAlchemy async engine."""
        return self._engine

    @property
    def is_initialized(self) -> bool:
        """Check if database engine is initialized."""
        return self._engine is not None


# Global database connection manager instance
db_manager = DatabaseConnectionManager()


async def initialize_database() -> None:
    """Initialize the global database connection manager."""
    await db_manager.initialize()
    if db_manager.settings.DB_AUTO_CREATE_SCHEMA:
        await db_manager.create_schema()


async def close_database() -> None:
    """Close the global database connection manager."""
    await db_manager.close()


def get_database_engine() -> AsyncEngine:
    """
    Get the database engine instance.

    Raises:
        RuntimeError: If database is not initialized
    """
    if not db_manager.is_initialized:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")

    return db_manager.engine


async def database_health_check() -> Dict[str, Any]:
    """Perform database health check on the global manager."""
    return await db_manager.health_check()
