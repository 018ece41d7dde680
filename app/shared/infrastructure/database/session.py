# 📄 File: app/shared/infrastructure/database/session.py
#
# 🧭 Purpose (Layman Explanation):
# Manages database sessions (like conversations with the database) ensuring each request
# gets its own clean session that is rolled back if anything goes wrong.
#
# 🧪 Purpose (Technical Summary):
# Implements async SQLAlchemy session management with dependency injection for FastAPI,
# rollback on failure and session lifecycle management for repository operations.
#
# 🔗 Dependencies:
# - sqlalchemy.ext.asyncio (AsyncSession, async_sessionmaker)
# - app/shared/infrastructure/database/connection.py (database engine)
#
# 🔄 Connected Modules / Calls From:
# - app/modules/subscriptions/presentation/dependencies.py (repository wiring)
# - app/main.py (lifespan initialization)

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.shared.infrastructure.database.connection import get_database_engine

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """
    Manages database sessions with rollback on failure and automatic cleanup.
    """

    def __init__(self):
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    def initialize(self, engine: Optional[AsyncEngine] = None) -> None:
        """Initialize the session factory with database engine."""
        self._session_factory = async_sessionmaker(
            engine or get_database_engine(),
            class_=AsyncSession,
            expire_on_commit=False,  # Keep objects accessible after commit
            autoflush=False,
        )
        logger.info("Database session factory initialized successfully")

    @asynccontextmanager
    async def get_session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Get an async database session.

        Repository write operations commit their own statement; anything
        left uncommitted when an exception escapes is rolled back.

        Yields:
            AsyncSession: Database session

        Raises:
            RuntimeError: If the manager was not initialized
        """
        if self._session_factory is None:
            raise RuntimeError("Session manager not initialized")

        session: AsyncSession = self._session_factory()
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    def is_initialized(self) -> bool:
        """Check if session manager is initialized."""
        return self._session_factory is not None


# Global session manager instance
session_manager = DatabaseSessionManager()


def initialize_sessions(engine: Optional[AsyncEngine] = None) -> None:
    """Initialize the global database session manager."""
    session_manager.initialize(engine)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides database sessions.

    Usage:
        @router.get("/subscriptions")
        async def list_subscriptions(
            db: AsyncSession = Depends(get_db_session)
        ):
            ...

    Yields:
        AsyncSession: Database session
    """
    async with session_manager.get_session() as session:
        yield session
