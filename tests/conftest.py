"""Shared fixtures for the subscription billing test suite."""

import os

# Settings are cached on first use; configure the environment before any app import.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import create_application  # noqa: E402
from app.shared.infrastructure.database.base import Base  # noqa: E402
from app.shared.infrastructure.database.session import get_db_session  # noqa: E402
from app.modules.subscriptions.infrastructure.database.subscription_repository_impl import (  # noqa: E402
    SubscriptionRepositoryImpl,
)


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with the ORM schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine):
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def async_db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def repository(async_db_session: AsyncSession) -> SubscriptionRepositoryImpl:
    """Subscription repository backed by the in-memory DB."""
    return SubscriptionRepositoryImpl(async_db_session)


@pytest.fixture
def app(session_factory):
    """Application with one fresh session per request on the in-memory DB."""
    application = create_application()

    async def override_db_session():
        async with session_factory() as session:
            yield session

    application.dependency_overrides[get_db_session] = override_db_session
    return application


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest.fixture
def subscription_payload():
    return {
        "user_id": "user-123",
        "plan": "pro",
        "amount_cents": 1999,
        "currency": "usd",
        "billing_period": "03-2024",
    }
