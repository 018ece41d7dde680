"""
Database connection manager tests: startup retries, health and shutdown.
"""

import pytest

from app.shared.config.settings import Settings
from app.shared.core.exceptions import ConfigurationError
from app.shared.infrastructure.database.connection import DatabaseConnectionManager

pytestmark = pytest.mark.integration


class RecordingSleep:
    def __init__(self):
        self.delays = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


def _settings(url: str, **overrides) -> Settings:
    return Settings(_env_file=None, DATABASE_URL=url, **overrides)


@pytest.mark.asyncio
async def test_initialize_retries_with_incremental_backoff():
    sleep = RecordingSleep()
    manager = DatabaseConnectionManager(
        settings=_settings(
            "sqlite+aiosqlite:////nonexistent-dir/billing.db",
            DB_CONNECT_ATTEMPTS=3,
            DB_CONNECT_BACKOFF_SECONDS=0.5,
        ),
        sleep=sleep,
    )

    with pytest.raises(ConfigurationError) as exc_info:
        await manager.initialize()

    assert sleep.delays == [0.5, 1.0]
    assert exc_info.value.message.startswith("connect to database:")
    assert exc_info.value.details["attempts"] == 3
    assert not manager.is_initialized


@pytest.mark.asyncio
async def test_initialize_single_attempt_does_not_sleep():
    sleep = RecordingSleep()
    manager = DatabaseConnectionManager(
        settings=_settings("sqlite+aiosqlite:////nonexistent-dir/billing.db", DB_CONNECT_ATTEMPTS=1),
        sleep=sleep,
    )

    with pytest.raises(ConfigurationError):
        await manager.initialize()

    assert sleep.delays == []


@pytest.mark.asyncio
async def test_lifecycle(tmp_path):
    sleep = RecordingSleep()
    manager = DatabaseConnectionManager(
        settings=_settings(f"sqlite+aiosqlite:///{tmp_path / 'billing.db'}"),
        sleep=sleep,
    )

    await manager.initialize()
    assert manager.is_initialized
    assert sleep.delays == []

    await manager.create_schema()
    await manager.create_schema()

    health = await manager.health_check()
    assert health["status"] == "healthy"
    assert "error" not in health

    await manager.close()
    assert not manager.is_initialized
    assert manager.engine is None


@pytest.mark.asyncio
async def test_health_check_before_initialize():
    manager = DatabaseConnectionManager(settings=_settings("sqlite+aiosqlite:///:memory:"))

    health = await manager.health_check()

    assert health["status"] == "unhealthy"
    assert health["timestamp"]


@pytest.mark.asyncio
async def test_create_schema_requires_engine():
    manager = DatabaseConnectionManager(settings=_settings("sqlite+aiosqlite:///:memory:"))

    with pytest.raises(RuntimeError):
        await manager.create_schema()
