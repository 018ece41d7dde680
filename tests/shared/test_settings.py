"""
Settings loading and validation tests.
"""

import pytest
from pydantic import ValidationError

from app.shared.config.settings import Settings

pytestmark = pytest.mark.unit


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("postgres://u:p@db:5432/billing", "postgresql+asyncpg://u:p@db:5432/billing"),
        ("postgresql://u:p@db:5432/billing", "postgresql+asyncpg://u:p@db:5432/billing"),
        ("postgresql+asyncpg://u:p@db/billing", "postgresql+asyncpg://u:p@db/billing"),
        ("sqlite+aiosqlite:///:memory:", "sqlite+aiosqlite:///:memory:"),
    ],
)
def test_database_url_uses_async_driver(raw, expected):
    assert _settings(DATABASE_URL=raw).database_url == expected


def test_database_url_is_required(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)

    with pytest.raises(ValidationError):
        _settings()


def test_blank_database_url_is_rejected():
    with pytest.raises(ValidationError):
        _settings(DATABASE_URL="   ")


def test_defaults(monkeypatch):
    monkeypatch.delenv("HTTP_PORT", raising=False)
    monkeypatch.delenv("ENVIRONMENT", raising=False)

    settings = _settings(DATABASE_URL="postgres://db/billing")

    assert settings.HTTP_PORT == 8080
    assert settings.ENVIRONMENT == "development"
    assert settings.DB_CONNECT_ATTEMPTS == 5
    assert settings.DB_AUTO_CREATE_SCHEMA is False


def test_http_port_from_environment(monkeypatch):
    monkeypatch.setenv("HTTP_PORT", "9090")

    assert _settings(DATABASE_URL="postgres://db/billing").HTTP_PORT == 9090


@pytest.mark.parametrize(
    "field, value",
    [
        ("ENVIRONMENT", "qa"),
        ("LOG_LEVEL", "LOUD"),
        ("LOG_FORMAT", "xml"),
        ("DB_CONNECT_ATTEMPTS", 0),
    ],
)
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        _settings(DATABASE_URL="postgres://db/billing", **{field: value})


def test_values_are_normalized():
    settings = _settings(
        DATABASE_URL=" postgres://db/billing ",
        ENVIRONMENT="Production",
        LOG_LEVEL="debug",
        LOG_FORMAT="TEXT",
    )

    assert settings.DATABASE_URL == "postgres://db/billing"
    assert settings.is_production
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_FORMAT == "text"


def test_engine_config_for_postgres():
    config = _settings(DATABASE_URL="postgres://db/billing", DB_POOL_SIZE=3).get_engine_config()

    assert config["pool_pre_ping"] is True
    assert config["pool_size"] == 3
    assert config["connect_args"]["server_settings"]["timezone"] == "UTC"


def test_engine_config_for_sqlite():
    settings = _settings(DATABASE_URL="sqlite+aiosqlite:///:memory:")

    assert settings.is_sqlite
    assert settings.get_engine_config() == {"echo": False}
