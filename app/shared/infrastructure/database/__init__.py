"""Database infrastructure: engine, sessions and declarative base."""

from .base import Base, gen_random_uuid, utcnow
from .connection import db_manager, initialize_database, close_database, database_health_check
from .session import get_db_session, session_manager, initialize_sessions

__all__ = [
    "Base",
    "utcnow",
    "gen_random_uuid",
    "db_manager",
    "initialize_database",
    "close_database",
    "database_health_check",
    "get_db_session",
    "session_manager",
    "initialize_sessions",
]
