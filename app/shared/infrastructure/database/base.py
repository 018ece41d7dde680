# 📄 File: app/shared/infrastructure/database/base.py
#
# 🧭 Purpose (Layman Explanation):
# The common starting point for every database table in the billing service, plus the
# "current time" the database stamps on records when they are created or changed, and the
# random id it gives each new record.
#
# 🧪 Purpose (Technical Summary):
# Declarative base with a constraint naming convention and dialect-aware ``utcnow()`` and
# ``gen_random_uuid()`` SQL expressions so ids and created_at/updated_at are always
# assigned by the store.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM and compiler extension
#
# 🔄 Connected Modules / Calls From:
# - app.modules.subscriptions.infrastructure.database.models (table definitions)
# - app.modules.subscriptions.infrastructure.database.subscription_repository_impl (UPDATE ... SET updated_at)
# - app.shared.infrastructure.database.connection (schema creation)

from sqlalchemy import DateTime, MetaData, Uuid
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.sql.expression import FunctionElement


# Naming convention for database constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s"
}

metadata = MetaData(naming_convention=convention)


class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Provides common metadata configuration for all database
    models in the Subscription Billing service.
    """
    metadata = metadata


class utcnow(FunctionElement):
    """
    Current timestamp evaluated by the database.

    Within a single statement every occurrence yields the same value, so
    an INSERT stamps identical created_at and updated_at.
    """
    type = DateTime(timezone=True)
    inherit_cache = True


@compiles(utcnow)
def _default_utcnow(element, compiler, **kw):
    return "CURRENT_TIMESTAMP"


@compiles(utcnow, "postgresql")
def _pg_utcnow(element, compiler, **kw):
    return "now()"


@compiles(utcnow, "sqlite")
def _sqlite_utcnow(element, compiler, **kw):
    # CURRENT_TIMESTAMP on SQLite only has second resolution
    return "strftime('%Y-%m-%d %H:%M:%f', 'now')"


class gen_random_uuid(FunctionElement):
    """Random UUID generated by the database, used as a primary key server default."""
    type = Uuid(as_uuid=True)
    inherit_cache = True


@compiles(gen_random_uuid)
def _default_gen_random_uuid(element, compiler, **kw):
    return "gen_random_uuid()"


@compiles(gen_random_uuid, "sqlite")
def _sqlite_gen_random_uuid(element, compiler, **kw):
    # Same 32-char hex form the Uuid type stores on SQLite
    return "lower(hex(randomblob(16)))"
