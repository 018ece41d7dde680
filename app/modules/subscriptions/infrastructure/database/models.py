# 📄 File: app/modules/subscriptions/infrastructure/database/models.py
#
# 🧭 Purpose (Layman Explanation):
# Defines how subscription records are laid out in the database table, including the
# columns the database fills in by itself (the record id and the created/updated times).
#
# 🧪 Purpose (Technical Summary):
# SQLAlchemy ORM model for the ``subscriptions`` table with generated UUID primary key,
# DATE billing period, non-negative amount check and store-maintained timestamps.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM
# - app.shared.infrastructure.database.base (declarative base, utcnow)
#
# 🔄 Connected Modules / Calls From:
# - subscription_repository_impl.py (CRUD and summary statements)
# - app.shared.infrastructure.database.connection (schema creation)

from sqlalchemy import (
    BigInteger,
    CheckConstraint,
    Column,
    Date,
    DateTime,
    Index,
    String,
    Uuid,
)

from app.shared.infrastructure.database.base import Base, gen_random_uuid, utcnow


class SubscriptionModel(Base):
    """
    SQLAlchemy model for subscription billing records.

    ``id``, ``created_at`` and ``updated_at`` are always assigned by the
    store; the application only ever supplies the five mutable fields.
    """
    __tablename__ = "subscriptions"

    id = Column(
        Uuid(as_uuid=True),
        primary_key=True,
        server_default=gen_random_uuid(),
        nullable=False,
        comment="Unique subscription identifier"
    )

    user_id = Column(String(255), nullable=False, comment="Subscriber reference")
    plan = Column(String(100), nullable=False, comment="Plan name")
    amount_cents = Column(BigInteger, nullable=False, comment="Charge in minor currency units")
    currency = Column(String(16), nullable=False, comment="Upper-case currency code")
    billing_period = Column(Date, nullable=False, comment="First day of the billed month")

    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=utcnow(),
        comment="Record creation time"
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=utcnow(),
        comment="Last write time"
    )

    __table_args__ = (
        CheckConstraint("amount_cents >= 0", name="amount_cents_non_negative"),
        Index("ix_subscriptions_billing_period", "billing_period"),
        Index("ix_subscriptions_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<SubscriptionModel(id={self.id}, user_id={self.user_id}, plan={self.plan})>"
