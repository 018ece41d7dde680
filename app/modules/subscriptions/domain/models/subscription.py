# 📄 File: app/modules/subscriptions/domain/models/subscription.py
# 🧭 Purpose (Layman Explanation):
# Describes one subscription record: who is billed, for which plan, how much (in cents),
# in which currency and for which month, plus when the record was created and last changed.
# 🧪 Purpose (Technical Summary):
# Pydantic domain model for the Subscription entity with field-level invariants
# (non-negative amount, upper-case currency, first-of-month billing period, timestamp ordering).
# 🔗 Dependencies:
# pydantic, datetime, uuid, app.modules.subscriptions.domain.billing_period
# 🔄 Connected Modules / Calls From:
# Repository implementation (row mapping), mappers (request/response), command and query handlers

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.modules.subscriptions.domain.billing_period import to_calendar_month


class Subscription(BaseModel):
    """
    Subscription domain model.

    Fields:
    - id (UUID): Assigned at create time, never changes
    - user_id (str): Subscriber reference, stored verbatim after trimming
    - plan (str): Plan name
    - amount_cents (int): Charge in minor units, never negative
    - currency (str): Currency code, upper-case
    - billing_period (datetime): First day of the billed month, 00:00 UTC
    - created_at / updated_at (datetime): Assigned by the store
    """

    model_config = ConfigDict(validate_assignment=True)

    id: Optional[UUID] = None
    user_id: str = Field(..., min_length=1)
    plan: str = Field(..., min_length=1)
    amount_cents: int = Field(..., ge=0)
    currency: str = Field(..., min_length=1)
    billing_period: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        """Currency codes are kept upper-case"""
        v = v.strip().upper()
        if not v:
            raise ValueError("currency must not be blank")
        return v

    @field_validator("billing_period", mode="before")
    @classmethod
    def normalize_billing_period(cls, v):
        """Billing periods always point at the first day of a month"""
        if v is None:
            return v
        return to_calendar_month(v)

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Subscription":
        if self.created_at and self.updated_at and self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class MonthlySummary(BaseModel):
    """Total charged for one billing month."""

    month: datetime
    total_amount_cents: int = Field(0, ge=0)
