# 📄 File: app/modules/subscriptions/application/dto/subscription_dto.py
# 🧭 Purpose (Layman Explanation):
# Defines the exact shape of the data callers send to create or change a subscription,
# and the shape of what we send back (a subscription or a monthly total).
#
# 🧪 Purpose (Technical Summary):
# Subscription data transfer objects: a strictly typed request body (no coercion, unknown keys
# forbidden) and the response shapes rendered by the mapping layer.
#
# 🔗 Dependencies:
# - pydantic for DTO validation and serialization
#
# 🔄 Connected Modules / Calls From:
# - app.modules.subscriptions.application.mappers (request decoding, response rendering)
# - app.modules.subscriptions.presentation.api.v1.subscriptions (OpenAPI response models)

"""
Subscription Data Transfer Objects (DTOs)

DTO Classes:
- SubscriptionRequest: Create/update body, full replace of the five mutable fields
- SubscriptionResponse: One rendered subscription
- MonthlySummaryResponse: Total billed for one month
"""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# amount_cents is stored as a signed 64-bit integer
Int64 = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]


class SubscriptionRequest(BaseModel):
    """
    Request body for subscription create and update.

    Types are checked strictly (no string-to-number coercion). A key that
    is absent or null takes its zero value so the mapper can report it
    with a field-specific message.
    """

    model_config = ConfigDict(extra="forbid", strict=True)

    user_id: Optional[StrictStr] = ""
    plan: Optional[StrictStr] = ""
    amount_cents: Optional[Int64] = 0
    currency: Optional[StrictStr] = ""
    billing_period: Optional[StrictStr] = ""


class SubscriptionResponse(BaseModel):
    """Rendered subscription; billing_period is always YYYY-MM."""

    id: Optional[UUID] = Field(None, description="Unique subscription identifier")
    user_id: str = Field(..., description="Subscriber reference")
    plan: str = Field(..., description="Plan name")
    amount_cents: int = Field(..., description="Charge in minor currency units")
    currency: str = Field(..., description="Upper-case currency code")
    billing_period: str = Field(..., description="Billed month as YYYY-MM", examples=["2024-03"])
    created_at: Optional[datetime] = Field(None, description="Record creation time")
    updated_at: Optional[datetime] = Field(None, description="Last write time")


class MonthlySummaryResponse(BaseModel):
    """Aggregate amount billed for one month."""

    month: str = Field(..., description="Month as YYYY-MM", examples=["2024-03"])
    total_amount_cents: int = Field(..., description="Sum of amount_cents for the month")
