# 📄 File: app/modules/subscriptions/application/mappers.py
# 🧭 Purpose (Layman Explanation):
# Checks what callers send us before anything touches the database (rejecting unknown fields,
# missing names, negative amounts or badly written months) and turns stored subscriptions
# back into the JSON shape callers expect.
# 🧪 Purpose (Technical Summary):
# Request/response mapping layer: explicit allow-list schema check, ordered field validation with
# caller-facing messages, normalization (trim, upper-case currency, first-of-month period) and
# rendering of domain records and monthly summaries.
# 🔗 Dependencies:
# pydantic (strict type check of the request body), application.dto, app.modules.subscriptions.domain,
# app.shared.core.exceptions
# 🔄 Connected Modules / Calls From:
# presentation.api.v1.subscriptions (routes), command and query handlers

import logging
from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import ValidationError as PydanticValidationError

from app.shared.core.exceptions import ValidationError
from app.modules.subscriptions.domain.billing_period import InvalidMonthError, format_month, parse_month
from app.modules.subscriptions.domain.models.subscription import MonthlySummary, Subscription
from app.modules.subscriptions.application.dto.subscription_dto import (
    MonthlySummaryResponse,
    SubscriptionRequest,
    SubscriptionResponse,
)

logger = logging.getLogger(__name__)

# Keys a create/update body may carry
REQUEST_FIELDS = frozenset({"user_id", "plan", "amount_cents", "currency", "billing_period"})

INVALID_BODY_MESSAGE = "invalid request body"


def decode_request_body(payload: Any) -> SubscriptionRequest:
    """
    Check a decoded JSON body against the request schema.

    Only an object whose keys are all in ``REQUEST_FIELDS`` and whose values
    have the right JSON types is accepted. Missing keys take their zero value
    and are reported by ``build_subscription_from_request``.

    Raises:
        ValidationError: "invalid request body"
    """
    if not isinstance(payload, dict):
        raise ValidationError(INVALID_BODY_MESSAGE)

    unknown = set(payload) - REQUEST_FIELDS
    if unknown:
        logger.debug(f"Rejecting request body with unknown fields: {sorted(unknown)}")
        raise ValidationError(INVALID_BODY_MESSAGE, details={"unknown_fields": sorted(unknown)})

    try:
        return SubscriptionRequest.model_validate(payload)
    except PydanticValidationError as e:
        logger.debug(f"Rejecting request body with mistyped fields: {e.error_count()} error(s)")
        raise ValidationError(INVALID_BODY_MESSAGE) from e


def build_subscription_from_request(
    payload: Any,
    subscription_id: Optional[UUID] = None,
) -> Subscription:
    """
    Build a domain record from an untrusted request body.

    Rules are checked in a fixed order and the first failure wins:
    user_id, plan, amount_cents, currency, billing_period.

    Args:
        payload: Decoded JSON body
        subscription_id: Target id for full-replace updates

    Returns:
        Subscription: Normalized record; timestamps left unset

    Raises:
        ValidationError: With the caller-facing message of the failed rule
    """
    request = decode_request_body(payload)

    user_id = (request.user_id or "").strip()
    if not user_id:
        raise ValidationError("user_id is required", field="user_id")

    plan = (request.plan or "").strip()
    if not plan:
        raise ValidationError("plan is required", field="plan")

    amount_cents = request.amount_cents or 0
    if amount_cents < 0:
        raise ValidationError("amount_cents must be non-negative", field="amount_cents")

    currency = (request.currency or "").strip()
    if not currency:
        raise ValidationError("currency is required", field="currency")

    try:
        billing_period = parse_month(request.billing_period or "")
    except InvalidMonthError:
        raise ValidationError(
            "billing_period must be in MM-YYYY or YYYY-MM format", field="billing_period"
        )

    return Subscription(
        id=subscription_id,
        user_id=user_id,
        plan=plan,
        amount_cents=amount_cents,
        currency=currency.upper(),
        billing_period=billing_period,
    )


def parse_subscription_id(raw: str) -> UUID:
    """Parse a path identifier; anything that is not a UUID is a client error."""
    try:
        return UUID(raw.strip())
    except (AttributeError, ValueError):
        raise ValidationError("invalid subscription id", field="id")


def parse_summary_month(raw: Optional[str]) -> datetime:
    """
    Parse the summary ``month`` query parameter.

    An absent or blank value and a malformed value are reported separately.
    """
    if raw is None or not raw.strip():
        raise ValidationError("month query parameter is required", field="month")
    try:
        return parse_month(raw)
    except InvalidMonthError:
        raise ValidationError("invalid month format", field="month")


def render_subscription(subscription: Subscription) -> SubscriptionResponse:
    """Render a domain record; billing_period goes out as YYYY-MM."""
    return SubscriptionResponse(
        id=subscription.id,
        user_id=subscription.user_id,
        plan=subscription.plan,
        amount_cents=subscription.amount_cents,
        currency=subscription.currency,
        billing_period=format_month(subscription.billing_period),
        created_at=subscription.created_at,
        updated_at=subscription.updated_at,
    )


def render_monthly_summary(summary: MonthlySummary) -> MonthlySummaryResponse:
    return MonthlySummaryResponse(
        month=format_month(summary.month),
        total_amount_cents=summary.total_amount_cents,
    )
