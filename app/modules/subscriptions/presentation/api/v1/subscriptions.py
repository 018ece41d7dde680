# 📄 File: app/modules/subscriptions/presentation/api/v1/subscriptions.py
# 🧭 Purpose (Layman Explanation):
# The web addresses for working with subscriptions: create, look up, list, replace, delete,
# and get a month's billing total.
#
# 🧪 Purpose (Technical Summary):
# FastAPI subscription endpoints. Bodies are read raw and handed to the mapping layer so the
# allow-list check and field messages are owned by the application layer; typed errors are
# rendered by the exception handlers registered in app.main.
#
# 🔗 Dependencies:
# - FastAPI router, Request, Query, status codes
# - app.modules.subscriptions.application.handlers (command and query handlers)
# - app.modules.subscriptions.application.dto (response models)
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (router inclusion)

"""
Subscriptions API Endpoints

Endpoints:
- GET /subscriptions: List subscriptions, newest first
- POST /subscriptions: Create a subscription (201)
- GET /subscriptions/summary?month=: Total billed for a month
- GET /subscriptions/{id}: Get one subscription
- PUT /subscriptions/{id}: Replace the five mutable fields
- DELETE /subscriptions/{id}: Delete a subscription (204, empty body)
"""

import json
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from app.shared.core.exceptions import ValidationError
from app.modules.subscriptions.application.dto.subscription_dto import (
    MonthlySummaryResponse,
    SubscriptionResponse,
)
from app.modules.subscriptions.application.handlers.command_handlers import SubscriptionCommandHandler
from app.modules.subscriptions.application.handlers.query_handlers import SubscriptionQueryHandler
from app.modules.subscriptions.application.mappers import INVALID_BODY_MESSAGE
from app.modules.subscriptions.presentation.dependencies import (
    get_subscription_command_handler,
    get_subscription_query_handler,
)

logger = logging.getLogger(__name__)

subscriptions_router = APIRouter()


async def read_json_body(request: Request) -> Any:
    """Decode the raw request body; anything that is not JSON is a bad request."""
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.debug(f"Unparseable request body: {e}")
        raise ValidationError(INVALID_BODY_MESSAGE)


@subscriptions_router.get(
    "",
    response_model=List[SubscriptionResponse],
    summary="List subscriptions",
    description="All subscriptions ordered by creation time, newest first",
)
@subscriptions_router.get("/", response_model=List[SubscriptionResponse], include_in_schema=False)
async def list_subscriptions(
    handler: SubscriptionQueryHandler = Depends(get_subscription_query_handler),
) -> List[SubscriptionResponse]:
    return await handler.list_all()


@subscriptions_router.post(
    "",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create subscription",
    description="Create a subscription; billing_period accepts MM-YYYY or YYYY-MM",
)
@subscriptions_router.post(
    "/",
    response_model=SubscriptionResponse,
    status_code=status.HTTP_201_CREATED,
    include_in_schema=False,
)
async def create_subscription(
    request: Request,
    handler: SubscriptionCommandHandler = Depends(get_subscription_command_handler),
) -> SubscriptionResponse:
    payload = await read_json_body(request)
    return await handler.create(payload)


# Declared before /{subscription_id} so "summary" is not taken for an id
@subscriptions_router.get(
    "/summary",
    response_model=MonthlySummaryResponse,
    summary="Monthly summary",
    description="Sum of amount_cents for subscriptions billed in the given month",
)
async def monthly_summary(
    month: Optional[str] = Query(None, description="Month as YYYY-MM or MM-YYYY"),
    handler: SubscriptionQueryHandler = Depends(get_subscription_query_handler),
) -> MonthlySummaryResponse:
    return await handler.monthly_summary(month)


@subscriptions_router.get(
    "/{subscription_id}",
    response_model=SubscriptionResponse,
    summary="Get subscription",
)
@subscriptions_router.get("/{subscription_id}/", response_model=SubscriptionResponse, include_in_schema=False)
async def get_subscription(
    subscription_id: str,
    handler: SubscriptionQueryHandler = Depends(get_subscription_query_handler),
) -> SubscriptionResponse:
    return await handler.get(subscription_id)


@subscriptions_router.put(
    "/{subscription_id}",
    response_model=SubscriptionResponse,
    summary="Replace subscription",
    description="Full replace of user_id, plan, amount_cents, currency and billing_period",
)
@subscriptions_router.put("/{subscription_id}/", response_model=SubscriptionResponse, include_in_schema=False)
async def update_subscription(
    subscription_id: str,
    request: Request,
    handler: SubscriptionCommandHandler = Depends(get_subscription_command_handler),
) -> SubscriptionResponse:
    payload = await read_json_body(request)
    return await handler.update(subscription_id, payload)


@subscriptions_router.delete(
    "/{subscription_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete subscription",
)
@subscriptions_router.delete(
    "/{subscription_id}/",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    include_in_schema=False,
)
async def delete_subscription(
    subscription_id: str,
    handler: SubscriptionCommandHandler = Depends(get_subscription_command_handler),
) -> Response:
    await handler.delete(subscription_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
