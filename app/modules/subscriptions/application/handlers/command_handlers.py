# 📄 File: app/modules/subscriptions/application/handlers/command_handlers.py
# 🧭 Purpose (Layman Explanation):
# Carries out requests that change subscriptions (create, replace, delete): the caller's input is
# checked first, and only valid requests ever reach the database.
#
# 🧪 Purpose (Technical Summary):
# Write-side application handler orchestrating the request mapper and the SubscriptionRepository,
# returning rendered response DTOs and letting typed errors (ValidationError, NotFound, StorageError)
# propagate to the API exception handlers.
#
# 🔗 Dependencies:
# - app.modules.subscriptions.application.mappers
# - app.modules.subscriptions.domain.repositories.subscription_repository (interface)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.subscriptions.presentation.api.v1.subscriptions (POST/PUT/DELETE endpoints)
# - app.modules.subscriptions.presentation.dependencies (handler wiring)

import logging
from typing import Any

from app.modules.subscriptions.application.dto.subscription_dto import SubscriptionResponse
from app.modules.subscriptions.application.handlers.base import guard_repository_call
from app.modules.subscriptions.application.mappers import (
    build_subscription_from_request,
    parse_subscription_id,
    render_subscription,
)
from app.modules.subscriptions.domain.repositories.subscription_repository import SubscriptionRepository

logger = logging.getLogger(__name__)


class SubscriptionCommandHandler:
    """
    Handles subscription create, full-replace update and delete commands.
    """

    def __init__(self, subscription_repository: SubscriptionRepository):
        self._subscription_repository = subscription_repository

    async def create(self, payload: Any) -> SubscriptionResponse:
        """
        Validate a request body and persist it as a new subscription.

        Raises:
            ValidationError: Body rejected before any store interaction
            StorageError: Insert failed
        """
        subscription = build_subscription_from_request(payload)
        await guard_repository_call(
            self._subscription_repository.create(subscription),
            "failed to create subscription",
            "create",
        )
        logger.info(
            f"Created subscription {subscription.id} for user {subscription.user_id} "
            f"({subscription.plan}, {subscription.amount_cents} {subscription.currency})"
        )
        return render_subscription(subscription)

    async def update(self, raw_id: str, payload: Any) -> SubscriptionResponse:
        """
        Replace the five mutable fields of an existing subscription.

        The response carries the created_at/updated_at returned by the
        update statement itself.

        Raises:
            ValidationError: Bad identifier or body
            SubscriptionNotFoundError: No subscription with that id
            StorageError: Update failed
        """
        subscription_id = parse_subscription_id(raw_id)
        subscription = build_subscription_from_request(payload, subscription_id=subscription_id)
        await guard_repository_call(
            self._subscription_repository.update(subscription),
            "failed to update subscription",
            "update",
        )
        logger.info(f"Updated subscription {subscription_id}")
        return render_subscription(subscription)

    async def delete(self, raw_id: str) -> None:
        """
        Hard-delete a subscription.

        Raises:
            ValidationError: Bad identifier
            SubscriptionNotFoundError: No subscription with that id
            StorageError: Delete failed
        """
        subscription_id = parse_subscription_id(raw_id)
        await guard_repository_call(
            self._subscription_repository.delete(subscription_id),
            "failed to delete subscription",
            "delete",
        )
        logger.info(f"Deleted subscription {subscription_id}")
