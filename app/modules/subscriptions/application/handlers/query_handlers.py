# 📄 File: app/modules/subscriptions/application/handlers/query_handlers.py
# 🧭 Purpose (Layman Explanation):
# Answers questions about subscriptions: show one, show all of them (newest first),
# or tell how much was billed in a given month.
#
# 🧪 Purpose (Technical Summary):
# Read-side application handler: parses identifiers and the summary month, queries the
# SubscriptionRepository and renders response DTOs.
#
# 🔗 Dependencies:
# - app.modules.subscriptions.application.mappers
# - app.modules.subscriptions.domain.repositories.subscription_repository (interface)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.subscriptions.presentation.api.v1.subscriptions (GET endpoints)

import logging
from typing import List, Optional

from app.modules.subscriptions.application.dto.subscription_dto import (
    MonthlySummaryResponse,
    SubscriptionResponse,
)
from app.modules.subscriptions.application.mappers import (
    parse_subscription_id,
    parse_summary_month,
    render_monthly_summary,
    render_subscription,
)
from app.modules.subscriptions.application.handlers.base import guard_repository_call
from app.modules.subscriptions.domain.models.subscription import MonthlySummary
from app.modules.subscriptions.domain.repositories.subscription_repository import SubscriptionRepository

logger = logging.getLogger(__name__)


class SubscriptionQueryHandler:
    """Handles single lookups, listing and the monthly summary."""

    def __init__(self, subscription_repository: SubscriptionRepository):
        self._subscription_repository = subscription_repository

    async def get(self, raw_id: str) -> SubscriptionResponse:
        subscription_id = parse_subscription_id(raw_id)
        subscription = await guard_repository_call(
            self._subscription_repository.get_by_id(subscription_id),
            "failed to fetch subscription",
            "get",
        )
        return render_subscription(subscription)

    async def list_all(self) -> List[SubscriptionResponse]:
        subscriptions = await guard_repository_call(
            self._subscription_repository.list_all(),
            "failed to list subscriptions",
            "list",
        )
        logger.debug(f"Listing {len(subscriptions)} subscriptions")
        return [render_subscription(subscription) for subscription in subscriptions]

    async def monthly_summary(self, raw_month: Optional[str]) -> MonthlySummaryResponse:
        """
        Total amount billed for a month.

        Raises:
            ValidationError: Month missing ("month query parameter is required")
                or malformed ("invalid month format")
            StorageError: Aggregate query failed
        """
        month = parse_summary_month(raw_month)
        total = await guard_repository_call(
            self._subscription_repository.monthly_summary(month),
            "failed to fetch summary",
            "summary",
        )
        return render_monthly_summary(MonthlySummary(month=month, total_amount_cents=total))
