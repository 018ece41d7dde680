# 📄 File: app/modules/subscriptions/domain/repositories/subscription_repository.py
# 🧭 Purpose (Layman Explanation):
# Lists the things the billing service can ask its storage to do with subscriptions:
# save one, look one up, list them all, change one, remove one, and add up a month's charges.
# 🧪 Purpose (Technical Summary):
# Abstract repository interface for subscription persistence; concrete stores raise
# SubscriptionNotFoundError for missing records and StorageError for any other failure.
# 🔗 Dependencies:
# - abc (Abstract Base Classes)
# - UUID and datetime types
# - Subscription domain model
# 🔄 Connected Modules / Calls From:
# - Command and query handlers (application layer)
# - SubscriptionRepositoryImpl (SQLAlchemy implementation)

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List
from uuid import UUID

from app.modules.subscriptions.domain.models.subscription import Subscription


class SubscriptionRepository(ABC):
    """
    Abstract repository interface for subscription data access operations.
    """

    @abstractmethod
    async def create(self, subscription: Subscription) -> Subscription:
        """Persist a new subscription; id and timestamps are assigned onto the record."""
        pass

    @abstractmethod
    async def get_by_id(self, subscription_id: UUID) -> Subscription:
        """Get subscription by ID; raises SubscriptionNotFoundError when absent."""
        pass

    @abstractmethod
    async def list_all(self) -> List[Subscription]:
        """Get every subscription, newest created first."""
        pass

    @abstractmethod
    async def update(self, subscription: Subscription) -> Subscription:
        """
        Replace all user-supplied fields of the subscription matching ``subscription.id``.

        The store-assigned created_at/updated_at are written back onto the record.
        """
        pass

    @abstractmethod
    async def delete(self, subscription_id: UUID) -> None:
        """Delete subscription; raises SubscriptionNotFoundError when absent."""
        pass

    @abstractmethod
    async def monthly_summary(self, month: datetime) -> int:
        """Sum amount_cents across subscriptions billed in the given month (0 if none)."""
        pass
