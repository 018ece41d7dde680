# 📄 File: app/modules/subscriptions/domain/repositories/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the storage contracts for subscriptions.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the SubscriptionRepository interface.

from .subscription_repository import SubscriptionRepository

__all__ = ["SubscriptionRepository"]
