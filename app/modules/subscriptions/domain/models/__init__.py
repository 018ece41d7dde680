# 📄 File: app/modules/subscriptions/domain/models/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the subscription data models in one place.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting the Subscription entity and MonthlySummary value.

from .subscription import MonthlySummary, Subscription

__all__ = ["Subscription", "MonthlySummary"]
