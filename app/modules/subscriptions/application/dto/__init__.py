# 📄 File: app/modules/subscriptions/application/dto/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the request and response shapes used by the subscription endpoints.
# 🧪 Purpose (Technical Summary):
# Package initialization exporting subscription DTOs.

from .subscription_dto import MonthlySummaryResponse, SubscriptionRequest, SubscriptionResponse

__all__ = ["SubscriptionRequest", "SubscriptionResponse", "MonthlySummaryResponse"]
