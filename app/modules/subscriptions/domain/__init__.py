# 📄 File: app/modules/subscriptions/domain/__init__.py
# 🧭 Purpose (Layman Explanation):
# The core rules for subscription records, independent of the database or the web.
# 🧪 Purpose (Technical Summary):
# Domain layer: Subscription entity, MonthlySummary value, billing-period codec and repository interface.

"""
Subscriptions Domain Layer

Domain Models:
- Subscription: One billing record
- MonthlySummary: Total billed for a month

Repository Interfaces:
- SubscriptionRepository: Persistence contract

Business Rules Enforced:
- amount_cents is never negative
- currency is upper-case and non-empty
- billing_period is the first day of a month at 00:00 UTC
- updated_at is never earlier than created_at
"""
