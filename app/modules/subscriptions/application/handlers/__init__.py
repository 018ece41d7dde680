# 📄 File: app/modules/subscriptions/application/handlers/__init__.py
# 🧭 Purpose (Layman Explanation):
# Gathers the "action processors" that carry out subscription requests.
# 🧪 Purpose (Technical Summary):
# Handlers package initialization for the subscriptions module.

"""
Subscription Handlers

Command Handlers:
- SubscriptionCommandHandler: create, full-replace update, delete

Query Handlers:
- SubscriptionQueryHandler: get, list, monthly summary
"""

from .command_handlers import SubscriptionCommandHandler
from .query_handlers import SubscriptionQueryHandler

__all__ = ["SubscriptionCommandHandler", "SubscriptionQueryHandler"]
