# 📄 File: app/modules/subscriptions/presentation/api/v1/__init__.py
# 🧭 Purpose (Layman Explanation):
# Version 1 of the subscription web endpoints.
# 🧪 Purpose (Technical Summary):
# Exports the v1 subscriptions router for inclusion by app.api.v1.router.

from .subscriptions import subscriptions_router

__all__ = ["subscriptions_router"]
