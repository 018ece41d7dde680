# 📄 File: app/modules/subscriptions/infrastructure/database/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes the database table for subscriptions and the code that reads and writes it.
#
# 🧪 Purpose (Technical Summary):
# Database layer organization for the subscriptions module. Importing this package registers
# SubscriptionModel on the shared declarative metadata.
#
# 🔗 Dependencies:
# - SQLAlchemy ORM models and sessions
# - app.modules.subscriptions.domain.repositories (interface definitions)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.subscriptions.presentation.dependencies (repository wiring)
# - app.main (schema bootstrap)

from .models import SubscriptionModel
from .subscription_repository_impl import SubscriptionRepositoryImpl

__all__ = ["SubscriptionModel", "SubscriptionRepositoryImpl"]
