# 📄 File: app/modules/subscriptions/presentation/dependencies.py
# 🧭 Purpose (Layman Explanation):
# Hands every request its own database conversation and the helpers that use it,
# so requests never share state with each other.
# 🧪 Purpose (Technical Summary):
# FastAPI dependency providers wiring a per-request AsyncSession into the SQLAlchemy
# subscription repository and the command/query handlers.
# 🔗 Dependencies:
# FastAPI Depends, SQLAlchemy AsyncSession, app.shared.infrastructure.database.session
# 🔄 Connected Modules / Calls From:
# app.modules.subscriptions.presentation.api.v1.subscriptions, tests (dependency overrides)

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.infrastructure.database.session import get_db_session
from app.modules.subscriptions.application.handlers.command_handlers import SubscriptionCommandHandler
from app.modules.subscriptions.application.handlers.query_handlers import SubscriptionQueryHandler
from app.modules.subscriptions.domain.repositories.subscription_repository import SubscriptionRepository
from app.modules.subscriptions.infrastructure.database.subscription_repository_impl import (
    SubscriptionRepositoryImpl,
)


def get_subscription_repository(
    session: AsyncSession = Depends(get_db_session),
) -> SubscriptionRepository:
    return SubscriptionRepositoryImpl(session)


def get_subscription_command_handler(
    subscription_repository: SubscriptionRepository = Depends(get_subscription_repository),
) -> SubscriptionCommandHandler:
    return SubscriptionCommandHandler(subscription_repository)


def get_subscription_query_handler(
    subscription_repository: SubscriptionRepository = Depends(get_subscription_repository),
) -> SubscriptionQueryHandler:
    return SubscriptionQueryHandler(subscription_repository)
