# 📄 File: app/modules/subscriptions/infrastructure/database/subscription_repository_impl.py
# 🧭 Purpose (Layman Explanation):
# Does the actual work of saving, finding, changing and removing subscriptions in the
# PostgreSQL database, and adding up how much was billed for a given month.
# 🧪 Purpose (Technical Summary):
# SQLAlchemy implementation of SubscriptionRepository. Each write is a single statement with a
# RETURNING clause so store-assigned fields come back without a second read; zero matched rows are
# classified as SubscriptionNotFoundError and every other failure as StorageError.
# 🔗 Dependencies:
# SQLAlchemy, app.shared.core.exceptions, app.modules.subscriptions.domain, logging
# 🔄 Connected Modules / Calls From:
# Subscription command/query handlers, presentation.dependencies (per-request wiring)

import logging
from datetime import datetime, timezone
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.core.exceptions import StorageError, SubscriptionNotFoundError
from app.shared.infrastructure.database.base import utcnow
from app.modules.subscriptions.domain.billing_period import to_calendar_month
from app.modules.subscriptions.domain.models.subscription import Subscription
from app.modules.subscriptions.domain.repositories.subscription_repository import SubscriptionRepository
from app.modules.subscriptions.infrastructure.database.models import SubscriptionModel

logger = logging.getLogger(__name__)

# Failures from the driver or pool that are classified as storage errors
STORE_FAILURES = (SQLAlchemyError, TimeoutError, OSError)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class SubscriptionRepositoryImpl(SubscriptionRepository):
    """
    SQLAlchemy implementation of subscription repository.
    Handles all subscription database operations with proper error handling.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: Async SQLAlchemy session
        """
        self.session = session

    def _to_domain(self, row) -> Subscription:
        return Subscription(
            id=row.id,
            user_id=row.user_id,
            plan=row.plan,
            amount_cents=row.amount_cents,
            currency=row.currency,
            billing_period=to_calendar_month(row.billing_period),
            created_at=_as_utc(row.created_at),
            updated_at=_as_utc(row.updated_at),
        )

    def _column_values(self, subscription: Subscription) -> dict:
        return {
            "user_id": subscription.user_id,
            "plan": subscription.plan,
            "amount_cents": subscription.amount_cents,
            "currency": subscription.currency,
            "billing_period": subscription.billing_period.date(),
        }

    async def _fail(self, message: str, operation: str, error: BaseException) -> StorageError:
        logger.error(f"Subscription {operation} failed: {error}", exc_info=error)
        try:
            await self.session.rollback()
        except STORE_FAILURES as rollback_error:
            logger.warning(f"Rollback after failed {operation} also failed: {rollback_error}")
        return StorageError(message, operation=operation, cause=error)

    async def create(self, subscription: Subscription) -> Subscription:
        """
        Insert a new subscription.

        The store assigns id, created_at and updated_at; they are copied
        onto ``subscription`` which is also returned.
        """
        stmt = (
            insert(SubscriptionModel)
            .values(**self._column_values(subscription))
            .returning(SubscriptionModel.id, SubscriptionModel.created_at, SubscriptionModel.updated_at)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.one()
            await self.session.commit()
        except STORE_FAILURES as e:
            raise await self._fail("failed to create subscription", "create", e) from e

        subscription.id = row.id
        subscription.created_at = _as_utc(row.created_at)
        subscription.updated_at = _as_utc(row.updated_at)
        logger.info(f"Subscription created: {subscription.id}")
        return subscription

    async def get_by_id(self, subscription_id: UUID) -> Subscription:
        stmt = (
            select(SubscriptionModel)
            .where(SubscriptionModel.id == subscription_id)
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            model = result.scalar_one_or_none()
        except STORE_FAILURES as e:
            raise await self._fail("failed to fetch subscription", "get", e) from e

        if model is None:
            raise SubscriptionNotFoundError(str(subscription_id))
        return self._to_domain(model)

    async def list_all(self) -> List[Subscription]:
        stmt = (
            select(SubscriptionModel)
            .order_by(SubscriptionModel.created_at.desc(), SubscriptionModel.id.desc())
            .execution_options(populate_existing=True)
        )
        try:
            result = await self.session.execute(stmt)
            models = result.scalars().all()
        except STORE_FAILURES as e:
            raise await self._fail("failed to list subscriptions", "list", e) from e

        return [self._to_domain(model) for model in models]

    async def update(self, subscription: Subscription) -> Subscription:
        """
        Overwrite the five mutable fields of the row matching ``subscription.id``.

        updated_at is recomputed by the store and returned by the same
        statement together with the untouched created_at.
        """
        stmt = (
            update(SubscriptionModel)
            .where(SubscriptionModel.id == subscription.id)
            .values(**self._column_values(subscription), updated_at=utcnow())
            .returning(SubscriptionModel.created_at, SubscriptionModel.updated_at)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            row = result.first()
            if row is None:
                await self.session.rollback()
            else:
                await self.session.commit()
        except STORE_FAILURES as e:
            raise await self._fail("failed to update subscription", "update", e) from e

        if row is None:
            raise SubscriptionNotFoundError(str(subscription.id))

        subscription.created_at = _as_utc(row.created_at)
        subscription.updated_at = _as_utc(row.updated_at)
        logger.info(f"Subscription updated: {subscription.id}")
        return subscription

    async def delete(self, subscription_id: UUID) -> None:
        stmt = (
            delete(SubscriptionModel)
            .where(SubscriptionModel.id == subscription_id)
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self.session.execute(stmt)
            deleted = result.rowcount
            await self.session.commit()
        except STORE_FAILURES as e:
            raise await self._fail("failed to delete subscription", "delete", e) from e

        if deleted == 0:
            raise SubscriptionNotFoundError(str(subscription_id))
        logger.info(f"Subscription deleted: {subscription_id}")

    async def monthly_summary(self, month: datetime) -> int:
        stmt = select(func.coalesce(func.sum(SubscriptionModel.amount_cents), 0)).where(
            SubscriptionModel.billing_period == to_calendar_month(month).date()
        )
        try:
            result = await self.session.execute(stmt)
            total = result.scalar_one()
        except STORE_FAILURES as e:
            raise await self._fail("failed to fetch summary", "summary", e) from e

        return int(total or 0)
