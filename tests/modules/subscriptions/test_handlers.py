"""
Tests for the subscription command and query handlers.
"""

from datetime import datetime, timezone
from typing import List
from uuid import UUID, uuid4

import pytest

from app.shared.core.exceptions import StorageError, SubscriptionNotFoundError, ValidationError
from app.modules.subscriptions.application.handlers import (
    SubscriptionCommandHandler,
    SubscriptionQueryHandler,
)
from app.modules.subscriptions.domain.models.subscription import Subscription
from app.modules.subscriptions.domain.repositories.subscription_repository import SubscriptionRepository

pytestmark = pytest.mark.unit

CREATED_AT = datetime(2024, 3, 5, 12, 0, tzinfo=timezone.utc)
UPDATED_AT = datetime(2024, 3, 6, 8, 30, tzinfo=timezone.utc)


class RecordingRepository(SubscriptionRepository):
    """In-memory repository recording every call it receives."""

    def __init__(self):
        self.calls: List[str] = []
        self.records = {}

    async def create(self, subscription: Subscription) -> Subscription:
        self.calls.append("create")
        subscription.id = uuid4()
        subscription.created_at = CREATED_AT
        subscription.updated_at = CREATED_AT
        self.records[subscription.id] = subscription
        return subscription

    async def get_by_id(self, subscription_id: UUID) -> Subscription:
        self.calls.append("get")
        if subscription_id not in self.records:
            raise SubscriptionNotFoundError(str(subscription_id))
        return self.records[subscription_id]

    async def list_all(self) -> List[Subscription]:
        self.calls.append("list")
        return list(self.records.values())

    async def update(self, subscription: Subscription) -> Subscription:
        self.calls.append("update")
        if subscription.id not in self.records:
            raise SubscriptionNotFoundError(str(subscription.id))
        subscription.created_at = CREATED_AT
        subscription.updated_at = UPDATED_AT
        self.records[subscription.id] = subscription
        return subscription

    async def delete(self, subscription_id: UUID) -> None:
        self.calls.append("delete")
        if self.records.pop(subscription_id, None) is None:
            raise SubscriptionNotFoundError(str(subscription_id))

    async def monthly_summary(self, month: datetime) -> int:
        self.calls.append("summary")
        return sum(s.amount_cents for s in self.records.values() if s.billing_period == month)


class ExplodingRepository(RecordingRepository):
    """Repository failing with an exception outside the service hierarchy."""

    async def list_all(self) -> List[Subscription]:
        raise RuntimeError("driver blew up")

    async def create(self, subscription: Subscription) -> Subscription:
        raise RuntimeError("driver blew up")


@pytest.fixture
def recording_repository():
    return RecordingRepository()


@pytest.mark.asyncio
async def test_create_renders_store_fields(recording_repository, subscription_payload):
    handler = SubscriptionCommandHandler(recording_repository)

    response = await handler.create(subscription_payload)

    assert response.id is not None
    assert response.billing_period == "2024-03"
    assert response.currency == "USD"
    assert response.created_at == response.updated_at == CREATED_AT


@pytest.mark.asyncio
async def test_invalid_body_never_reaches_repository(recording_repository, subscription_payload):
    handler = SubscriptionCommandHandler(recording_repository)
    subscription_payload["amount_cents"] = -1

    with pytest.raises(ValidationError, match="amount_cents must be non-negative"):
        await handler.create(subscription_payload)

    assert recording_repository.calls == []


@pytest.mark.asyncio
async def test_update_uses_timestamps_from_the_write(recording_repository, subscription_payload):
    commands = SubscriptionCommandHandler(recording_repository)
    created = await commands.create(subscription_payload)
    subscription_payload.update(plan="enterprise", billing_period="2024-05")

    response = await commands.update(str(created.id), subscription_payload)

    assert response.id == created.id
    assert response.plan == "enterprise"
    assert response.billing_period == "2024-05"
    assert response.created_at == CREATED_AT
    assert response.updated_at == UPDATED_AT
    assert recording_repository.calls == ["create", "update"]


@pytest.mark.asyncio
async def test_bad_identifier_rejected_before_repository(recording_repository, subscription_payload):
    commands = SubscriptionCommandHandler(recording_repository)
    queries = SubscriptionQueryHandler(recording_repository)

    with pytest.raises(ValidationError, match="invalid subscription id"):
        await commands.update("123", subscription_payload)
    with pytest.raises(ValidationError, match="invalid subscription id"):
        await commands.delete("abc")
    with pytest.raises(ValidationError, match="invalid subscription id"):
        await queries.get("summary-ish")

    assert recording_repository.calls == []


@pytest.mark.asyncio
async def test_not_found_passes_through(recording_repository):
    with pytest.raises(SubscriptionNotFoundError):
        await SubscriptionQueryHandler(recording_repository).get(str(uuid4()))
    with pytest.raises(SubscriptionNotFoundError):
        await SubscriptionCommandHandler(recording_repository).delete(str(uuid4()))


@pytest.mark.asyncio
async def test_monthly_summary(recording_repository, subscription_payload):
    commands = SubscriptionCommandHandler(recording_repository)
    for amount in (500, 1500):
        await commands.create({**subscription_payload, "amount_cents": amount})

    response = await SubscriptionQueryHandler(recording_repository).monthly_summary("03-2024")

    assert response.month == "2024-03"
    assert response.total_amount_cents == 2000


@pytest.mark.asyncio
async def test_unexpected_repository_failure_becomes_storage_error(subscription_payload):
    repository = ExplodingRepository()

    with pytest.raises(StorageError) as exc_info:
        await SubscriptionQueryHandler(repository).list_all()
    assert exc_info.value.message == "failed to list subscriptions"
    assert isinstance(exc_info.value.cause, RuntimeError)

    with pytest.raises(StorageError, match="failed to create subscription"):
        await SubscriptionCommandHandler(repository).create(subscription_payload)
