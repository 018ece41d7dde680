"""
HTTP tests for the subscription endpoints.
"""

import asyncio
from datetime import datetime
from uuid import UUID, uuid4

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError

from app.modules.subscriptions.infrastructure.database.subscription_repository_impl import (
    SubscriptionRepositoryImpl,
)
from app.modules.subscriptions.presentation.dependencies import (
    get_subscription_query_handler,
    get_subscription_repository,
)

pytestmark = pytest.mark.integration

WRITE_GAP_SECONDS = 0.02


def _error_message(response) -> str:
    return response.json()["error"]["message"]


def _timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.mark.asyncio
async def test_create_returns_201_with_rendered_record(client: AsyncClient, subscription_payload):
    response = await client.post("/subscriptions", json=subscription_payload)

    assert response.status_code == 201
    body = response.json()
    assert UUID(body["id"])
    assert body["user_id"] == "user-123"
    assert body["plan"] == "pro"
    assert body["amount_cents"] == 1999
    assert body["currency"] == "USD"
    assert body["billing_period"] == "2024-03"
    assert body["created_at"] == body["updated_at"]
    assert response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_trailing_slash_collection(client: AsyncClient, subscription_payload):
    created = await client.post("/subscriptions/", json=subscription_payload)
    listed = await client.get("/subscriptions/")

    assert created.status_code == 201
    assert listed.status_code == 200
    assert [item["id"] for item in listed.json()] == [created.json()["id"]]


@pytest.mark.asyncio
async def test_trailing_slash_item_routes(client: AsyncClient, subscription_payload):
    created = (await client.post("/subscriptions/", json=subscription_payload)).json()
    item_path = f"/subscriptions/{created['id']}/"

    fetched = await client.get(item_path)
    replaced = await client.put(item_path, json={**subscription_payload, "plan": "team"})
    deleted = await client.delete(item_path)

    assert fetched.status_code == 200
    assert fetched.json() == created
    assert replaced.status_code == 200
    assert replaced.json()["plan"] == "team"
    assert deleted.status_code == 204
    assert (await client.get(item_path)).status_code == 404


@pytest.mark.asyncio
async def test_create_then_get(client: AsyncClient, subscription_payload):
    created = (await client.post("/subscriptions", json=subscription_payload)).json()

    response = await client.get(f"/subscriptions/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"amount_cents": -1}, "amount_cents must be non-negative"),
        ({"user_id": ""}, "user_id is required"),
        ({"billing_period": "2024/03"}, "billing_period must be in MM-YYYY or YYYY-MM format"),
        ({"coupon": "FREE"}, "invalid request body"),
        ({"amount_cents": "12"}, "invalid request body"),
        ({"amount_cents": 2**63}, "invalid request body"),
        ({"amount_cents": -(2**63) - 1}, "invalid request body"),
    ],
)
async def test_create_validation_failures(client: AsyncClient, subscription_payload, overrides, message):
    subscription_payload.update(overrides)

    response = await client.post("/subscriptions", json=subscription_payload)

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["message"] == message

    assert (await client.get("/subscriptions")).json() == []


@pytest.mark.asyncio
@pytest.mark.parametrize("content", [b"", b"{not json", b"[1, 2]", b"\xff\xfe"])
async def test_create_malformed_body(client: AsyncClient, content):
    response = await client.post(
        "/subscriptions", content=content, headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert _error_message(response) == "invalid request body"


@pytest.mark.asyncio
async def test_get_with_malformed_id(client: AsyncClient):
    response = await client.get("/subscriptions/not-a-uuid")

    assert response.status_code == 400
    assert _error_message(response) == "invalid subscription id"


@pytest.mark.asyncio
async def test_get_missing_returns_404(client: AsyncClient):
    response = await client.get(f"/subscriptions/{uuid4()}")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"
    assert _error_message(response) == "subscription not found"


@pytest.mark.asyncio
async def test_list_newest_first(client: AsyncClient, subscription_payload):
    for plan in ("a", "b", "c"):
        await client.post("/subscriptions", json={**subscription_payload, "plan": plan})
        await asyncio.sleep(WRITE_GAP_SECONDS)

    response = await client.get("/subscriptions")

    assert response.status_code == 200
    body = response.json()
    assert [item["plan"] for item in body] == ["c", "b", "a"]
    created = [_timestamp(item["created_at"]) for item in body]
    assert created[0] > created[1] > created[2]


@pytest.mark.asyncio
async def test_update_replaces_record(client: AsyncClient, subscription_payload):
    created = (await client.post("/subscriptions", json=subscription_payload)).json()
    await asyncio.sleep(WRITE_GAP_SECONDS)

    replacement = {
        "user_id": "user-999",
        "plan": "enterprise",
        "amount_cents": 0,
        "currency": "gbp",
        "billing_period": "2025-01",
    }
    response = await client.put(f"/subscriptions/{created['id']}", json=replacement)

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["created_at"] == created["created_at"]
    assert _timestamp(body["updated_at"]) > _timestamp(created["updated_at"])
    assert body["currency"] == "GBP"
    assert body["billing_period"] == "2025-01"

    fetched = (await client.get(f"/subscriptions/{created['id']}")).json()
    assert fetched == body


@pytest.mark.asyncio
async def test_update_missing_returns_404(client: AsyncClient, subscription_payload):
    response = await client.put(f"/subscriptions/{uuid4()}", json=subscription_payload)

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_update_validation_failure(client: AsyncClient, subscription_payload):
    created = (await client.post("/subscriptions", json=subscription_payload)).json()

    response = await client.put(
        f"/subscriptions/{created['id']}", json={**subscription_payload, "currency": "  "}
    )

    assert response.status_code == 400
    assert _error_message(response) == "currency is required"


@pytest.mark.asyncio
async def test_delete_returns_204_then_404(client: AsyncClient, subscription_payload):
    created = (await client.post("/subscriptions", json=subscription_payload)).json()

    first = await client.delete(f"/subscriptions/{created['id']}")
    second = await client.delete(f"/subscriptions/{created['id']}")
    fetched = await client.get(f"/subscriptions/{created['id']}")

    assert first.status_code == 204
    assert first.content == b""
    assert second.status_code == 404
    assert fetched.status_code == 404


@pytest.mark.asyncio
async def test_summary(client: AsyncClient, subscription_payload):
    empty = await client.get("/subscriptions/summary", params={"month": "2024-03"})
    assert empty.status_code == 200
    assert empty.json() == {"month": "2024-03", "total_amount_cents": 0}

    for amount in (500, 1500):
        await client.post("/subscriptions", json={**subscription_payload, "amount_cents": amount})

    response = await client.get("/subscriptions/summary", params={"month": "03-2024"})

    assert response.status_code == 200
    assert response.json() == {"month": "2024-03", "total_amount_cents": 2000}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "params, message",
    [
        ({}, "month query parameter is required"),
        ({"month": ""}, "month query parameter is required"),
        ({"month": "2024/03"}, "invalid month format"),
        ({"month": "13-2024"}, "invalid month format"),
    ],
)
async def test_summary_month_errors(client: AsyncClient, params, message):
    response = await client.get("/subscriptions/summary", params=params)

    assert response.status_code == 400
    assert _error_message(response) == message


@pytest.mark.asyncio
async def test_request_id_is_propagated(client: AsyncClient):
    response = await client.get("/subscriptions", headers={"X-Request-ID": "req-abc"})

    assert response.headers["X-Request-ID"] == "req-abc"
    assert response.headers["X-Response-Time"].endswith("s")


@pytest.mark.asyncio
async def test_not_found_error_carries_request_id(client: AsyncClient):
    response = await client.get(f"/subscriptions/{uuid4()}", headers={"X-Request-ID": "req-404"})

    assert response.json()["error"]["request_id"] == "req-404"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client: AsyncClient):
    response = await client.get("/nope")

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


class _BrokenSession:
    async def execute(self, *args, **kwargs):
        raise OperationalError("SELECT 1", {}, ConnectionRefusedError("db down"))

    async def commit(self):
        pass

    async def rollback(self):
        pass


@pytest.mark.asyncio
async def test_storage_failure_is_opaque_500(app, subscription_payload):
    app.dependency_overrides[get_subscription_repository] = lambda: SubscriptionRepositoryImpl(_BrokenSession())
    transport = ASGITransport(app=app)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        listed = await client.get("/subscriptions")
        created = await client.post("/subscriptions", json=subscription_payload)
        invalid = await client.post("/subscriptions", json={**subscription_payload, "amount_cents": -1})

    assert listed.status_code == 500
    assert listed.json()["error"] == {
        "code": "STORAGE_ERROR",
        "message": "failed to list subscriptions",
        "details": {},
        "request_id": listed.headers["X-Request-ID"],
    }
    assert "db down" not in listed.text

    assert created.status_code == 500
    assert _error_message(created) == "failed to create subscription"

    # validation happens before any store interaction
    assert invalid.status_code == 400


@pytest.mark.asyncio
async def test_unhandled_exception_is_opaque_500(app):
    async def explode():
        raise RuntimeError("secret internals")

    class _Handler:
        list_all = staticmethod(explode)

    app.dependency_overrides[get_subscription_query_handler] = lambda: _Handler()
    transport = ASGITransport(app=app, raise_app_exceptions=False)

    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        response = await client.get("/subscriptions")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
    assert "secret internals" not in response.text
