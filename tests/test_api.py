"""HTTP tests for order and payment endpoints."""

from datetime import date

import httpx
import pytest

from app.api.deps import get_payment_service, get_repository
from app.config import Settings, get_settings
from app.core.exceptions import PaymentConsistencyError
from app.main import app

NEXT_YEAR = date.today().year + 1


def card_payload(order_id: str, **card_overrides) -> dict:
    card = {
        "number": "4111 1111 1111 1111",
        "expiry_month": 12,
        "expiry_year": NEXT_YEAR,
        "cvv": "123",
        "holder_name": "Asha Rao",
    }
    card.update(card_overrides)
    return {"order_id": order_id, "method": "card", "card": card}


@pytest.fixture
def settings_override():
    def apply(**values):
        app.dependency_overrides[get_settings] = lambda: Settings(**values)

    return apply


class TestAuthentication:
    async def test_missing_credentials(self, client):
        response = await client.post("/api/v1/orders", json={"amount": 500})

        assert response.status_code == 401
        assert response.json() == {
            "error": {"code": "AUTHENTICATION_ERROR", "description": "Invalid API credentials"}
        }

    async def test_wrong_secret(self, client, merchant):
        response = await client.get(
            "/api/v1/payments/list",
            headers={"X-Api-Key": merchant.api_key, "X-Api-Secret": "nope"},
        )
        assert response.status_code == 401


class TestOrders:
    async def test_create_and_get(self, client, auth_headers, merchant):
        response = await client.post(
            "/api/v1/orders",
            json={"amount": 50000, "currency": "INR", "receipt": "rcpt_1"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["id"].startswith("order_")
        assert body["merchant_id"] == merchant.id
        assert body["status"] == "created"

        fetched = await client.get(f"/api/v1/orders/{body['id']}", headers=auth_headers)
        assert fetched.status_code == 200
        assert fetched.json()["amount"] == 50000

    async def test_default_currency(self, client, auth_headers):
        response = await client.post("/api/v1/orders", json={"amount": 100}, headers=auth_headers)
        assert response.json()["currency"] == "INR"

    @pytest.mark.parametrize(
        "body",
        [{"amount": 0}, {"amount": -5}, {}, {"amount": 10, "currency": "rupees"}, {"amount": 2_147_483_648}],
    )
    async def test_invalid_order(self, client, auth_headers, body):
        response = await client.post("/api/v1/orders", json=body, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "BAD_REQUEST_ERROR"

    async def test_other_merchants_order_is_not_found(self, client, order, other_auth_headers):
        response = await client.get(f"/api/v1/orders/{order.id}", headers=other_auth_headers)

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND_ERROR"

    async def test_public_order_view(self, client, order):
        response = await client.get(f"/api/v1/orders/{order.id}/public")

        assert response.status_code == 200
        assert response.json() == {"id": order.id, "amount": 500, "currency": "INR", "status": "created"}


class TestCreatePayment:
    async def test_upi_payment(self, client, order, auth_headers):
        response = await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "success"
        assert body["amount"] == 500
        assert body["currency"] == "INR"
        assert body["vpa"] == "alice@bank"
        assert "card_network" not in body
        assert "updated_at" not in body
        assert "error_code" not in body

    async def test_card_payment(self, client, order, auth_headers):
        response = await client.post("/api/v1/payments", json=card_payload(order.id), headers=auth_headers)

        assert response.status_code == 201
        body = response.json()
        assert body["method"] == "card"
        assert body["card_network"] == "visa"
        assert body["card_last4"] == "1111"
        assert "vpa" not in body
        assert "number" not in body
        assert "cvv" not in body

    async def test_card_payment_with_numeric_fields(self, client, order, auth_headers):
        payload = card_payload(order.id, number=4111111111111111, cvv=123)

        response = await client.post("/api/v1/payments", json=payload, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["status"] == "success"
        assert response.json()["card_last4"] == "1111"

    async def test_overlong_vpa(self, client, order, auth_headers):
        response = await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "a" * 300 + "@bank"},
            headers=auth_headers,
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_VPA"

    @pytest.mark.parametrize(
        "payload_factory,code",
        [
            (lambda oid: {"order_id": oid, "method": "upi", "vpa": "a@b@c"}, "INVALID_VPA"),
            (lambda oid: {"order_id": oid, "method": "upi"}, "INVALID_VPA"),
            (lambda oid: {"order_id": oid, "method": "wallet"}, "BAD_REQUEST_ERROR"),
            (lambda oid: card_payload(oid, cvv=None), "BAD_REQUEST_ERROR"),
            (lambda oid: card_payload(oid, number="4111111111111112", expiry_year=2000), "INVALID_CARD"),
            (lambda oid: card_payload(oid, expiry_year=2000), "EXPIRED_CARD"),
        ],
    )
    async def test_rejections(self, client, order, auth_headers, payload_factory, code):
        response = await client.post("/api/v1/payments", json=payload_factory(order.id), headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == code

    async def test_unknown_order(self, client, auth_headers):
        response = await client.post(
            "/api/v1/payments",
            json={"order_id": "order_missing", "method": "upi", "vpa": "alice@bank"},
            headers=auth_headers,
        )

        assert response.status_code == 404
        assert response.json() == {"error": {"code": "NOT_FOUND_ERROR", "description": "Order not found"}}

    async def test_authenticated_path_ignores_amount(self, client, order, auth_headers):
        response = await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank", "amount": 1},
            headers=auth_headers,
        )
        assert response.json()["amount"] == 500

    async def test_declined_payment_reports_error_on_lookup(self, client, order, auth_headers):
        created = await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "fail@bank"},
            headers=auth_headers,
        )
        assert created.status_code == 201
        assert created.json()["status"] == "failed"

        fetched = await client.get(f"/api/v1/payments/{created.json()['id']}", headers=auth_headers)
        body = fetched.json()
        assert body["error_code"] == "PAYMENT_FAILED"
        assert body["error_description"]


class TestGetPayment:
    async def test_lookup_includes_updated_at(self, client, order, auth_headers):
        created = await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
            headers=auth_headers,
        )
        payment_id = created.json()["id"]

        response = await client.get(f"/api/v1/payments/{payment_id}", headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == payment_id
        assert "updated_at" in body
        assert body["vpa"] == "alice@bank"

    async def test_wrong_merchant_matches_nonexistent(self, client, order, auth_headers, other_auth_headers):
        created = await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
            headers=auth_headers,
        )
        payment_id = created.json()["id"]

        cross = await client.get(f"/api/v1/payments/{payment_id}", headers=other_auth_headers)
        missing = await client.get("/api/v1/payments/pay_doesnotexist00", headers=other_auth_headers)

        assert cross.status_code == missing.status_code == 404
        assert cross.json() == missing.json()


class TestPublicCheckout:
    async def test_public_payment_charges_override_when_allowed(self, client, order, settings_override):
        settings_override(allow_amount_override=True)

        response = await client.post(
            "/api/v1/payments/public",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank", "amount": 750},
        )

        assert response.status_code == 201
        assert response.json()["amount"] == 750

    async def test_public_payment_ignores_override_when_disabled(self, client, order, settings_override):
        settings_override(allow_amount_override=False)

        response = await client.post(
            "/api/v1/payments/public",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank", "amount": 750},
        )

        assert response.json()["amount"] == 500

    async def test_invalid_override_falls_back_to_order_amount(self, client, order, settings_override):
        settings_override(allow_amount_override=True)

        response = await client.post(
            "/api/v1/payments/public",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank", "amount": "lots"},
        )

        assert response.json()["amount"] == 500

    async def test_public_payment_belongs_to_order_merchant(self, client, order, merchant, auth_headers):
        created = await client.post(
            "/api/v1/payments/public",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
        )
        payment_id = created.json()["id"]

        owned = await client.get(f"/api/v1/payments/{payment_id}", headers=auth_headers)
        public = await client.get(f"/api/v1/payments/{payment_id}/public")

        assert owned.status_code == 200
        assert public.status_code == 200
        assert public.json()["status"] == "success"

    async def test_public_unknown_payment(self, client):
        response = await client.get("/api/v1/payments/pay_missing/public")
        assert response.status_code == 404


class TestDashboard:
    async def test_list_and_stats(self, client, order, auth_headers):
        for vpa in ("alice@bank", "bob@bank", "fail@bank"):
            await client.post(
                "/api/v1/payments",
                json={"order_id": order.id, "method": "upi", "vpa": vpa},
                headers=auth_headers,
            )

        listing = await client.get("/api/v1/payments/list", headers=auth_headers)
        stats = await client.get("/api/v1/payments/stats", headers=auth_headers)

        assert listing.status_code == 200
        assert listing.json()["count"] == 3
        assert stats.json() == {
            "total_transactions": 3,
            "total_amount": 1000,
            "successful_transactions": 2,
            "failed_transactions": 1,
            "success_rate": 66.67,
        }

    async def test_stats_are_per_merchant(self, client, order, auth_headers, other_auth_headers):
        await client.post(
            "/api/v1/payments",
            json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
            headers=auth_headers,
        )

        stats = await client.get("/api/v1/payments/stats", headers=other_auth_headers)

        assert stats.json()["total_transactions"] == 0
        assert stats.json()["success_rate"] == 0.0


class TestSandboxMerchant:
    async def test_returns_seeded_merchant(self, client, merchant, settings_override):
        settings_override(test_merchant_email=merchant.email, expose_test_merchant=True)

        response = await client.get("/api/v1/test/merchant")

        assert response.status_code == 200
        assert response.json()["api_key"] == merchant.api_key

    async def test_hidden_when_disabled(self, client, merchant, settings_override):
        settings_override(test_merchant_email=merchant.email, expose_test_merchant=False)

        response = await client.get("/api/v1/test/merchant")

        assert response.status_code == 404


async def test_security_and_timing_headers(client):
    response = await client.get("/")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Response-Time" in response.headers


async def test_consistency_error_is_opaque(client, order, auth_headers):
    class BrokenService:
        async def submit(self, **kwargs):
            raise PaymentConsistencyError("payment pay_x vanished mid-flight")

    app.dependency_overrides[get_payment_service] = lambda: BrokenService()

    response = await client.post(
        "/api/v1/payments",
        json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
        headers=auth_headers,
    )

    assert response.status_code == 500
    assert response.json() == {"error": {"code": "SERVER_ERROR", "description": "Internal server error"}}


async def test_unhandled_error_keeps_security_headers(repository, order, auth_headers):
    class CrashingService:
        async def submit(self, **kwargs):
            raise RuntimeError("unexpected")

    async def override_repository():
        return repository

    app.dependency_overrides[get_repository] = override_repository
    app.dependency_overrides[get_payment_service] = lambda: CrashingService()
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.post(
                "/api/v1/payments",
                json={"order_id": order.id, "method": "upi", "vpa": "alice@bank"},
                headers={**auth_headers, "X-Request-ID": "req-42"},
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": {"code": "SERVER_ERROR", "description": "Internal server error"}}
    assert response.headers["Cache-Control"] == "no-store"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Request-ID"] == "req-42"
