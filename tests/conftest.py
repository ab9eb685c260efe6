"""Shared fixtures: in-memory repository, merchants, orders and an API client."""

from collections.abc import AsyncGenerator
from datetime import UTC, date, datetime

import httpx
import pytest

from app.api.deps import get_repository
from app.domain.entities import Merchant, Order
from app.domain.payment_method import CardInstrument, PaymentAttempt, UpiInstrument
from app.gateways.simulator import SimulatedGateway
from app.main import app
from app.repositories.memory import InMemoryPaymentRepository
from app.services.payment_service import PaymentService

VALID_VISA = "4111111111111111"
NEXT_YEAR = date.today().year + 1


@pytest.fixture
def merchant() -> Merchant:
    return Merchant(
        id="6b1f4c1e-2a9d-4f0e-9a55-1d7d6f0b3c11",
        name="Acme Stores",
        email="acme@example.com",
        api_key="key_acme",
        api_secret="secret_acme",
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def other_merchant() -> Merchant:
    return Merchant(
        id="0c7d1d44-8f2e-4b8b-8e43-6a0f5b2d9e77",
        name="Other Shop",
        email="other@example.com",
        api_key="key_other",
        api_secret="secret_other",
        created_at=datetime.now(UTC),
    )


@pytest.fixture
def repository(merchant: Merchant, other_merchant: Merchant) -> InMemoryPaymentRepository:
    repo = InMemoryPaymentRepository()
    repo.add_merchant(merchant)
    repo.add_merchant(other_merchant)
    return repo


@pytest.fixture
async def order(repository: InMemoryPaymentRepository, merchant: Merchant) -> Order:
    return await repository.create_order(merchant_id=merchant.id, amount=500, currency="INR")


@pytest.fixture
def gateway() -> SimulatedGateway:
    return SimulatedGateway(failing_card_last4=["0002"], failing_vpas=["fail"], delay_seconds=0)


@pytest.fixture
def service(repository: InMemoryPaymentRepository, gateway: SimulatedGateway) -> PaymentService:
    return PaymentService(repository, gateway=gateway, processing_timeout=1.0)


@pytest.fixture
def card_attempt():
    def make(order_id: str, **overrides) -> PaymentAttempt:
        fields = {
            "number": VALID_VISA,
            "expiry_month": 12,
            "expiry_year": NEXT_YEAR,
            "cvv": "123",
            "holder_name": "Asha Rao",
        }
        amount = overrides.pop("amount", None)
        fields.update(overrides)
        return PaymentAttempt(
            order_id=order_id,
            method="card",
            instrument=CardInstrument(**fields),
            amount=amount,
        )

    return make


@pytest.fixture
def upi_attempt():
    def make(order_id: str, vpa: str | None = "alice@bank", amount=None) -> PaymentAttempt:
        return PaymentAttempt(
            order_id=order_id,
            method="upi",
            instrument=UpiInstrument(vpa=vpa),
            amount=amount,
        )

    return make


@pytest.fixture
async def client(repository: InMemoryPaymentRepository) -> AsyncGenerator[httpx.AsyncClient, None]:
    async def override_repository() -> InMemoryPaymentRepository:
        return repository

    app.dependency_overrides[get_repository] = override_repository
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(merchant: Merchant) -> dict[str, str]:
    return {"X-Api-Key": merchant.api_key, "X-Api-Secret": merchant.api_secret}


@pytest.fixture
def other_auth_headers(other_merchant: Merchant) -> dict[str, str]:
    return {"X-Api-Key": other_merchant.api_key, "X-Api-Secret": other_merchant.api_secret}
