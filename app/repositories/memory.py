"""In-memory repository for tests and local simulation."""

import asyncio
from dataclasses import replace
from datetime import UTC, datetime
from typing import Any

from app.domain.entities import Merchant, NormalizedPayment, Order, Payment
from app.domain.payment_state import CREATED
from app.repositories.base import PaymentRepository
from app.utils.identifiers import generate_order_id, generate_payment_id


class InMemoryPaymentRepository(PaymentRepository):
    """Dictionary-backed repository.

    Stored payments are copied on the way in and out so callers cannot
    mutate persisted state without going through ``save_payment``.
    """

    def __init__(self):
        self._merchants: dict[str, Merchant] = {}
        self._orders: dict[str, Order] = {}
        self._payments: dict[str, Payment] = {}
        self._lock = asyncio.Lock()

    def add_merchant(self, merchant: Merchant) -> Merchant:
        self._merchants[merchant.id] = merchant
        return merchant

    async def get_merchant_by_credentials(self, api_key: str, api_secret: str) -> Merchant | None:
        for merchant in self._merchants.values():
            if (
                merchant.is_active
                and merchant.api_key == api_key
                and merchant.api_secret == api_secret
            ):
                return merchant
        return None

    async def get_merchant_by_email(self, email: str) -> Merchant | None:
        for merchant in self._merchants.values():
            if merchant.email == email:
                return merchant
        return None

    async def create_order(
        self,
        merchant_id: str,
        amount: int,
        currency: str,
        receipt: str | None = None,
        notes: dict[str, Any] | None = None,
    ) -> Order:
        now = datetime.now(UTC)
        order = Order(
            id=generate_order_id(),
            merchant_id=merchant_id,
            amount=amount,
            currency=currency,
            receipt=receipt,
            notes=dict(notes or {}),
            created_at=now,
            updated_at=now,
        )
        self._orders[order.id] = order
        return order

    async def get_order(self, order_id: str, merchant_id: str) -> Order | None:
        order = self._orders.get(order_id)
        if order is None or order.merchant_id != merchant_id:
            return None
        return order

    async def get_order_by_id(self, order_id: str) -> Order | None:
        return self._orders.get(order_id)

    async def create_payment(self, merchant_id: str, normalized: NormalizedPayment) -> Payment:
        now = datetime.now(UTC)
        payment = Payment(
            id=generate_payment_id(),
            order_id=normalized.order_id,
            merchant_id=merchant_id,
            method=normalized.method,
            amount=normalized.amount,
            currency=normalized.currency,
            status=CREATED,
            vpa=normalized.vpa,
            card_network=normalized.card_network,
            card_last4=normalized.card_last4,
            created_at=now,
            updated_at=now,
        )
        async with self._lock:
            self._payments[payment.id] = replace(payment)
        return payment

    async def save_payment(self, payment: Payment) -> Payment:
        async with self._lock:
            if payment.id not in self._payments:
                raise LookupError(f"Payment {payment.id} does not exist")
            self._payments[payment.id] = replace(payment)
        return payment

    async def get_payment(self, payment_id: str, merchant_id: str) -> Payment | None:
        payment = self._payments.get(payment_id)
        if payment is None or payment.merchant_id != merchant_id:
            return None
        return replace(payment)

    async def get_payment_by_id(self, payment_id: str) -> Payment | None:
        payment = self._payments.get(payment_id)
        return replace(payment) if payment else None

    async def list_payments(self, merchant_id: str) -> list[Payment]:
        payments = [replace(p) for p in self._payments.values() if p.merchant_id == merchant_id]
        return sorted(payments, key=lambda p: p.created_at, reverse=True)
