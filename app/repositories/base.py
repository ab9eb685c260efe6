"""Repository interface used by the payment service.

Implementations persist orders and payments; they hold no business rules.
Merchant-scoped lookups must return None both for unknown ids and for ids
owned by another merchant.
"""

from abc import ABC, abstractmethod
from typing import Any

from app.domain.entities import Merchant, NormalizedPayment, Order, Payment


class PaymentRepository(ABC):
    """Abstract storage for merchants, orders and payments."""

    @abstractmethod
    async def get_merchant_by_credentials(self, api_key: str, api_secret: str) -> Merchant | None:
        """Return the active merchant matching the credentials."""
        pass

    @abstractmethod
    async def get_merchant_by_email(self, email: str) -> Merchant | None:
        pass

    @abstractmethod
    async def create_order(
        self,
        merchant_id: str,
        amount: int,
        currency: str,
        receipt: str | None = None,
        notes: dict[str, Any] | None = None,
    ) -> Order:
        pass

    @abstractmethod
    async def get_order(self, order_id: str, merchant_id: str) -> Order | None:
        """Return the order if it belongs to the merchant."""
        pass

    @abstractmethod
    async def get_order_by_id(self, order_id: str) -> Order | None:
        """Return the order regardless of owner (public checkout)."""
        pass

    @abstractmethod
    async def create_payment(self, merchant_id: str, normalized: NormalizedPayment) -> Payment:
        """Persist a new payment in created state."""
        pass

    @abstractmethod
    async def save_payment(self, payment: Payment) -> Payment:
        """Persist status fields of an existing payment."""
        pass

    @abstractmethod
    async def get_payment(self, payment_id: str, merchant_id: str) -> Payment | None:
        """Return the payment if it belongs to the merchant."""
        pass

    @abstractmethod
    async def get_payment_by_id(self, payment_id: str) -> Payment | None:
        """Return the payment regardless of owner."""
        pass

    @abstractmethod
    async def list_payments(self, merchant_id: str) -> list[Payment]:
        """Return the merchant's payments, newest first."""
        pass
