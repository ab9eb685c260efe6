"""Domain records exchanged between the payment core and its repositories."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from app.domain.payment_method import CardNetwork, PaymentMethod


@dataclass(frozen=True)
class Merchant:
    """API client that owns orders and payments."""

    id: str
    name: str
    email: str
    api_key: str
    api_secret: str
    is_active: bool = True
    created_at: datetime | None = None


@dataclass(frozen=True)
class Order:
    """Amount the merchant expects to collect, in minor units."""

    id: str
    merchant_id: str
    amount: int
    currency: str
    created_at: datetime
    receipt: str | None = None
    notes: dict[str, Any] = field(default_factory=dict)
    status: str = "created"
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NormalizedPayment:
    """Validated payment data ready to persist.

    Holds no raw card number or CVV.
    """

    order_id: str
    method: PaymentMethod
    amount: int
    currency: str
    vpa: str | None = None
    card_network: CardNetwork | None = None
    card_last4: str | None = None


@dataclass
class Payment:
    """Persisted payment. Status fields change only through the state machine."""

    id: str
    order_id: str
    merchant_id: str
    method: PaymentMethod
    amount: int
    currency: str
    status: str
    created_at: datetime
    updated_at: datetime
    vpa: str | None = None
    card_network: CardNetwork | None = None
    card_last4: str | None = None
    error_code: str | None = None
    error_description: str | None = None
