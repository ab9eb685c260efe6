"""Payment method tags and their instrument payloads."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class PaymentMethod(str, Enum):
    """Supported payment methods."""

    CARD = "card"
    UPI = "upi"

    @classmethod
    def parse(cls, value: Any) -> "PaymentMethod | None":
        """Return the method for a raw tag, or None if unsupported."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


class CardNetwork(str, Enum):
    """Card networks recognised by IIN prefix."""

    VISA = "visa"
    MASTERCARD = "mastercard"
    AMEX = "amex"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CardInstrument:
    """Raw card details as submitted. Never persisted."""

    number: Any = None
    expiry_month: Any = None
    expiry_year: Any = None
    cvv: Any = None
    holder_name: Any = None

    def missing_fields(self) -> list[str]:
        """Names of required fields that are absent or empty."""
        return [
            name
            for name in ("number", "expiry_month", "expiry_year", "cvv", "holder_name")
            if not getattr(self, name)
        ]


@dataclass(frozen=True)
class UpiInstrument:
    """UPI payer handle."""

    vpa: Any = None


Instrument = CardInstrument | UpiInstrument | None


@dataclass(frozen=True)
class PaymentAttempt:
    """A caller's request to pay an order.

    ``method`` is kept as submitted so unsupported tags can be rejected by
    the builder with a typed error.
    """

    order_id: str
    method: Any
    instrument: Instrument = None
    amount: Any = None
