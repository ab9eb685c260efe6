"""Payment builder.

Turns an order plus a caller's payment attempt into a normalized payment
record, or into the first validation error that applies. Checks run in a
fixed order per method so the surfaced error code is reproducible:

- card: required fields → Luhn checksum → expiry → network detection
- upi: VPA presence and format
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from app.core.exceptions import ErrorCode
from app.domain.entities import NormalizedPayment, Order
from app.domain.payment_method import (
    CardInstrument,
    PaymentAttempt,
    PaymentMethod,
    UpiInstrument,
)
from app.utils.validators import (
    MAX_AMOUNT,
    clean_card_number,
    detect_card_network,
    luhn_check,
    validate_expiry,
    validate_vpa,
)


@dataclass(frozen=True)
class BuildError:
    """Typed validation failure."""

    code: ErrorCode
    description: str


@dataclass(frozen=True)
class BuildResult:
    """Either a normalized payment or the error that rejected the attempt."""

    payment: NormalizedPayment | None = None
    error: BuildError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def _reject(code: ErrorCode, description: str) -> BuildResult:
    return BuildResult(error=BuildError(code=code, description=description))


def resolve_amount(order: Order, override: Any, allow_override: bool) -> int:
    """Pick the amount to charge.

    An override is honoured only when allowed and when it is a positive,
    finite, whole number of minor units no larger than MAX_AMOUNT.
    Anything else falls back to the order amount.
    """
    if not allow_override or override is None or isinstance(override, bool):
        return order.amount

    try:
        value = Decimal(str(override).strip())
    except (InvalidOperation, ValueError):
        return order.amount

    if not value.is_finite() or value <= 0 or value > MAX_AMOUNT:
        return order.amount
    if value != value.to_integral_value():
        return order.amount

    return int(value)


def _build_upi(order: Order, attempt: PaymentAttempt, amount: int) -> BuildResult:
    instrument = attempt.instrument
    vpa = instrument.vpa if isinstance(instrument, UpiInstrument) else None
    if not vpa or not validate_vpa(vpa):
        return _reject(ErrorCode.INVALID_VPA, "Invalid VPA format")

    return BuildResult(
        payment=NormalizedPayment(
            order_id=order.id,
            method=PaymentMethod.UPI,
            amount=amount,
            currency=order.currency,
            vpa=vpa,
        )
    )


def _build_card(order: Order, attempt: PaymentAttempt, amount: int) -> BuildResult:
    card = attempt.instrument
    if not isinstance(card, CardInstrument) or card.missing_fields():
        return _reject(ErrorCode.BAD_REQUEST_ERROR, "Missing required card fields")

    if not luhn_check(card.number):
        return _reject(ErrorCode.INVALID_CARD, "Invalid card number")

    if not validate_expiry(card.expiry_month, card.expiry_year):
        return _reject(ErrorCode.EXPIRED_CARD, "Card has expired")

    cleaned = clean_card_number(card.number)
    return BuildResult(
        payment=NormalizedPayment(
            order_id=order.id,
            method=PaymentMethod.CARD,
            amount=amount,
            currency=order.currency,
            card_network=detect_card_network(cleaned),
            card_last4=cleaned[-4:],
        )
    )


def build(
    order: Order,
    attempt: PaymentAttempt,
    allow_amount_override: bool = False,
) -> BuildResult:
    """Validate an attempt against its order and normalize it.

    Args:
        order: Order being paid
        attempt: Submitted method, instrument and optional amount
        allow_amount_override: Whether attempt.amount may replace order.amount

    Returns:
        BuildResult with either the normalized payment or the first error
    """
    method = PaymentMethod.parse(attempt.method)
    if method is None:
        return _reject(ErrorCode.BAD_REQUEST_ERROR, "Invalid payment method")

    amount = resolve_amount(order, attempt.amount, allow_amount_override)

    if method is PaymentMethod.UPI:
        return _build_upi(order, attempt, amount)
    if method is PaymentMethod.CARD:
        return _build_card(order, attempt, amount)

    raise AssertionError(f"Unhandled payment method: {method}")
