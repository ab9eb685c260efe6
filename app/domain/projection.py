"""External view of a payment.

Field presence depends on method and status: UPI payments expose ``vpa``,
card payments expose ``card_network``/``card_last4``, and only failed
payments expose ``error_code``/``error_description``.
"""

from datetime import datetime
from typing import Any

from app.domain.entities import Payment
from app.domain.payment_method import PaymentMethod
from app.domain.payment_state import is_failure


def _isoformat(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def project(payment: Payment, include_updated_at: bool = False) -> dict[str, Any]:
    """Render a payment for API callers.

    Args:
        payment: Stored payment
        include_updated_at: True for lookups, False for creation responses

    Returns:
        dict: Method- and status-conditional representation
    """
    view: dict[str, Any] = {
        "id": payment.id,
        "order_id": payment.order_id,
        "amount": payment.amount,
        "currency": payment.currency,
        "method": payment.method.value,
        "status": payment.status,
        "created_at": _isoformat(payment.created_at),
    }

    if include_updated_at:
        view["updated_at"] = _isoformat(payment.updated_at)

    if payment.method is PaymentMethod.UPI:
        view["vpa"] = payment.vpa
    elif payment.method is PaymentMethod.CARD:
        view["card_network"] = payment.card_network.value if payment.card_network else None
        view["card_last4"] = payment.card_last4

    if is_failure(payment.status):
        view["error_code"] = payment.error_code
        view["error_description"] = payment.error_description

    return view
