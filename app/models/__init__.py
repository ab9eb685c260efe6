"""Database models."""

from app.models.merchant import Merchant
from app.models.order import Order
from app.models.payment import Payment

__all__ = [
    "Merchant",
    "Order",
    "Payment",
]
