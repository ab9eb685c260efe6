"""Persistence collaborators for the payment core."""

from app.repositories.base import PaymentRepository
from app.repositories.memory import InMemoryPaymentRepository
from app.repositories.sql import SqlPaymentRepository

__all__ = [
    "PaymentRepository",
    "InMemoryPaymentRepository",
    "SqlPaymentRepository",
]
