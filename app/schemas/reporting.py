"""Merchant reporting schemas (read-only)."""

from pydantic import BaseModel


class PaymentStatsResponse(BaseModel):
    """Aggregate payment figures for the merchant dashboard."""

    total_transactions: int
    total_amount: int  # successful payments, in paise
    successful_transactions: int
    failed_transactions: int
    success_rate: float  # percentage
