"""Merchant payment reporting (read-only)."""

from app.domain.payment_state import FAILED, SUCCESS
from app.repositories.base import PaymentRepository


class ReportingService:
    """Read-only aggregates over a merchant's payments."""

    def __init__(self, repository: PaymentRepository):
        self.repository = repository

    async def get_payment_stats(self, merchant_id: str) -> dict:
        """Summarise a merchant's payments.

        Returns:
            dict with total count, successful amount (minor units),
            success/failure counts and success rate as a percentage
        """
        payments = await self.repository.list_payments(merchant_id)

        successful = [p for p in payments if p.status == SUCCESS]
        failed = [p for p in payments if p.status == FAILED]
        total = len(payments)

        return {
            "total_transactions": total,
            "total_amount": sum(p.amount for p in successful),
            "successful_transactions": len(successful),
            "failed_transactions": len(failed),
            "success_rate": round(len(successful) / total * 100, 2) if total else 0.0,
        }
