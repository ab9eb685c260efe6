"""Simulated acquirer for the sandbox gateway.

Approves every payment except those whose instrument carries a configured
failure marker:

- card: last four digits listed in ``simulator_failing_card_last4``
- upi: VPA local part listed in ``simulator_failing_vpas``

An optional delay makes the processing timeout observable locally.
"""

import asyncio
from collections.abc import Iterable

from app.config import settings
from app.domain.entities import Payment
from app.domain.payment_method import PaymentMethod
from app.gateways.base import ProcessingGateway, ProcessingResult


class SimulatedGateway(ProcessingGateway):
    """Deterministic marker-based processing gateway."""

    def __init__(
        self,
        failing_card_last4: Iterable[str] | None = None,
        failing_vpas: Iterable[str] | None = None,
        delay_seconds: float | None = None,
    ):
        self.failing_card_last4 = frozenset(
            settings.simulator_failing_card_last4 if failing_card_last4 is None else failing_card_last4
        )
        self.failing_vpas = frozenset(
            v.lower() for v in (settings.simulator_failing_vpas if failing_vpas is None else failing_vpas)
        )
        self.delay_seconds = (
            settings.simulator_processing_delay_seconds if delay_seconds is None else delay_seconds
        )

    @property
    def name(self) -> str:
        return "simulator"

    def _is_marked_to_fail(self, payment: Payment) -> bool:
        if payment.method is PaymentMethod.CARD:
            return payment.card_last4 in self.failing_card_last4
        if payment.method is PaymentMethod.UPI and payment.vpa:
            local_part = payment.vpa.split("@", 1)[0].lower()
            return local_part in self.failing_vpas
        return False

    async def process(self, payment: Payment) -> ProcessingResult:
        """Approve or decline based on the instrument's failure markers."""
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        if self._is_marked_to_fail(payment):
            if payment.method is PaymentMethod.CARD:
                return ProcessingResult.declined(error_description="Card declined by issuer")
            return ProcessingResult.declined(error_description="UPI payment declined by payer bank")

        return ProcessingResult.approved()
