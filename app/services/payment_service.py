"""Payment service.

Drives payments through their lifecycle:

    build (validate + normalize) → create → process → project

The repository and the processing gateway are injected; this module never
opens a database session of its own.
"""

import asyncio
import logging
from dataclasses import dataclass, replace
from datetime import UTC, datetime

from app.config import settings
from app.core.exceptions import InvalidPaymentTransition, PaymentConsistencyError
from app.domain.entities import NormalizedPayment, Order, Payment
from app.domain.payment_builder import BuildError, build
from app.domain.payment_method import CardInstrument, PaymentAttempt, PaymentMethod
from app.domain.payment_state import (
    FAILED,
    PROCESSING,
    SUCCESS,
    assert_payment_transition,
    is_terminal,
)
from app.gateways.base import (
    PAYMENT_FAILED,
    PAYMENT_TIMEOUT,
    ProcessingGateway,
    ProcessingResult,
)
from app.gateways.simulator import SimulatedGateway
from app.repositories.base import PaymentRepository
from app.utils.validators import clean_card_number, mask_sensitive_data

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubmissionResult:
    """Outcome of a payment submission: a processed payment or a rejection."""

    payment: Payment | None = None
    error: BuildError | None = None


class PaymentService:
    """Payment state machine operations over an injected repository."""

    def __init__(
        self,
        repository: PaymentRepository,
        gateway: ProcessingGateway | None = None,
        processing_timeout: float | None = None,
    ):
        self.repository = repository
        self.gateway = gateway or SimulatedGateway()
        self.processing_timeout = (
            settings.payment_processing_timeout_seconds
            if processing_timeout is None
            else processing_timeout
        )

    async def create(self, merchant_id: str, normalized: NormalizedPayment) -> Payment:
        """Persist a new payment in created state."""
        payment = await self.repository.create_payment(merchant_id, normalized)
        logger.info(
            f"Payment created: id={payment.id} order={payment.order_id} "
            f"method={payment.method.value} amount={payment.amount} {payment.currency}"
        )
        return payment

    async def process(self, payment_id: str, method: PaymentMethod | str) -> Payment:
        """Run a created payment through processing to a terminal state.

        Raises:
            PaymentConsistencyError: If the payment is missing, already
                processed, or was created with a different method
        """
        payment = await self.repository.get_payment_by_id(payment_id)
        if payment is None:
            raise PaymentConsistencyError(f"Payment {payment_id} does not exist")
        requested = PaymentMethod.parse(method)
        if requested != payment.method:
            raise PaymentConsistencyError(
                f"Payment {payment_id} was created as {payment.method.value}, "
                f"cannot process as {method!r}"
            )
        if is_terminal(payment.status):
            raise InvalidPaymentTransition(payment_id, payment.status, PROCESSING)

        await self._transition(payment, PROCESSING)

        result = await self._run_gateway(payment)

        if result.success:
            await self._transition(payment, SUCCESS)
        else:
            await self._transition(
                payment,
                FAILED,
                error_code=result.error_code or PAYMENT_FAILED,
                error_description=result.error_description or "Payment processing failed",
            )

        logger.info(f"Payment processed: id={payment.id} status={payment.status}")
        return payment

    async def get(self, payment_id: str, merchant_id: str) -> Payment | None:
        """Look up a payment owned by the merchant."""
        return await self.repository.get_payment(payment_id, merchant_id)

    async def submit(
        self,
        merchant_id: str,
        order: Order,
        attempt: PaymentAttempt,
        allow_amount_override: bool = False,
    ) -> SubmissionResult:
        """Validate, create and process a payment for an order."""
        result = build(order, attempt, allow_amount_override=allow_amount_override)
        if not result.ok:
            card = ""
            if isinstance(attempt.instrument, CardInstrument):
                card = f" card={mask_sensitive_data(clean_card_number(attempt.instrument.number))}"
            logger.info(
                f"Payment rejected: order={order.id} code={result.error.code.value}{card}"
            )
            return SubmissionResult(error=result.error)

        payment = await self.create(merchant_id, result.payment)
        payment = await self.process(payment.id, payment.method)
        return SubmissionResult(payment=payment)

    async def _run_gateway(self, payment: Payment) -> ProcessingResult:
        try:
            return await asyncio.wait_for(
                self.gateway.process(replace(payment)),
                timeout=self.processing_timeout,
            )
        except TimeoutError:
            logger.warning(
                f"Payment processing timed out: id={payment.id} "
                f"gateway={self.gateway.name} timeout={self.processing_timeout}s"
            )
            return ProcessingResult.declined(
                error_code=PAYMENT_TIMEOUT,
                error_description="Payment processing timed out",
            )
        except Exception:
            logger.exception(
                f"Payment gateway error: id={payment.id} gateway={self.gateway.name}"
            )
            return ProcessingResult.declined()

    async def _transition(
        self,
        payment: Payment,
        target: str,
        error_code: str | None = None,
        error_description: str | None = None,
    ) -> None:
        assert_payment_transition(payment.id, payment.status, target)

        payment.status = target
        if target == FAILED:
            payment.error_code = error_code
            payment.error_description = error_description
        else:
            payment.error_code = None
            payment.error_description = None
        payment.updated_at = datetime.now(UTC)

        await self.repository.save_payment(payment)
