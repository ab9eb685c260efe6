"""Base processing gateway interface.

A gateway decides the outcome of a payment attempt. It stands in for an
acquirer integration and must not touch payment state: the payment service
owns every status transition.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.domain.entities import Payment

PAYMENT_FAILED = "PAYMENT_FAILED"
PAYMENT_TIMEOUT = "PAYMENT_TIMEOUT"


@dataclass
class ProcessingResult:
    """Outcome of a processing attempt."""

    success: bool
    error_code: str | None = None
    error_description: str | None = None

    @classmethod
    def approved(cls) -> "ProcessingResult":
        return cls(success=True)

    @classmethod
    def declined(
        cls,
        error_code: str = PAYMENT_FAILED,
        error_description: str = "Payment processing failed",
    ) -> "ProcessingResult":
        return cls(success=False, error_code=error_code, error_description=error_description)


class ProcessingGateway(ABC):
    """Abstract base class for processing gateways."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the gateway name used in logs."""
        pass

    @abstractmethod
    async def process(self, payment: Payment) -> ProcessingResult:
        """Decide whether a payment succeeds.

        Args:
            payment: Payment in processing state

        Returns:
            ProcessingResult with the outcome
        """
        pass
