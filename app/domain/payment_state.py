"""Payment state machine.

States:
- created: Payment recorded, not yet sent for processing
- processing: Outcome being decided by the processing gateway
- success: Captured (terminal)
- failed: Declined or timed out; carries error_code/error_description (terminal)
"""

from app.core.exceptions import InvalidPaymentTransition

CREATED = "created"
PROCESSING = "processing"
SUCCESS = "success"
FAILED = "failed"

PAYMENT_TRANSITIONS: dict[str, set[str]] = {
    CREATED: {PROCESSING},
    PROCESSING: {SUCCESS, FAILED},
    SUCCESS: set(),
    FAILED: set(),
}

TERMINAL_STATES = frozenset({SUCCESS, FAILED})
FAILURE_STATES = frozenset({FAILED})


def assert_payment_transition(payment_id: str, current: str, target: str) -> None:
    """Validate payment state transition.

    Args:
        payment_id: Payment being transitioned
        current: Current payment status
        target: Target payment status

    Raises:
        InvalidPaymentTransition: If transition is not allowed
    """
    allowed = PAYMENT_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise InvalidPaymentTransition(payment_id, current, target)


def is_terminal(status: str) -> bool:
    return status in TERMINAL_STATES


def is_failure(status: str) -> bool:
    return status in FAILURE_STATES
