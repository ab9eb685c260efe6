"""Custom application exceptions."""

from enum import Enum

from fastapi import HTTPException, status


class ErrorCode(str, Enum):
    """Error codes surfaced to API callers."""

    BAD_REQUEST_ERROR = "BAD_REQUEST_ERROR"
    INVALID_VPA = "INVALID_VPA"
    INVALID_CARD = "INVALID_CARD"
    EXPIRED_CARD = "EXPIRED_CARD"
    NOT_FOUND_ERROR = "NOT_FOUND_ERROR"
    AUTHENTICATION_ERROR = "AUTHENTICATION_ERROR"
    SERVER_ERROR = "SERVER_ERROR"


# Every input-error code is a 400; the rest map one-to-one.
ERROR_STATUS_CODES: dict[ErrorCode, int] = {
    ErrorCode.BAD_REQUEST_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_VPA: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_CARD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.EXPIRED_CARD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.NOT_FOUND_ERROR: status.HTTP_404_NOT_FOUND,
    ErrorCode.AUTHENTICATION_ERROR: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.SERVER_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        code: ErrorCode = ErrorCode.SERVER_ERROR,
        description: str = "Internal server error",
        headers: dict[str, str] | None = None,
    ) -> None:
        self.code = code
        self.description = description
        super().__init__(
            status_code=ERROR_STATUS_CODES[code],
            detail=description,
            headers=headers,
        )

    def to_body(self) -> dict:
        """Render the error envelope returned to callers."""
        return {"error": {"code": self.code.value, "description": self.description}}


class BadRequestError(AppException):
    """Malformed or invalid request input."""

    def __init__(
        self,
        description: str = "Invalid request",
        code: ErrorCode = ErrorCode.BAD_REQUEST_ERROR,
    ) -> None:
        super().__init__(code=code, description=description)


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource") -> None:
        super().__init__(code=ErrorCode.NOT_FOUND_ERROR, description=f"{resource} not found")


class AuthenticationError(AppException):
    """Authentication failed exception."""

    def __init__(self, description: str = "Invalid API credentials") -> None:
        super().__init__(code=ErrorCode.AUTHENTICATION_ERROR, description=description)


class ServerError(AppException):
    """Opaque internal failure. Details belong in the server log only."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.SERVER_ERROR, description="Internal server error")


class PaymentConsistencyError(Exception):
    """Payment core invariant violated.

    Internal failure; the API layer reports it as SERVER_ERROR.
    """


class InvalidPaymentTransition(PaymentConsistencyError):
    """Raised when a payment is driven through a transition it does not allow."""

    def __init__(self, payment_id: str, current: str, target: str) -> None:
        self.payment_id = payment_id
        self.current = current
        self.target = target
        super().__init__(
            f"Invalid payment transition for {payment_id}: {current} → {target}"
        )
