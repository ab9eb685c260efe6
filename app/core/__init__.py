"""Core utilities: exceptions, logging and middleware."""

from app.core.exceptions import (
    AppException,
    AuthenticationError,
    BadRequestError,
    ErrorCode,
    InvalidPaymentTransition,
    NotFoundError,
    PaymentConsistencyError,
    ServerError,
)

__all__ = [
    "AppException",
    "AuthenticationError",
    "BadRequestError",
    "ErrorCode",
    "InvalidPaymentTransition",
    "NotFoundError",
    "PaymentConsistencyError",
    "ServerError",
]
