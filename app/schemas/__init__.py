"""Pydantic schemas for API validation."""

from app.schemas.merchant import SandboxMerchantResponse
from app.schemas.order import OrderCreate, OrderResponse, PublicOrderResponse
from app.schemas.payment import CardDetails, PaymentCreate, PaymentListResponse
from app.schemas.reporting import PaymentStatsResponse

__all__ = [
    # Merchant
    "SandboxMerchantResponse",
    # Order
    "OrderCreate",
    "OrderResponse",
    "PublicOrderResponse",
    # Payment
    "CardDetails",
    "PaymentCreate",
    "PaymentListResponse",
    # Reporting
    "PaymentStatsResponse",
]
