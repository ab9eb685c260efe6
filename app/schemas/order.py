"""Order-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from app.config import settings
from app.utils.validators import MAX_AMOUNT


class OrderCreate(BaseModel):
    """Schema for creating an order."""

    amount: int = Field(..., gt=0, le=MAX_AMOUNT, description="Amount in paise")
    currency: str = Field(default=settings.default_currency, pattern="^[A-Z]{3}$")
    receipt: str | None = Field(None, max_length=255)
    notes: dict[str, Any] | None = None


class OrderResponse(BaseModel):
    """Schema for order response."""

    id: str
    merchant_id: str
    amount: int
    currency: str
    receipt: str | None
    notes: dict[str, Any]
    status: str
    created_at: datetime


class PublicOrderResponse(BaseModel):
    """Order fields safe to show on the hosted checkout page."""

    id: str
    amount: int
    currency: str
    status: str
