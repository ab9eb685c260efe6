"""Payment-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field

from app.domain.payment_method import CardInstrument, PaymentAttempt, PaymentMethod, UpiInstrument


class CardDetails(BaseModel):
    """Card fields as typed by the payer.

    Presence is checked by the payment builder so that a missing field
    surfaces as BAD_REQUEST_ERROR in the documented order.
    """

    # Numeric JSON values for number and cvv are accepted as typed
    model_config = ConfigDict(coerce_numbers_to_str=True)

    number: str | None = None
    expiry_month: int | str | None = None
    expiry_year: int | str | None = None
    cvv: str | None = None
    holder_name: str | None = None


class PaymentCreate(BaseModel):
    """Schema for submitting a payment against an order."""

    order_id: str = Field(..., min_length=1, max_length=64)
    method: str
    # For UPI payments
    vpa: str | None = None
    # For card payments
    card: CardDetails | None = None
    # Honoured only on the public checkout when overrides are enabled
    amount: int | float | str | None = None

    def to_attempt(self) -> PaymentAttempt:
        """Convert to the core's attempt type with a method-specific payload."""
        method = PaymentMethod.parse(self.method)
        instrument: CardInstrument | UpiInstrument | None = None
        if method is PaymentMethod.UPI:
            instrument = UpiInstrument(vpa=self.vpa)
        elif method is PaymentMethod.CARD and self.card is not None:
            instrument = CardInstrument(
                number=self.card.number,
                expiry_month=self.card.expiry_month,
                expiry_year=self.card.expiry_year,
                cvv=self.card.cvv,
                holder_name=self.card.holder_name,
            )

        return PaymentAttempt(
            order_id=self.order_id,
            method=self.method,
            instrument=instrument,
            amount=self.amount,
        )


class PaymentListResponse(BaseModel):
    """Schema for a merchant's payment list."""

    items: list[dict]
    count: int
