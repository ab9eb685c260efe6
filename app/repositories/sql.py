"""SQLAlchemy-backed repository."""

from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Merchant, NormalizedPayment, Order, Payment
from app.domain.payment_method import CardNetwork, PaymentMethod
from app.domain.payment_state import CREATED
from app.models.merchant import Merchant as MerchantRow
from app.models.order import Order as OrderRow
from app.models.payment import Payment as PaymentRow
from app.repositories.base import PaymentRepository
from app.utils.identifiers import generate_order_id, generate_payment_id


def _to_merchant(row: MerchantRow) -> Merchant:
    return Merchant(
        id=str(row.id),
        name=row.name,
        email=row.email,
        api_key=row.api_key,
        api_secret=row.api_secret,
        is_active=row.is_active,
        created_at=row.created_at,
    )


def _to_order(row: OrderRow) -> Order:
    return Order(
        id=row.id,
        merchant_id=str(row.merchant_id),
        amount=row.amount,
        currency=row.currency,
        receipt=row.receipt,
        notes=row.notes or {},
        status=row.status,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_payment(row: PaymentRow) -> Payment:
    return Payment(
        id=row.id,
        order_id=row.order_id,
        merchant_id=str(row.merchant_id),
        method=PaymentMethod(row.method),
        amount=row.amount,
        currency=row.currency,
        status=row.status,
        vpa=row.vpa,
        card_network=CardNetwork(row.card_network) if row.card_network else None,
        card_last4=row.card_last4,
        error_code=row.error_code,
        error_description=row.error_description,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlPaymentRepository(PaymentRepository):
    """Repository over an async SQLAlchemy session.

    The session's transaction is committed by the request scope that owns it.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_merchant_by_credentials(self, api_key: str, api_secret: str) -> Merchant | None:
        result = await self.db.execute(
            select(MerchantRow).where(
                MerchantRow.api_key == api_key,
                MerchantRow.api_secret == api_secret,
                MerchantRow.is_active.is_(True),
            )
        )
        row = result.scalar_one_or_none()
        return _to_merchant(row) if row else None

    async def get_merchant_by_email(self, email: str) -> Merchant | None:
        result = await self.db.execute(select(MerchantRow).where(MerchantRow.email == email))
        row = result.scalar_one_or_none()
        return _to_merchant(row) if row else None

    async def create_order(
        self,
        merchant_id: str,
        amount: int,
        currency: str,
        receipt: str | None = None,
        notes: dict[str, Any] | None = None,
    ) -> Order:
        now = datetime.now(UTC)
        row = OrderRow(
            id=generate_order_id(),
            merchant_id=UUID(merchant_id),
            amount=amount,
            currency=currency,
            receipt=receipt,
            notes=notes or {},
            status="created",
            created_at=now,
            updated_at=now,
        )
        self.db.add(row)
        await self.db.flush()
        return _to_order(row)

    async def get_order(self, order_id: str, merchant_id: str) -> Order | None:
        result = await self.db.execute(
            select(OrderRow).where(
                OrderRow.id == order_id,
                OrderRow.merchant_id == UUID(merchant_id),
            )
        )
        row = result.scalar_one_or_none()
        return _to_order(row) if row else None

    async def get_order_by_id(self, order_id: str) -> Order | None:
        row = await self.db.get(OrderRow, order_id)
        return _to_order(row) if row else None

    async def create_payment(self, merchant_id: str, normalized: NormalizedPayment) -> Payment:
        now = datetime.now(UTC)
        row = PaymentRow(
            id=generate_payment_id(),
            order_id=normalized.order_id,
            merchant_id=UUID(merchant_id),
            method=normalized.method.value,
            amount=normalized.amount,
            currency=normalized.currency,
            status=CREATED,
            vpa=normalized.vpa,
            card_network=normalized.card_network.value if normalized.card_network else None,
            card_last4=normalized.card_last4,
            created_at=now,
            updated_at=now,
        )
        self.db.add(row)
        await self.db.flush()
        return _to_payment(row)

    async def save_payment(self, payment: Payment) -> Payment:
        row = await self.db.get(PaymentRow, payment.id)
        if row is None:
            raise LookupError(f"Payment {payment.id} does not exist")

        row.status = payment.status
        row.error_code = payment.error_code
        row.error_description = payment.error_description
        row.updated_at = payment.updated_at
        await self.db.flush()
        return _to_payment(row)

    async def get_payment(self, payment_id: str, merchant_id: str) -> Payment | None:
        result = await self.db.execute(
            select(PaymentRow).where(
                PaymentRow.id == payment_id,
                PaymentRow.merchant_id == UUID(merchant_id),
            )
        )
        row = result.scalar_one_or_none()
        return _to_payment(row) if row else None

    async def get_payment_by_id(self, payment_id: str) -> Payment | None:
        row = await self.db.get(PaymentRow, payment_id)
        return _to_payment(row) if row else None

    async def list_payments(self, merchant_id: str) -> list[Payment]:
        result = await self.db.execute(
            select(PaymentRow)
            .where(PaymentRow.merchant_id == UUID(merchant_id))
            .order_by(PaymentRow.created_at.desc())
        )
        return [_to_payment(row) for row in result.scalars().all()]
