"""Payment endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from app.api.deps import AppSettings, CurrentMerchant, Repository, get_payment_service, get_reporting_service
from app.core.exceptions import BadRequestError, NotFoundError
from app.domain.projection import project
from app.schemas.payment import PaymentCreate, PaymentListResponse
from app.schemas.reporting import PaymentStatsResponse
from app.services.payment_service import PaymentService, SubmissionResult
from app.services.reporting_service import ReportingService

router = APIRouter()

PaymentServiceDep = Annotated[PaymentService, Depends(get_payment_service)]


def _created_view(result: SubmissionResult) -> dict:
    if result.error:
        raise BadRequestError(result.error.description, code=result.error.code)
    return project(result.payment)


@router.get("/list", response_model=PaymentListResponse)
async def list_payments(
    merchant: CurrentMerchant,
    repository: Repository,
) -> dict:
    """List the authenticated merchant's payments, newest first."""
    payments = await repository.list_payments(merchant.id)
    items = [project(p, include_updated_at=True) for p in payments]
    return {"items": items, "count": len(items)}


@router.get("/stats", response_model=PaymentStatsResponse)
async def get_payment_stats(
    merchant: CurrentMerchant,
    reporting: Annotated[ReportingService, Depends(get_reporting_service)],
) -> dict:
    """Dashboard totals for the authenticated merchant."""
    return await reporting.get_payment_stats(merchant.id)


@router.post("/public", status_code=status.HTTP_201_CREATED)
async def create_payment_public(
    payment_data: PaymentCreate,
    repository: Repository,
    payments: PaymentServiceDep,
    app_settings: AppSettings,
) -> dict:
    """Submit a payment from the hosted checkout (no merchant credentials)."""
    order = await repository.get_order_by_id(payment_data.order_id)
    if not order:
        raise NotFoundError("Order")

    result = await payments.submit(
        merchant_id=order.merchant_id,
        order=order,
        attempt=payment_data.to_attempt(),
        allow_amount_override=app_settings.allow_amount_override,
    )
    return _created_view(result)


@router.get("/{payment_id}/public")
async def get_payment_public(
    payment_id: str,
    repository: Repository,
) -> dict:
    """Get payment status for the hosted checkout."""
    payment = await repository.get_payment_by_id(payment_id)
    if not payment:
        raise NotFoundError("Payment")
    return project(payment, include_updated_at=True)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_payment(
    payment_data: PaymentCreate,
    merchant: CurrentMerchant,
    repository: Repository,
    payments: PaymentServiceDep,
) -> dict:
    """Submit a payment for one of the authenticated merchant's orders.

    The order amount is always charged on this path.
    """
    order = await repository.get_order(payment_data.order_id, merchant.id)
    if not order:
        raise NotFoundError("Order")

    result = await payments.submit(
        merchant_id=merchant.id,
        order=order,
        attempt=payment_data.to_attempt(),
    )
    return _created_view(result)


@router.get("/{payment_id}")
async def get_payment(
    payment_id: str,
    merchant: CurrentMerchant,
    payments: PaymentServiceDep,
) -> dict:
    """Get a payment owned by the authenticated merchant."""
    payment = await payments.get(payment_id, merchant.id)
    if not payment:
        raise NotFoundError("Payment")
    return project(payment, include_updated_at=True)
