"""Order endpoints."""

from dataclasses import asdict

from fastapi import APIRouter, status

from app.api.deps import CurrentMerchant, Repository
from app.core.exceptions import NotFoundError
from app.schemas.order import OrderCreate, OrderResponse, PublicOrderResponse

router = APIRouter()


@router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    order_data: OrderCreate,
    merchant: CurrentMerchant,
    repository: Repository,
) -> dict:
    """Create an order for the authenticated merchant."""
    order = await repository.create_order(
        merchant_id=merchant.id,
        amount=order_data.amount,
        currency=order_data.currency,
        receipt=order_data.receipt,
        notes=order_data.notes,
    )
    return asdict(order)


@router.get("/{order_id}/public", response_model=PublicOrderResponse)
async def get_order_public(
    order_id: str,
    repository: Repository,
) -> dict:
    """Get the checkout-safe view of an order."""
    order = await repository.get_order_by_id(order_id)
    if not order:
        raise NotFoundError("Order")
    return asdict(order)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: str,
    merchant: CurrentMerchant,
    repository: Repository,
) -> dict:
    """Get an order owned by the authenticated merchant."""
    order = await repository.get_order(order_id, merchant.id)
    if not order:
        raise NotFoundError("Order")
    return asdict(order)
