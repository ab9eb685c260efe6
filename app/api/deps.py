"""API dependencies for authentication and service wiring."""

from typing import Annotated

from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.core.exceptions import AuthenticationError
from app.database import get_db
from app.domain.entities import Merchant
from app.repositories.base import PaymentRepository
from app.repositories.sql import SqlPaymentRepository
from app.services.payment_service import PaymentService
from app.services.reporting_service import ReportingService


async def get_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PaymentRepository:
    """Repository bound to the request's database session."""
    return SqlPaymentRepository(db)


async def get_payment_service(
    repository: Annotated[PaymentRepository, Depends(get_repository)],
) -> PaymentService:
    return PaymentService(repository)


async def get_reporting_service(
    repository: Annotated[PaymentRepository, Depends(get_repository)],
) -> ReportingService:
    return ReportingService(repository)


async def get_current_merchant(
    repository: Annotated[PaymentRepository, Depends(get_repository)],
    x_api_key: Annotated[str | None, Header()] = None,
    x_api_secret: Annotated[str | None, Header()] = None,
) -> Merchant:
    """Authenticate the merchant from X-Api-Key and X-Api-Secret headers."""
    if not x_api_key or not x_api_secret:
        raise AuthenticationError()

    merchant = await repository.get_merchant_by_credentials(x_api_key, x_api_secret)
    if merchant is None:
        raise AuthenticationError()

    return merchant


CurrentMerchant = Annotated[Merchant, Depends(get_current_merchant)]
Repository = Annotated[PaymentRepository, Depends(get_repository)]
AppSettings = Annotated[Settings, Depends(get_settings)]
