"""Sandbox merchant seeding."""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, settings as default_settings
from app.models.merchant import Merchant

logger = logging.getLogger(__name__)


async def seed_test_merchant(db: AsyncSession, app_settings: Settings | None = None) -> Merchant:
    """Create the test merchant, or refresh its credentials if it exists."""
    app_settings = app_settings or default_settings

    result = await db.execute(
        select(Merchant).where(Merchant.email == app_settings.test_merchant_email)
    )
    merchant = result.scalar_one_or_none()

    if merchant:
        merchant.api_key = app_settings.test_merchant_api_key
        merchant.api_secret = app_settings.test_merchant_api_secret
        merchant.is_active = True
        logger.info(f"Test merchant refreshed: {merchant.email}")
    else:
        merchant = Merchant(
            name=app_settings.test_merchant_name,
            email=app_settings.test_merchant_email,
            api_key=app_settings.test_merchant_api_key,
            api_secret=app_settings.test_merchant_api_secret,
            is_active=True,
        )
        db.add(merchant)
        logger.info(f"Test merchant created: {merchant.email}")

    await db.commit()
    return merchant
