"""Sandbox merchant endpoint."""

from fastapi import APIRouter

from app.api.deps import AppSettings, Repository
from app.core.exceptions import NotFoundError
from app.schemas.merchant import SandboxMerchantResponse

router = APIRouter()


@router.get("/merchant", response_model=SandboxMerchantResponse)
async def get_test_merchant(
    repository: Repository,
    app_settings: AppSettings,
) -> dict:
    """Return the seeded test merchant so local clients can authenticate."""
    if not app_settings.expose_test_merchant:
        raise NotFoundError("Merchant")

    merchant = await repository.get_merchant_by_email(app_settings.test_merchant_email)
    if not merchant:
        raise NotFoundError("Merchant")

    return {
        "id": merchant.id,
        "email": merchant.email,
        "api_key": merchant.api_key,
        "api_secret": merchant.api_secret,
    }
