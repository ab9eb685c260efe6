"""Merchant-related Pydantic schemas."""

from pydantic import BaseModel


class SandboxMerchantResponse(BaseModel):
    """Seeded sandbox merchant shown to local checkout clients."""

    id: str
    email: str
    api_key: str
    api_secret: str
    seeded: bool = True
