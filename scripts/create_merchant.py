#!/usr/bin/env python3
"""Create or refresh the sandbox test merchant."""

import asyncio

from app.config import Settings, settings
from app.database import AsyncSessionLocal
from app.services.merchant_service import seed_test_merchant
from app.utils.identifiers import generate_api_credentials


async def create_merchant(app_settings: Settings) -> None:
    """Seed the merchant and print its credentials."""
    async with AsyncSessionLocal() as session:
        merchant = await seed_test_merchant(session, app_settings)

    print(f"Merchant: {merchant.email}")
    print(f"API key: {merchant.api_key}")
    print(f"API secret: {merchant.api_secret}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create the sandbox test merchant")
    parser.add_argument("--email", default=settings.test_merchant_email, help="Merchant email")
    parser.add_argument("--name", default=settings.test_merchant_name, help="Merchant name")
    parser.add_argument("--api-key", default=settings.test_merchant_api_key, help="API key")
    parser.add_argument("--api-secret", default=settings.test_merchant_api_secret, help="API secret")
    parser.add_argument(
        "--generate", action="store_true", help="Generate a fresh API key and secret"
    )

    args = parser.parse_args()
    if args.generate:
        args.api_key, args.api_secret = generate_api_credentials()

    asyncio.run(
        create_merchant(
            settings.model_copy(
                update={
                    "test_merchant_email": args.email,
                    "test_merchant_name": args.name,
                    "test_merchant_api_key": args.api_key,
                    "test_merchant_api_secret": args.api_secret,
                }
            )
        )
    )
