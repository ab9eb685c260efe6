"""Application configuration via pydantic-settings."""

from __future__ import annotations

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Payment Gateway Simulator"
    app_version: str = "1.0.0"
    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 4

    # Database
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "gateway"
    postgres_password: str = Field(default="gateway_secret")
    postgres_db: str = "payment_gateway"
    db_pool_size: int = 20
    db_max_overflow: int = 10

    @computed_field
    @property
    def database_url(self) -> str:
        """Async PostgreSQL connection URL."""
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @computed_field
    @property
    def sync_database_url(self) -> str:
        """Sync PostgreSQL connection URL for Alembic."""
        return self.database_url.replace("+asyncpg", "", 1)

    # CORS
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Orders
    default_currency: str = "INR"

    # Payments
    # Lets the public checkout charge an amount other than the order's.
    allow_amount_override: bool = True
    payment_processing_timeout_seconds: float = 5.0

    # Simulated acquirer
    simulator_processing_delay_seconds: float = 0.0
    simulator_failing_card_last4: List[str] = ["0002"]
    simulator_failing_vpas: List[str] = ["fail"]

    # Test merchant (seeded for local checkout)
    test_merchant_name: str = "Test Merchant"
    test_merchant_email: str = "test@example.com"
    test_merchant_api_key: str = "key_test_abc123"
    test_merchant_api_secret: str = Field(default="secret_test_xyz789")
    expose_test_merchant: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
