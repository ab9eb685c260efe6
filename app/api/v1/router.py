"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from app.api.v1 import merchants, orders, payments

api_router = APIRouter()

# Sandbox
api_router.include_router(merchants.router, prefix="/test", tags=["Sandbox"])

# Orders
api_router.include_router(orders.router, prefix="/orders", tags=["Orders"])

# Payments
api_router.include_router(payments.router, prefix="/payments", tags=["Payments"])
