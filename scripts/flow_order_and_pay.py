#!/usr/bin/env python3
"""
Order and payment flow smoke script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_order_and_pay.py --amount 50000 --method upi --vpa alice@okbank
    python scripts/flow_order_and_pay.py --amount 50000 --method card --card-number "4111 1111 1111 1111"

Flow:
    1. Fetch sandbox merchant credentials
    2. Create order
    3. Submit payment
    4. Fetch payment status
"""

import argparse
import json
import sys
from datetime import date

import httpx

BASE_URL = "http://localhost:8000"


def api_request(
    credentials: dict | None,
    method: str,
    endpoint: str,
    data: dict | None = None,
) -> dict:
    """Make an API request, authenticated when credentials are given."""
    headers = {}
    if credentials:
        headers = {
            "X-Api-Key": credentials["api_key"],
            "X-Api-Secret": credentials["api_secret"],
        }
    url = f"{BASE_URL}{endpoint}"

    if method == "GET":
        response = httpx.get(url, headers=headers, timeout=10.0)
    elif method == "POST":
        response = httpx.post(url, headers=headers, json=data or {}, timeout=10.0)
    else:
        raise ValueError(f"Unknown method: {method}")

    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict) -> bool:
    """Print result; return False on an error status."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    print(json.dumps(result["data"], indent=2))
    return True


def main():
    parser = argparse.ArgumentParser(description="Order and payment flow")
    parser.add_argument("--amount", type=int, default=50000, help="Order amount in paise")
    parser.add_argument("--currency", default="INR", help="Order currency")
    parser.add_argument("--method", choices=["card", "upi"], default="upi", help="Payment method")
    parser.add_argument("--vpa", default="alice@okbank", help="VPA for UPI payments")
    parser.add_argument("--card-number", default="4111 1111 1111 1111", help="Card number")
    parser.add_argument("--public", action="store_true", help="Use the public checkout endpoints")
    args = parser.parse_args()

    # Step 1: Sandbox credentials
    print_step(1, "Fetch sandbox merchant")
    merchant_result = api_request(None, "GET", "/api/v1/test/merchant")
    if not print_result(merchant_result):
        sys.exit(1)
    credentials = merchant_result["data"]

    # Step 2: Create order
    print_step(2, "Create order")
    order_result = api_request(credentials, "POST", "/api/v1/orders", {
        "amount": args.amount,
        "currency": args.currency,
    })
    if not print_result(order_result):
        sys.exit(1)
    order_id = order_result["data"]["id"]

    # Step 3: Submit payment
    print_step(3, f"Submit {args.method} payment")
    payload: dict = {"order_id": order_id, "method": args.method}
    if args.method == "upi":
        payload["vpa"] = args.vpa
    else:
        payload["card"] = {
            "number": args.card_number,
            "expiry_month": 12,
            "expiry_year": date.today().year + 2,
            "cvv": "123",
            "holder_name": "Sandbox Payer",
        }

    endpoint = "/api/v1/payments/public" if args.public else "/api/v1/payments"
    payment_result = api_request(None if args.public else credentials, "POST", endpoint, payload)
    if not print_result(payment_result):
        sys.exit(1)
    payment_id = payment_result["data"]["id"]

    # Step 4: Fetch payment
    print_step(4, "Fetch payment")
    endpoint = f"/api/v1/payments/{payment_id}/public" if args.public else f"/api/v1/payments/{payment_id}"
    status_result = api_request(None if args.public else credentials, "GET", endpoint)
    if not print_result(status_result):
        sys.exit(1)

    print("\n" + "="*60)
    print(f"FLOW COMPLETE: payment {payment_id} is {status_result['data']['status']}")
    print("="*60)


if __name__ == "__main__":
    main()
