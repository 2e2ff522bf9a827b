"""
Demo script for the PayOS relay.

Creates a payment link through a running relay, then posts a correctly
signed sample webhook (and a tampered one) to show signature verification.

Usage:
    python scripts/demo.py [--api-url URL] [--amount N] [--order-code N]
"""

import argparse
import json
import os
import random
import sys
from dataclasses import dataclass
from typing import Any

import httpx

from shared.signing import create_signature


@dataclass
class DemoConfig:
    api_url: str
    amount: int
    description: str
    order_code: int
    checksum_key: str
    seed: int


def generate_order_code(rng: random.Random) -> int:
    return rng.randint(100_000, 999_999_999)


def build_payment_body(config: DemoConfig) -> dict[str, Any]:
    return {
        "amount": config.amount,
        "description": config.description,
        "orderCode": config.order_code,
    }


def build_webhook_data(order_code: int, amount: int, description: str) -> dict[str, Any]:
    return {
        "orderCode": order_code,
        "amount": amount,
        "description": description,
        "accountNumber": "12345678",
        "reference": f"FT{order_code}",
        "transactionDateTime": "2024-01-15 12:00:00",
        "currency": "VND",
        "paymentLinkId": f"demo-{order_code}",
        "code": "00",
        "desc": "success",
        "counterAccountBankId": None,
        "counterAccountBankName": None,
        "counterAccountName": None,
        "counterAccountNumber": None,
        "virtualAccountName": None,
        "virtualAccountNumber": None,
    }


def build_signed_webhook(data: dict[str, Any], checksum_key: str) -> dict[str, Any]:
    return {
        "code": "00",
        "desc": "success",
        "success": True,
        "data": data,
        "signature": create_signature(data, checksum_key),
    }


def tamper_webhook(webhook: dict[str, Any]) -> dict[str, Any]:
    data = dict(webhook["data"])
    data["amount"] = data["amount"] + 1
    return {**webhook, "data": data}


def post_json(client: httpx.Client, url: str, body: dict[str, Any]) -> tuple[int, Any]:
    response = client.post(url, json=body)
    try:
        return response.status_code, response.json()
    except ValueError:
        return response.status_code, response.text


def print_separator() -> None:
    print("=" * 70)


def print_header(text: str) -> None:
    print_separator()
    print(f"  {text}")
    print_separator()


def run_demo(config: DemoConfig) -> dict[str, Any]:
    print_header("PayOS Relay Demo")
    print("\nConfiguration:")
    print(f"  API URL:         {config.api_url}")
    print(f"  Amount:          {config.amount}")
    print(f"  Order code:      {config.order_code}")
    print()

    results: dict[str, Any] = {}

    with httpx.Client(timeout=10.0) as client:
        print_header("Creating Payment Link")
        status, body = post_json(
            client, f"{config.api_url}/create-payment", build_payment_body(config)
        )
        results["create_payment_status"] = status
        print(f"  Status: {status}")
        print(f"  Body:   {json.dumps(body, ensure_ascii=False)}")
        print()

        print_header("Sending Signed Webhook")
        data = build_webhook_data(config.order_code, config.amount, config.description)
        webhook = build_signed_webhook(data, config.checksum_key)
        status, body = post_json(client, f"{config.api_url}/webhook", webhook)
        results["webhook_status"] = status
        print(f"  Status: {status}")
        print(f"  Body:   {json.dumps(body, ensure_ascii=False)}")
        print()

        print_header("Sending Tampered Webhook")
        status, body = post_json(client, f"{config.api_url}/webhook", tamper_webhook(webhook))
        results["tampered_webhook_status"] = status
        print(f"  Status: {status}")
        print(f"  Body:   {json.dumps(body, ensure_ascii=False)}")
        print()

    print_header("Example curl Commands")

    print("\n# Health check:")
    print(f"curl -s {config.api_url}/health | jq")

    print("\n# Create a payment link:")
    print(f"curl -X POST {config.api_url}/create-payment \\")
    print("  -H 'Content-Type: application/json' \\")
    print(f"  -d '{json.dumps(build_payment_body(config), ensure_ascii=False)}' | jq")

    print("\n# Get metrics (Prometheus format):")
    print(f"curl -s {config.api_url}/metrics")

    print()
    print_separator()
    print("  Demo complete!")
    print_separator()

    return results


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Demo script for the PayOS relay",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "--api-url",
        default="http://localhost:3000",
        help="Relay base URL",
    )
    parser.add_argument(
        "--amount",
        type=int,
        default=10000,
        help="Payment amount in VND",
    )
    parser.add_argument(
        "--description",
        default="Demo order",
        help="Payment description",
    )
    parser.add_argument(
        "--order-code",
        type=int,
        default=None,
        help="Order code (random when omitted)",
    )
    parser.add_argument(
        "--checksum-key",
        default=os.environ.get("PAYOS_CHECKSUM_KEY", ""),
        help="Checksum key used to sign the sample webhook",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for the generated order code",
    )

    args = parser.parse_args()

    if not args.checksum_key:
        print("Error: a checksum key is required (--checksum-key or PAYOS_CHECKSUM_KEY)")
        return 2

    rng = random.Random(args.seed)
    config = DemoConfig(
        api_url=args.api_url.rstrip("/"),
        amount=args.amount,
        description=args.description,
        order_code=args.order_code or generate_order_code(rng),
        checksum_key=args.checksum_key,
        seed=args.seed,
    )

    try:
        run_demo(config)
        return 0
    except httpx.ConnectError:
        print(f"\nError: Could not connect to relay at {config.api_url}")
        print("Make sure the relay is running: python -m services.api.main")
        return 1
    except KeyboardInterrupt:
        print("\n\nDemo interrupted.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
