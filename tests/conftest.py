"""
Pytest fixtures for the PayOS relay.

Fixture organization:
- Deterministic settings and payloads
- Mock PayOS transport (httpx.MockTransport) recording outbound calls
- FastAPI app fixtures (app, client, async_client)
"""

import os
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import httpx
import pytest

# ============================================================================
# Environment setup for tests
# ============================================================================

# Set test environment variables before importing app modules
os.environ.setdefault("SERVER_URL", "http://localhost:3000")
os.environ.setdefault("PAYOS_CLIENT_ID", "test-client-id")
os.environ.setdefault("PAYOS_API_KEY", "test-api-key")
os.environ.setdefault("PAYOS_CHECKSUM_KEY", "testkey")

REPO_ROOT = Path(__file__).resolve().parent.parent

CHECKSUM_KEY = "testkey"
SERVER_URL = "http://localhost:3000"


# ============================================================================
# Deterministic test data fixtures
# ============================================================================


@pytest.fixture
def checksum_key() -> str:
    return CHECKSUM_KEY


@pytest.fixture
def settings():
    """Fully configured settings that ignore the process environment's .env file."""
    from shared.config import Settings

    return Settings(
        _env_file=None,
        server_url=SERVER_URL,
        payos_client_id="test-client-id",
        payos_api_key="test-api-key",
        payos_checksum_key=CHECKSUM_KEY,
        payos_api_url="https://api-merchant.payos.test",
        public_dir=str(REPO_ROOT / "public"),
    )


@pytest.fixture
def unconfigured_settings(settings):
    return settings.model_copy(update={"payos_api_key": "", "payos_checksum_key": ""})


@pytest.fixture
def sample_order_body() -> dict[str, Any]:
    return {"amount": 50000, "description": "Order #1", "orderCode": 1}


@pytest.fixture
def sample_webhook_data() -> dict[str, Any]:
    """A PayOS webhook ``data`` object as delivered for a paid link."""
    return {
        "orderCode": 123,
        "amount": 50000,
        "description": "Order 123",
        "accountNumber": "12345678",
        "reference": "FT123",
        "transactionDateTime": "2024-01-15 12:00:00",
        "currency": "VND",
        "paymentLinkId": "abc",
        "code": "00",
        "desc": "success",
        "counterAccountBankId": None,
        "counterAccountName": None,
    }


@pytest.fixture
def provider_response() -> dict[str, Any]:
    return {
        "code": "00",
        "desc": "success",
        "data": {
            "bin": "970422",
            "accountNumber": "12345678",
            "amount": 50000,
            "description": "Order #1",
            "orderCode": 1,
            "currency": "VND",
            "paymentLinkId": "link-001",
            "status": "PENDING",
            "checkoutUrl": "https://pay.payos.test/web/link-001",
            "qrCode": "000201010212",
        },
        "signature": "provider-signature",
    }


# ============================================================================
# PayOS transport fixtures
# ============================================================================


@pytest.fixture
def provider_calls() -> list[httpx.Request]:
    return []


@pytest.fixture
def provider_handler(
    provider_response: dict[str, Any],
) -> Callable[[httpx.Request], httpx.Response]:
    """Override to change how the fake PayOS endpoint answers."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=provider_response)

    return handler


@pytest.fixture
def provider_transport(
    provider_calls: list[httpx.Request],
    provider_handler: Callable[[httpx.Request], httpx.Response],
) -> httpx.MockTransport:
    def record(request: httpx.Request) -> httpx.Response:
        provider_calls.append(request)
        return provider_handler(request)

    return httpx.MockTransport(record)


@pytest.fixture
def gateway(settings, provider_transport):
    from shared.payos import PaymentGateway

    return PaymentGateway(settings, transport=provider_transport)


@pytest.fixture(autouse=True)
def reset_webhook_handlers() -> Generator[None, None, None]:
    from shared.webhooks import clear_webhook_handlers

    clear_webhook_handlers()
    yield
    clear_webhook_handlers()


# ============================================================================
# FastAPI app fixtures
# ============================================================================


@pytest.fixture
def app(settings, gateway):
    """Relay app wired to the mock PayOS transport."""
    from services.api.dependencies import get_app_settings, get_payment_gateway
    from services.api.main import create_app

    app = create_app(settings)
    app.dependency_overrides[get_app_settings] = lambda: settings
    app.dependency_overrides[get_payment_gateway] = lambda: gateway
    return app


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
async def async_client(app):
    """Async HTTP client for testing the API."""
    from httpx import ASGITransport, AsyncClient

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
