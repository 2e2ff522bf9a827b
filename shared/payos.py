"""Client for the PayOS payment-request API."""

import logging
import time
from typing import Any

import httpx

from shared.config import Settings
from shared.errors import ConfigurationError, UpstreamError
from shared.metrics import PROVIDER_REQUEST_DURATION
from shared.schemas import PaymentOrder, PaymentRequest
from shared.signing import create_payment_signature
from shared.utils import expiry_timestamp

logger = logging.getLogger(__name__)


class PaymentGateway:
    def __init__(
        self,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings

    def ensure_configured(self) -> None:
        if not self._settings.credentials_configured:
            raise ConfigurationError("PayOS credentials are not properly configured")

    def build_payment_request(self, order: PaymentOrder) -> PaymentRequest:
        request = PaymentRequest(
            orderCode=order.order_code,
            amount=order.amount,
            description=order.description,
            cancelUrl=self._settings.cancel_url,
            returnUrl=self._settings.return_url,
            expiredAt=expiry_timestamp(self._settings.payment_ttl_seconds),
        )
        signature = create_payment_signature(request.to_payload(), self._settings.payos_checksum_key)
        return request.model_copy(update={"signature": signature})

    def _headers(self) -> dict[str, str]:
        return {
            "x-client-id": self._settings.payos_client_id,
            "x-api-key": self._settings.payos_api_key,
        }

    def _client(self) -> httpx.AsyncClient:
        kwargs: dict[str, Any] = {"transport": self._transport}
        if self._settings.payos_timeout_seconds is not None:
            kwargs["timeout"] = self._settings.payos_timeout_seconds
        return httpx.AsyncClient(**kwargs)

    async def create_payment_link(self, order: PaymentOrder) -> Any:
        self.ensure_configured()

        request = self.build_payment_request(order)
        payload = request.to_payload()
        logger.info(
            f"Submitting payment request orderCode={request.order_code} "
            f"amount={request.amount} expiredAt={request.expired_at}"
        )

        start_time = time.perf_counter()
        try:
            async with self._client() as client:
                response = await client.post(
                    self._settings.payment_requests_url,
                    json=payload,
                    headers=self._headers(),
                )
        except httpx.HTTPError as e:
            PROVIDER_REQUEST_DURATION.labels(outcome="transport_error").observe(
                time.perf_counter() - start_time
            )
            logger.error(f"PayOS request failed for orderCode={request.order_code}: {e}")
            raise UpstreamError(f"PayOS request failed: {e}", details=str(e)) from e

        PROVIDER_REQUEST_DURATION.labels(outcome=str(response.status_code)).observe(
            time.perf_counter() - start_time
        )

        if response.is_error:
            details = _response_details(response)
            logger.error(
                f"PayOS rejected orderCode={request.order_code}: "
                f"status={response.status_code} body={details}"
            )
            raise UpstreamError(
                f"PayOS responded with status {response.status_code}",
                details=details,
                status_code=response.status_code,
            )

        body = _response_details(response)
        logger.info(f"PayOS API response for orderCode={request.order_code}: {body}")
        return body


def _response_details(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text
