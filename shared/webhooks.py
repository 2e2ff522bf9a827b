"""Webhook verification and dispatch to registered payment-status handlers."""

import logging
from collections.abc import Callable
from typing import Any

from shared.enums import UNKNOWN_WEBHOOK_STATUS
from shared.errors import SignatureMismatchError
from shared.schemas import WebhookEnvelope
from shared.signing import verify_signature

logger = logging.getLogger(__name__)

WebhookHandler = Callable[[dict[str, Any]], None]

_handlers: list[WebhookHandler] = []


def register_webhook_handler(handler: WebhookHandler) -> None:
    """Register a callback invoked with the verified ``data`` of every accepted webhook.

    This is where persistence or customer notification plugs in.
    """
    _handlers.append(handler)


def clear_webhook_handlers() -> None:
    _handlers.clear()


def summarize_webhook(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "orderCode": data.get("orderCode"),
        "paymentLinkId": data.get("paymentLinkId"),
        "amount": data.get("amount"),
        "status": data.get("status") or data.get("desc") or UNKNOWN_WEBHOOK_STATUS,
    }


def verify_webhook(envelope: WebhookEnvelope, checksum_key: str | None) -> dict[str, Any]:
    if not verify_signature(envelope.data, envelope.signature, checksum_key):
        raise SignatureMismatchError("Invalid signature")
    return envelope.data


def dispatch_webhook(data: dict[str, Any]) -> int:
    delivered = 0
    for handler in list(_handlers):
        try:
            handler(data)
            delivered += 1
        except Exception as e:
            logger.error(f"Webhook handler {getattr(handler, '__name__', handler)} failed: {e}")
    return delivered
