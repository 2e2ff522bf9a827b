"""
Shared modules for the PayOS relay.

Contains:
- Canonical HMAC signing
- Pydantic request/response models and validation
- Configuration, errors and metrics
- The PayOS API client
"""

from shared.errors import (
    ConfigurationError,
    PaymentValidationError,
    RelayError,
    SignatureMismatchError,
    UpstreamError,
)
from shared.schemas import (
    FailureResponse,
    HealthResponse,
    PaymentOrder,
    PaymentRequest,
    ValidationErrorResponse,
    WebhookAcceptedResponse,
    WebhookEnvelope,
    WebhookRejectedResponse,
    validate_payment_order,
)
from shared.signing import (
    UNSET,
    canonical_query_string,
    create_payment_signature,
    create_signature,
    verify_signature,
)
from shared.utils import expiry_timestamp, utcnow

__all__ = [
    "UNSET",
    "ConfigurationError",
    "FailureResponse",
    "HealthResponse",
    "PaymentOrder",
    "PaymentRequest",
    "PaymentValidationError",
    "RelayError",
    "SignatureMismatchError",
    "UpstreamError",
    "ValidationErrorResponse",
    "WebhookAcceptedResponse",
    "WebhookEnvelope",
    "WebhookRejectedResponse",
    "canonical_query_string",
    "create_payment_signature",
    "create_signature",
    "expiry_timestamp",
    "utcnow",
    "validate_payment_order",
    "verify_signature",
]
