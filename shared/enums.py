from enum import Enum


class PaymentRequestStatus(str, Enum):
    CREATED = "created"
    INVALID = "invalid"
    CONFIG_ERROR = "config_error"
    UPSTREAM_ERROR = "upstream_error"


class WebhookStatus(str, Enum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    MALFORMED = "malformed"


class HeartbeatStatus(str, Enum):
    OK = "ok"
    FAILED = "failed"


MIN_PAYMENT_AMOUNT = 1000

# Largest integer a double-precision float represents exactly (2**53 - 1).
MAX_ORDER_CODE = 9007199254740991

UNKNOWN_WEBHOOK_STATUS = "UNKNOWN"
