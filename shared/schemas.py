import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from shared.enums import MAX_ORDER_CODE, MIN_PAYMENT_AMOUNT
from shared.errors import PaymentValidationError


class PaymentOrder(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    amount: int | float
    description: str = Field(..., min_length=1)
    order_code: int | float = Field(..., alias="orderCode")


class PaymentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    order_code: int | float = Field(..., alias="orderCode")
    amount: int | float
    description: str
    cancel_url: str = Field(..., alias="cancelUrl")
    return_url: str = Field(..., alias="returnUrl")
    expired_at: int = Field(..., alias="expiredAt")
    signature: str = ""

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class WebhookEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    data: dict[str, Any]
    signature: str = Field(..., min_length=1)


class ValidationErrorResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: str
    message: str


class FailureResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: str
    details: Any = None


class WebhookAcceptedResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    message: str = "Webhook processed successfully"


class WebhookRejectedResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    error: str


class HealthResponse(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str = "healthy"
    version: str


def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def validate_payment_order(data: Any) -> PaymentOrder:
    if not isinstance(data, dict):
        raise PaymentValidationError("Invalid request", "Request body must be a JSON object")

    amount = data.get("amount")
    if not _is_number(amount) or amount < MIN_PAYMENT_AMOUNT:
        raise PaymentValidationError(
            "Invalid amount",
            f"Amount must be at least {MIN_PAYMENT_AMOUNT:,} VND",
        )

    description = data.get("description")
    if not isinstance(description, str) or not description.strip():
        raise PaymentValidationError("Invalid description", "Description is required")

    order_code = data.get("orderCode")
    if not _is_number(order_code) or order_code <= 0 or order_code > MAX_ORDER_CODE:
        raise PaymentValidationError(
            "Invalid order code",
            f"Order code must be a positive number not exceeding {MAX_ORDER_CODE}",
        )

    return PaymentOrder(amount=amount, description=description, orderCode=order_code)
