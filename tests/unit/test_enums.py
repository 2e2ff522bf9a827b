import pytest

from shared.enums import (
    MAX_ORDER_CODE,
    MIN_PAYMENT_AMOUNT,
    HeartbeatStatus,
    PaymentRequestStatus,
    WebhookStatus,
)


@pytest.mark.unit
class TestPaymentRequestStatus:
    def test_values(self):
        assert PaymentRequestStatus.CREATED.value == "created"
        assert PaymentRequestStatus.INVALID.value == "invalid"
        assert PaymentRequestStatus.CONFIG_ERROR.value == "config_error"
        assert PaymentRequestStatus.UPSTREAM_ERROR.value == "upstream_error"

    def test_is_string_enum(self):
        assert PaymentRequestStatus.CREATED == "created"


@pytest.mark.unit
class TestWebhookStatus:
    def test_values(self):
        assert WebhookStatus.ACCEPTED.value == "accepted"
        assert WebhookStatus.REJECTED.value == "rejected"
        assert WebhookStatus.MALFORMED.value == "malformed"


@pytest.mark.unit
class TestHeartbeatStatus:
    def test_values(self):
        assert HeartbeatStatus.OK.value == "ok"
        assert HeartbeatStatus.FAILED.value == "failed"


@pytest.mark.unit
class TestLimits:
    def test_min_payment_amount(self):
        assert MIN_PAYMENT_AMOUNT == 1000

    def test_max_order_code_is_max_safe_integer(self):
        assert MAX_ORDER_CODE == 2**53 - 1
