from datetime import UTC, datetime

import pytest

from shared.utils import expiry_timestamp, utcnow


@pytest.mark.unit
class TestExpiryTimestamp:
    def test_adds_ttl_to_epoch_seconds(self):
        now = datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)
        assert expiry_timestamp(3600, now) == int(now.timestamp()) + 3600

    def test_returns_int(self):
        assert isinstance(expiry_timestamp(3600), int)

    def test_defaults_to_current_time(self):
        before = int(datetime.now(UTC).timestamp())
        result = expiry_timestamp(3600)
        after = int(datetime.now(UTC).timestamp())
        assert before + 3600 <= result <= after + 3600


@pytest.mark.unit
class TestUtcnow:
    def test_returns_datetime(self):
        result = utcnow()
        assert isinstance(result, datetime)

    def test_has_utc_timezone(self):
        result = utcnow()
        assert result.tzinfo == UTC

    def test_is_recent(self):
        before = datetime.now(UTC)
        result = utcnow()
        after = datetime.now(UTC)
        assert before <= result <= after
