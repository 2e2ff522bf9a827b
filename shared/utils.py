from datetime import UTC, datetime


def utcnow() -> datetime:
    return datetime.now(UTC)


def expiry_timestamp(ttl_seconds: int, now: datetime | None = None) -> int:
    ref = now or utcnow()
    return int(ref.timestamp()) + ttl_seconds
