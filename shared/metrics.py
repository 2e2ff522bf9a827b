"""Prometheus metrics definitions for the relay and heartbeat."""

from prometheus_client import Counter, Histogram

HTTP_REQUEST_DURATION = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint", "status"],
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

HTTP_REQUESTS_TOTAL = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

PAYMENT_REQUESTS_TOTAL = Counter(
    "payment_requests_total",
    "Total payment link creation requests",
    ["status"],
)

PROVIDER_REQUEST_DURATION = Histogram(
    "provider_request_duration_seconds",
    "Round-trip time of payment provider calls",
    ["outcome"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

WEBHOOKS_RECEIVED_TOTAL = Counter(
    "webhooks_received_total",
    "Total webhook callbacks received",
    ["status"],
)

HEARTBEATS_TOTAL = Counter(
    "heartbeats_total",
    "Total keep-alive pings sent",
    ["status"],
)
