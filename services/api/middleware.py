"""FastAPI middleware for metrics collection."""

import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from shared.metrics import HTTP_REQUEST_DURATION, HTTP_REQUESTS_TOTAL

ROUTED_PATHS = frozenset({"/", "/create-payment", "/success", "/cancel", "/webhook", "/health"})


class MetricsMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if request.url.path == "/metrics":
            return await call_next(request)

        start_time = time.perf_counter()

        response = await call_next(request)

        duration = time.perf_counter() - start_time

        endpoint = self._normalize_path(request.url.path)
        method = request.method
        status = str(response.status_code)

        HTTP_REQUEST_DURATION.labels(
            method=method,
            endpoint=endpoint,
            status=status,
        ).observe(duration)

        HTTP_REQUESTS_TOTAL.labels(
            method=method,
            endpoint=endpoint,
            status=status,
        ).inc()

        return response

    def _normalize_path(self, path: str) -> str:
        normalized = "/" + path.strip("/")
        if normalized in ROUTED_PATHS:
            return normalized
        # Anything else comes from the public directory and shares one label.
        return "/{static}"
