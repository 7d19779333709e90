"""Custom middleware for the application with Prometheus metrics."""

import re
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from prometheus_client import Counter, Histogram, Gauge, generate_latest, CONTENT_TYPE_LATEST
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import PlainTextResponse

from feedback_review.utils.logger import get_logger

logger = get_logger(__name__)

request_count = Counter(
    'feedback_review_requests_total',
    'Total HTTP requests',
    ['method', 'endpoint', 'status_code']
)
request_duration = Histogram(
    'feedback_review_request_duration_seconds',
    'HTTP request duration in seconds',
    ['method', 'endpoint']
)
active_requests = Gauge('feedback_review_active_requests', 'Number of requests currently being processed')

_RECORD_PATH = re.compile(r"^/api/feedback/[^/]+/(feedback|hidden)$")
_KNOWN_PATHS = frozenset({
    "/", "/test", "/health", "/docs", "/openapi.json",
    "/api/feedback", "/api/feedback/stats", "/api/schemas", "/api/seed", "/api/seed-get",
})


class PrometheusMiddleware(BaseHTTPMiddleware):
    """Middleware to collect Prometheus metrics."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        # Skip metrics collection for the metrics endpoint itself
        if request.url.path == "/metrics":
            return await call_next(request)

        start_time = time.perf_counter()
        method = request.method
        endpoint = self._get_endpoint_label(request.url.path)

        active_requests.inc()
        status_code = "500"
        try:
            response = await call_next(request)
            status_code = str(response.status_code)
            return response
        finally:
            duration = time.perf_counter() - start_time
            request_count.labels(method=method, endpoint=endpoint, status_code=status_code).inc()
            request_duration.labels(method=method, endpoint=endpoint).observe(duration)
            active_requests.dec()

    def _get_endpoint_label(self, path: str) -> str:
        """Convert path to a metrics-friendly endpoint label."""
        # Group per-record endpoints to avoid metric explosion
        match = _RECORD_PATH.match(path)
        if match:
            return f"/api/feedback/{{id}}/{match.group(1)}"
        path = path.rstrip("/") or "/"
        if path in _KNOWN_PATHS:
            return path
        # Unmatched paths share one label
        return "other"


class TimingMiddleware(BaseHTTPMiddleware):
    """Middleware to add timing information to responses."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)

        process_time = time.perf_counter() - start_time

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(round(process_time, 4))

        return response


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request/response logging."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.perf_counter()

        client_ip = "unknown"
        if request.client:
            client_ip = request.client.host

        request_id = getattr(request.state, 'request_id', None)

        # Skip logging for metrics endpoint to reduce noise
        if request.url.path != "/metrics":
            logger.info(
                f"Request started: {request.method} {request.url} from {client_ip} (ID: {request_id})"
            )

        response = await call_next(request)

        if request.url.path != "/metrics":
            process_time = time.perf_counter() - start_time
            logger.info(
                f"Request completed: {request.method} {request.url} - {response.status_code} - {round(process_time, 4)}s (ID: {request_id})"
            )

        return response


def get_metrics_response():
    """Generate Prometheus metrics response."""
    try:
        metrics_data = generate_latest()
        return PlainTextResponse(metrics_data, media_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}")
        return PlainTextResponse(
            f"# Error generating metrics: {e}\n",
            media_type="text/plain",
            status_code=500
        )
