"""Prometheus metrics for TrueLayer API traffic.

- truelayer_api_requests_total: Requests by endpoint and status class
- truelayer_api_request_latency_seconds: Request latency by endpoint
- truelayer_api_failures_total: Failed requests by endpoint and error type
- truelayer_webhooks_received_total: Inbound async webhooks by status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from truelayer.core.config import settings


api_requests_total = Counter(
    "truelayer_api_requests_total",
    "Total number of TrueLayer API requests",
    ["endpoint", "status"],  # 2xx, 3xx, 4xx, 5xx
)

api_request_latency = Histogram(
    "truelayer_api_request_latency_seconds",
    "TrueLayer API request latency in seconds",
    ["endpoint"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

api_failures_total = Counter(
    "truelayer_api_failures_total",
    "Total number of failed TrueLayer API requests",
    ["endpoint", "error_type"],  # api_error, malformed, transport, timeout
)

webhooks_received_total = Counter(
    "truelayer_webhooks_received_total",
    "Total number of async webhook notifications received",
    ["status"],
)


@contextmanager
def track_api_latency(endpoint: str) -> Generator[None, None, None]:
    """Context manager to track TrueLayer API latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        if settings.metrics_enabled:
            api_request_latency.labels(endpoint=endpoint).observe(
                time.perf_counter() - start
            )


def record_api_response(endpoint: str, status_code: int) -> None:
    """Record a completed API request by status class."""
    if settings.metrics_enabled:
        status = f"{status_code // 100}xx"
        api_requests_total.labels(endpoint=endpoint, status=status).inc()


def record_api_failure(endpoint: str, error_type: str) -> None:
    """Record a failed API request."""
    if settings.metrics_enabled:
        api_failures_total.labels(endpoint=endpoint, error_type=error_type).inc()


def record_webhook(status: str) -> None:
    """Record an inbound webhook notification."""
    if settings.metrics_enabled:
        webhooks_received_total.labels(status=status).inc()


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
