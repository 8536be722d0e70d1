"""
File: instrumentation.py
Purpose: Prometheus metrics collectors for outbound PagerDuty API calls

Exports:
  - REQUESTS(method, status): count API calls; status="error" for transport failures
  - LATENCY(method): API call duration histogram
"""

from prometheus_client import Counter, Histogram, CollectorRegistry, CONTENT_TYPE_LATEST, generate_latest

# Dedicated registry so embedding apps keep their own default registry clean
REGISTRY = CollectorRegistry(auto_describe=True)

REQUESTS = Counter(
    "pagerduty_requests_total",
    "Total PagerDuty API requests",
    labelnames=["method", "status"],
    registry=REGISTRY,
)

LATENCY = Histogram(
    "pagerduty_request_duration_seconds",
    "PagerDuty API request duration in seconds",
    labelnames=["method"],
    buckets=(0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
    registry=REGISTRY,
)


def render_metrics():
    """Return (content_type, payload) for an HTTP metrics endpoint."""
    return CONTENT_TYPE_LATEST, generate_latest(REGISTRY)
