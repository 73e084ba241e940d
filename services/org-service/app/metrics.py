"""
Prometheus metrics for Org Service.

Tracks HTTP traffic and hierarchy resolution outcomes.
"""

from fastapi import Response
from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

# Request metrics
http_requests_total = Counter(
    "org_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status"],
)

http_request_duration_seconds = Histogram(
    "org_http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

# Resolution metrics
hierarchy_resolutions_total = Counter(
    "org_hierarchy_resolutions_total",
    "Total hierarchy resolutions",
    ["operation", "outcome"],
)

hierarchy_resolution_duration_seconds = Histogram(
    "org_hierarchy_resolution_duration_seconds",
    "Hierarchy resolution duration in seconds",
    ["operation"],
    buckets=(0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5),
)

hierarchy_resolution_results = Histogram(
    "org_hierarchy_resolution_results",
    "Number of entries returned per resolution",
    ["operation"],
    buckets=(0, 1, 5, 10, 25, 50, 100, 250),
)


def track_request_metrics(method: str, endpoint: str, status_code: int, duration: float):
    """Track HTTP request metrics."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=status_code).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)


def track_resolution(operation: str, outcome: str, duration: float, result_count: int = 0):
    """
    Track a hierarchy resolution.

    Args:
        operation: senior_levels, agents_under_level, full_tree or hierarchy_info
        outcome: success, validation_error, not_found, configuration_error or internal_error
        duration: Elapsed seconds
        result_count: Entries returned on success
    """
    hierarchy_resolutions_total.labels(operation=operation, outcome=outcome).inc()
    hierarchy_resolution_duration_seconds.labels(operation=operation).observe(duration)
    if outcome == "success":
        hierarchy_resolution_results.labels(operation=operation).observe(result_count)


async def metrics_endpoint():
    """
    Prometheus metrics endpoint.

    Returns:
        Response with Prometheus metrics in text format
    """
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
