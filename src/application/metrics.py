"""
Prometheus metrics for the transaction service.

Tracks:
- HTTP request counts by method and route
- HTTP request duration by method and route
"""

from prometheus_client import Counter, Histogram

http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP Requests",
    ["method", "endpoint"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "Duration of HTTP Requests",
    ["method", "endpoint"],
)


def record_request(method: str, endpoint: str, duration: float) -> None:
    """
    Count a finished request and observe its duration.

    Parameters
    ----------
    method : str
        HTTP method label.
    endpoint : str
        Route template label (e.g., '/transaction/{transaction_id}').
    duration : float
        Wall-clock handling time in seconds.
    """
    http_requests_total.labels(method=method, endpoint=endpoint).inc()
    http_request_duration_seconds.labels(method=method, endpoint=endpoint).observe(duration)
