"""Prometheus metrics for monitoring recommendations and rejected projections"""

from prometheus_client import Counter, Histogram

# Projection metrics
projection_counter = Counter(
    "rent_vs_buy_projection_total",
    "Total projections computed",
    ["recommendation"],  # rent | buy | equal
)

projection_rejected_counter = Counter(
    "rent_vs_buy_projection_rejected_total",
    "Projections rejected before a result was produced",
    ["reason"],  # invalid_input | degenerate_result
)

horizon_years_histogram = Histogram(
    "rent_vs_buy_horizon_years",
    "Requested projection horizons",
    buckets=[1, 2, 5, 10, 15, 20, 25, 30, 40, 50, 100],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_projection(recommendation: str, horizon_years: int) -> None:
    """Record projection metrics for monitoring recommendation mix and horizons"""
    projection_counter.labels(recommendation=recommendation).inc()
    horizon_years_histogram.observe(horizon_years)


def record_rejection(reason: str) -> None:
    projection_rejected_counter.labels(reason=reason).inc()
