from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

registry = CollectorRegistry()

REQUESTS_TOTAL = Counter(
    "http_bridge_requests_total",
    "Executed requests by outcome",
    ["outcome"],
    registry=registry,
)
REQUEST_DURATION_MS = Histogram(
    "http_bridge_request_duration_ms",
    "Network time of successful requests in milliseconds",
    buckets=(5, 10, 25, 50, 100, 250, 500, 1000, 2500, 5000, 10000),
    registry=registry,
)


class PrometheusMetricsAdapter:
    def record(self, outcome: str, time_ms: int | None = None) -> None:
        REQUESTS_TOTAL.labels(outcome=outcome).inc()
        if time_ms is not None:
            REQUEST_DURATION_MS.observe(time_ms)
