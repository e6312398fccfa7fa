from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)


generation_requests = Counter(
    "generation_requests_total",
    "Dispatches sent to a chat backend",
    ["provider", "outcome"],
)

generation_latency = Histogram(
    "generation_latency_seconds",
    "Wall time of a single backend call",
    ["provider"],
    buckets=(0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0, 300.0),
)


def metrics_payload() -> tuple[bytes, str]:
    """Render the default registry for a host's /metrics endpoint."""
    return generate_latest(), CONTENT_TYPE_LATEST
