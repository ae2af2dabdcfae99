"""
Prometheus metrics for conflict detection.

Metrics:
    1. planscope_detection_runs_total (Counter)
    2. planscope_conflicts_detected_total (Counter)
    3. planscope_detection_duration_seconds (Histogram)
"""

from prometheus_client import Counter, Histogram


detection_runs_total = Counter(
    "planscope_detection_runs_total",
    "Total conflict detection runs",
)

conflicts_detected_total = Counter(
    "planscope_conflicts_detected_total",
    "Total conflicts detected by type and severity",
    labelnames=["type", "severity"],
)

detection_duration_seconds = Histogram(
    "planscope_detection_duration_seconds",
    "Conflict detection duration in seconds",
    buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0),
)


def record_detection(result, duration_seconds: float) -> None:
    """Record a completed detection run."""
    detection_runs_total.inc()
    detection_duration_seconds.observe(duration_seconds)
    for conflict in result.conflicts:
        conflicts_detected_total.labels(
            type=conflict.type.value,
            severity=conflict.severity.value,
        ).inc()
