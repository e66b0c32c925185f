"""
Prometheus metrics collection for calorie-insights

This module provides metrics instrumentation for monitoring
decoding quality, source fetches and report computation time.
"""
from pathlib import Path

from prometheus_client import (
    Counter,
    Histogram,
    CollectorRegistry,
    generate_latest,
)


# Global registry for metrics
REGISTRY = CollectorRegistry()


# =======================
# DECODING METRICS
# =======================

records_decoded_total = Counter(
    name="calorie_records_decoded_total",
    documentation="Total number of raw elements decoded into consumption records",
    labelnames=["source"],
    registry=REGISTRY,
)

# A fallback means the raw value was present but could not be coerced
coercion_fallbacks_total = Counter(
    name="calorie_coercion_fallbacks_total",
    documentation="Total number of field values replaced by their zero value",
    labelnames=["field_name", "rule_type"],
    registry=REGISTRY,
)

# =======================
# SOURCE METRICS
# =======================

source_fetch_total = Counter(
    name="calorie_source_fetch_total",
    documentation="Total number of source document loads",
    labelnames=["kind", "status"],  # kind: http, file; status: success, failure
    registry=REGISTRY,
)

# =======================
# REPORT METRICS
# =======================

report_duration_seconds = Histogram(
    name="calorie_report_duration_seconds",
    documentation="Time spent computing a single report in seconds",
    labelnames=["report"],
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def write_metrics(path: str | Path) -> None:
    """Write the current metrics snapshot to a file (textfile collector format)."""
    Path(path).write_bytes(generate_metrics())


class track_duration:
    """
    Context manager for tracking operation duration

    Usage:
        with track_duration(report_duration_seconds, report="top_by_protein"):
            # do work
            pass
    """

    def __init__(self, histogram: Histogram, **labels):
        """
        Initialize duration tracker

        Args:
            histogram: Prometheus Histogram metric
            **labels: Label values for the metric
        """
        self.histogram = histogram
        self.labels = labels
        self.timer = None

    def __enter__(self):
        self.timer = self.histogram.labels(**self.labels).time()
        self.timer.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.timer.__exit__(exc_type, exc_val, exc_tb)
        return False


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    counter.labels(**labels).inc(value)


def record_decoded_batch(source: str, record_count: int, fallbacks: dict[tuple[str, str], int]) -> None:
    """
    Record decoding metrics for one batch.

    Args:
        source: Where the batch came from (e.g. "http", "file", "memory")
        record_count: Number of records decoded
        fallbacks: Fallback counts keyed by (field_name, rule_type)
    """
    if record_count > 0:
        increment_counter(records_decoded_total, record_count, source=source)
    for (field_name, rule_type), count in fallbacks.items():
        increment_counter(coercion_fallbacks_total, count, field_name=field_name, rule_type=rule_type)
