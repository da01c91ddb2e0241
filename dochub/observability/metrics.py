"""
Prometheus Metrics Collection for Documentation Hub

Tracks how queries are classified and how documentation fetches perform,
per domain. Recording is skipped when DOCHUB_FEATURE_METRICS is disabled.
"""

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest

from ..config import get_feature_flags


# Documentation pages are slow compared to API calls (50ms to 30s)
FETCH_LATENCY_BUCKETS = (0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0)


classification_count = Counter(
    'dochub_classifications_total',
    'Total number of queries classified, by resolved domain',
    labelnames=['domain']
)

fetch_count = Counter(
    'dochub_fetch_total',
    'Total number of documentation fetches',
    labelnames=['domain', 'status']
)

fetch_latency_histogram = Histogram(
    'dochub_fetch_latency_seconds',
    'Documentation fetch latency in seconds',
    labelnames=['domain'],
    buckets=FETCH_LATENCY_BUCKETS
)


def record_classification(domain: str) -> None:
    """Count one classification outcome."""
    if get_feature_flags().enable_metrics:
        classification_count.labels(domain=domain).inc()


def record_fetch(domain: str, success: bool, duration: float) -> None:
    """Count one fetch and observe its latency."""
    if not get_feature_flags().enable_metrics:
        return
    fetch_count.labels(domain=domain, status="success" if success else "error").inc()
    fetch_latency_histogram.labels(domain=domain).observe(duration)


def export_metrics() -> str:
    """
    Export all metrics in Prometheus text format.

    Returns:
        str: Prometheus-formatted metrics text
    """
    return generate_latest(REGISTRY).decode('utf-8')
