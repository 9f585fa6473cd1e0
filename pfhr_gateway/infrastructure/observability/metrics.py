"""Prometheus metrics for monitoring score distribution and risk levels"""

from prometheus_client import Counter, Histogram

# Scoring metrics
score_counter = Counter(
    "pfhr_score_computed_total",
    "Total PFHR scores computed",
    ["risk_level"],  # low | medium | high
)

category_counter = Counter(
    "pfhr_score_category_total",
    "PFHR scores by display category",
    ["category"],  # fragile | developing | healthy
)

score_histogram = Histogram(
    "pfhr_score",
    "Distribution of composite PFHR scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

invalid_income_counter = Counter(
    "pfhr_invalid_income_total",
    "Scoring requests rejected for zero monthly income",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_score(score: float, risk_level: str, category: str) -> None:
    """Record scoring metrics for monitoring the risk mix of submissions"""
    score_counter.labels(risk_level=risk_level).inc()
    category_counter.labels(category=category).inc()
    score_histogram.observe(score)
