"""Prometheus metrics exposed on /metrics."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

COMPARISONS = Counter(
    "differ_comparisons_total",
    "Comparisons served, by route and outcome",
    ["route", "outcome"],
)

COMPARISON_SECONDS = Histogram(
    "differ_comparison_seconds",
    "Wall time spent serializing and diffing two payloads",
    ["route"],
)

DIFF_LINES = Histogram(
    "differ_diff_lines",
    "Number of diff rows returned per comparison",
    buckets=(10, 50, 100, 500, 1000, 5000, 10000),
)
