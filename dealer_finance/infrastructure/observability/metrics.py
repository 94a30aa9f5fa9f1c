"""Prometheus metrics for calculation volume, outstanding debt and FX fetch health"""

from prometheus_client import Counter, Histogram, Gauge

from dealer_finance.domain.models import AgingSummary

# Calculation metrics
calculation_counter = Counter(
    "dealer_calculation_total",
    "Total financial calculations served",
    ["calculation"],  # amortization | interest | refinancing | inflation | aging | ...
)

operations_imported_counter = Counter(
    "dealer_operations_imported_total",
    "Operation rows stored through imports",
)

aging_balance_gauge = Gauge(
    "dealer_aging_balance_bucket",
    "Outstanding USD balance per aging bucket at the last classification",
    ["bucket"],  # 0-30 | 31-60 | 61-90 | 90+
)

# FX API metrics
fx_fetch_failures_counter = Counter(
    "fx_fetch_failures_total",
    "Failed FX quote API calls",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_calculation(calculation: str) -> None:
    calculation_counter.labels(calculation=calculation).inc()


def record_aging(summary: AgingSummary) -> None:
    """Publish the latest outstanding balance per bucket"""
    for bucket, totals in summary.items():
        aging_balance_gauge.labels(bucket=bucket).set(totals.total)
