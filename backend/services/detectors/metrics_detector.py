"""Quantifiable-achievement detection."""

from models.schemas.reports import MetricsReport
from services.ats_constants import DEFAULT_THRESHOLDS, ParseabilityThresholds
from services.ats_patterns import METRIC_PATTERNS


def detect_metrics(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> MetricsReport:
    """Count matches across all metric patterns; overlapping patterns each count."""
    count = sum(len(pattern.findall(text)) for pattern in METRIC_PATTERNS)
    return MetricsReport(
        has_metrics=count >= thresholds.min_metrics_count,
        metric_count=count,
    )
