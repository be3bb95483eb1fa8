"""Supplier metrics - delivery/quality rates, weighted score and letter grade.

Pure functions. The overall score is a weighted blend of on-time delivery,
quality and a lead-time score where 7 days maps to 100 and 30 days to 0.
"""

from __future__ import annotations

from dataclasses import dataclass

from supplier_performance.scoring.records import RawSupplierRecord


# ---------------------------------------------------------------------------
# Policy constants
# ---------------------------------------------------------------------------

ON_TIME_WEIGHT = 0.5
QUALITY_WEIGHT = 0.3
LEAD_TIME_WEIGHT = 0.2

# Assumed when a supplier has no deliveries in the period
DEFAULT_LEAD_TIME_DAYS = 14.0

BEST_LEAD_TIME_DAYS = 7.0
LEAD_TIME_SPAN_DAYS = 23.0  # 7 days -> 100, 30 days -> 0

EXCELLENT_DELIVERY_RATE = 95.0
GOOD_DELIVERY_RATE = 85.0
ACCEPTABLE_DELIVERY_RATE = 75.0

_GRADE_THRESHOLDS: tuple[tuple[float, str], ...] = (
    (90.0, "A"),
    (80.0, "B"),
    (70.0, "C"),
    (60.0, "D"),
)


@dataclass(frozen=True)
class ScoreWeights:
    """Weights applied to the three score components."""
    on_time: float = ON_TIME_WEIGHT
    quality: float = QUALITY_WEIGHT
    lead_time: float = LEAD_TIME_WEIGHT


DEFAULT_WEIGHTS = ScoreWeights()


@dataclass(frozen=True)
class SupplierRates:
    """Rates derived from one raw record."""
    on_time_delivery_rate: float
    quality_score: float
    avg_order_value: float


# ---------------------------------------------------------------------------
# Rates
# ---------------------------------------------------------------------------


def calculate_rates(record: RawSupplierRecord) -> SupplierRates:
    """Derive on-time rate, quality score and average order value.

    The caller guarantees ``record.total_orders > 0``.
    """
    orders = record.total_orders
    on_time_rate = record.on_time_deliveries / orders * 100
    # Credit notes are counted separately from orders and can outnumber them
    quality = max(0.0, (orders - record.quality_issues) / orders * 100)
    return SupplierRates(
        on_time_delivery_rate=on_time_rate,
        quality_score=quality,
        avg_order_value=record.total_value / orders,
    )


def rate_delivery(on_time_rate: float) -> str:
    """Map an on-time percentage to Excellent/Good/Acceptable/Poor."""
    if on_time_rate >= EXCELLENT_DELIVERY_RATE:
        return "Excellent"
    if on_time_rate >= GOOD_DELIVERY_RATE:
        return "Good"
    if on_time_rate >= ACCEPTABLE_DELIVERY_RATE:
        return "Acceptable"
    return "Poor"


# ---------------------------------------------------------------------------
# Score
# ---------------------------------------------------------------------------


def lead_time_score(avg_lead_time: float | None) -> float:
    """Score a lead time in days; shorter than 7 days scores above 100."""
    if avg_lead_time is None:
        avg_lead_time = DEFAULT_LEAD_TIME_DAYS
    return max(
        0.0,
        100 - ((avg_lead_time - BEST_LEAD_TIME_DAYS) / LEAD_TIME_SPAN_DAYS * 100),
    )


def overall_score(
    on_time_rate: float,
    quality_score: float,
    avg_lead_time: float | None,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> float:
    """Weighted overall score rounded to 2 decimals.

    Not capped at 100: a lead time under 7 days lifts the lead-time
    component above 100 and the sum follows.
    """
    score = (
        on_time_rate * weights.on_time
        + quality_score * weights.quality
        + lead_time_score(avg_lead_time) * weights.lead_time
    )
    return round(score, 2)


def assign_grade(score: float) -> str:
    """Map an overall score to a letter grade."""
    for threshold, grade in _GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return "F"
