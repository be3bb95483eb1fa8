"""Supplier risk assessment - additive points over delivery, quality, lead time and spend."""

from __future__ import annotations

from dataclasses import dataclass

from supplier_performance.scoring.metrics import DEFAULT_LEAD_TIME_DAYS
from supplier_performance.scoring.records import RawSupplierRecord


LATE_RATE_THRESHOLD = 30.0  # % of orders delivered late
QUALITY_ISSUE_THRESHOLD = 5.0  # % of orders with a credit note
LEAD_TIME_THRESHOLD_DAYS = 30.0
FINANCIAL_DEPENDENCY_VALUE = 100_000.0

HIGH_RISK_SCORE = 5
MEDIUM_RISK_SCORE = 3

FACTOR_POOR_DELIVERY = "Poor on-time delivery"
FACTOR_QUALITY_ISSUES = "High quality issues"
FACTOR_LEAD_TIMES = "Excessive lead times"
FACTOR_FINANCIAL_DEPENDENCY = "High financial dependency"


@dataclass(frozen=True)
class RiskAssessment:
    """Risk points, the resulting level and the factors that contributed."""
    score: int
    level: str  # "Low", "Medium", "High"
    factors: tuple[str, ...]


def risk_level(score: int) -> str:
    if score >= HIGH_RISK_SCORE:
        return "High"
    if score >= MEDIUM_RISK_SCORE:
        return "Medium"
    return "Low"


def assess_risk(record: RawSupplierRecord) -> RiskAssessment:
    """Score a supplier's risk.

    Each condition adds its points at most once; factors are listed in the
    order the conditions are checked.
    """
    factors: list[str] = []
    score = 0

    late_rate = record.late_deliveries / record.total_orders * 100
    if late_rate >= LATE_RATE_THRESHOLD:
        factors.append(FACTOR_POOR_DELIVERY)
        score += 3

    issue_rate = record.quality_issues / record.total_orders * 100
    if issue_rate >= QUALITY_ISSUE_THRESHOLD:
        factors.append(FACTOR_QUALITY_ISSUES)
        score += 3

    lead_time = record.avg_lead_time
    if lead_time is None:
        lead_time = DEFAULT_LEAD_TIME_DAYS
    if lead_time > LEAD_TIME_THRESHOLD_DAYS:
        factors.append(FACTOR_LEAD_TIMES)
        score += 2

    # Absolute spend stands in for share of company spend
    if record.total_value > FINANCIAL_DEPENDENCY_VALUE:
        factors.append(FACTOR_FINANCIAL_DEPENDENCY)
        score += 1

    return RiskAssessment(score=score, level=risk_level(score), factors=tuple(factors))
