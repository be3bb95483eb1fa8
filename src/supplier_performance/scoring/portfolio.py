"""Portfolio aggregation - totals, aggregate metrics and category buckets.

Portfolio rates are computed from summed raw counters, never by averaging
per-supplier rates, so large suppliers weigh in proportion to their orders.
"""

from __future__ import annotations

from dataclasses import dataclass

from supplier_performance.scoring.records import DEFAULT_CATEGORY, EnrichedSupplierRecord


@dataclass(frozen=True)
class PortfolioSummary:
    """Totals across every supplier in scope."""
    total_suppliers: int
    total_orders: int
    total_value: float
    overall_on_time_rate: float
    overall_quality_score: float
    avg_order_value: float


@dataclass(frozen=True)
class AggregateMetrics:
    """Headline figures for a ranked supplier set."""
    avg_performance_score: float
    best_performer: str
    worst_performer: str
    avg_lead_time: float


# Returned when the period has no supplier activity at all
EMPTY_SUMMARY = PortfolioSummary(
    total_suppliers=0,
    total_orders=0,
    total_value=0.0,
    overall_on_time_rate=0.0,
    overall_quality_score=100.0,
    avg_order_value=0.0,
)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------


def summarize(suppliers: list[EnrichedSupplierRecord]) -> PortfolioSummary:
    """Sum raw counters across all suppliers and derive portfolio rates."""
    if not suppliers:
        return EMPTY_SUMMARY

    total_orders = sum(s.total_orders for s in suppliers)
    total_value = sum(s.total_value for s in suppliers)
    total_on_time = sum(s.on_time_deliveries for s in suppliers)
    total_issues = sum(s.quality_issues for s in suppliers)

    if total_orders > 0:
        on_time_rate = total_on_time / total_orders * 100
        quality = max(0.0, (total_orders - total_issues) / total_orders * 100)
        avg_order_value = total_value / total_orders
    else:
        on_time_rate = 0.0
        quality = 100.0
        avg_order_value = 0.0

    return PortfolioSummary(
        total_suppliers=len(suppliers),
        total_orders=total_orders,
        total_value=total_value,
        overall_on_time_rate=on_time_rate,
        overall_quality_score=quality,
        avg_order_value=avg_order_value,
    )


def aggregate_metrics(ranked: list[EnrichedSupplierRecord]) -> AggregateMetrics | None:
    """Average score, best/worst performer and average lead time.

    ``ranked`` must already be sorted best-first. Lead times are averaged
    over suppliers that have one. Returns None for an empty set.
    """
    if not ranked:
        return None

    scores = [s.overall_score for s in ranked]
    lead_times = [s.avg_lead_time for s in ranked if s.avg_lead_time is not None]

    return AggregateMetrics(
        avg_performance_score=round(sum(scores) / len(scores), 2),
        best_performer=ranked[0].supplier_name,
        worst_performer=ranked[-1].supplier_name,
        avg_lead_time=sum(lead_times) / len(lead_times) if lead_times else 0.0,
    )


# ---------------------------------------------------------------------------
# Categories
# ---------------------------------------------------------------------------


def group_by_category(
    suppliers: list[EnrichedSupplierRecord],
) -> dict[str, list[EnrichedSupplierRecord]]:
    """Bucket suppliers by category, keeping input order within each bucket."""
    categories: dict[str, list[EnrichedSupplierRecord]] = {}
    for s in suppliers:
        categories.setdefault(s.category or DEFAULT_CATEGORY, []).append(s)
    return categories
