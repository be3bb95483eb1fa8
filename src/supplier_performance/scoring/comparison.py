"""Multi-supplier comparison - score an explicit subset and find the leaders.

Requested IDs that are not in the candidate set are dropped silently.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from supplier_performance.scoring.enrichment import enrich_suppliers
from supplier_performance.scoring.ranking import rank_suppliers
from supplier_performance.scoring.records import EnrichedSupplierRecord, RawSupplierRecord


@dataclass(frozen=True)
class ComparisonMetrics:
    """Best value of each headline metric across the compared suppliers."""
    best_delivery: float
    best_quality: float
    shortest_lead_time: float | None  # None when no supplier has a lead time
    highest_volume: float


@dataclass(frozen=True)
class ComparisonResult:
    """Ranked subset, its winner and cross-supplier extrema."""
    comparison: list[EnrichedSupplierRecord] = field(default_factory=list)
    winner: EnrichedSupplierRecord | None = None
    metrics: ComparisonMetrics | None = None


def comparison_metrics(
    suppliers: list[EnrichedSupplierRecord],
) -> ComparisonMetrics | None:
    if not suppliers:
        return None

    lead_times = [s.avg_lead_time for s in suppliers if s.avg_lead_time is not None]
    return ComparisonMetrics(
        best_delivery=max(s.on_time_delivery_rate for s in suppliers),
        best_quality=max(s.quality_score for s in suppliers),
        shortest_lead_time=min(lead_times) if lead_times else None,
        highest_volume=max(s.total_value for s in suppliers),
    )


def compare_suppliers(
    supplier_ids: Iterable[str],
    candidates: list[RawSupplierRecord],
) -> ComparisonResult:
    """Enrich and rank the requested suppliers from ``candidates``.

    Args:
        supplier_ids: IDs to compare.
        candidates: Every raw record available for the period.

    Returns:
        ComparisonResult; empty with no winner when nothing matches.
    """
    wanted = set(supplier_ids)
    selected = [
        r for r in candidates
        if r.supplier_id in wanted and r.total_orders > 0
    ]

    ranked = rank_suppliers(enrich_suppliers(selected))
    return ComparisonResult(
        comparison=ranked,
        winner=ranked[0] if ranked else None,
        metrics=comparison_metrics(ranked),
    )
