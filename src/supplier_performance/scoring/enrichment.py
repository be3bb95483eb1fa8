"""Per-supplier enrichment - turns raw records into scored, graded, risk-rated records.

Each record is enriched independently, so a batch can be fanned out over an
executor. ``Executor.map`` yields results in input order, which the stable
ranking sort relies on.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Iterable

from supplier_performance.scoring.metrics import (
    DEFAULT_WEIGHTS,
    ScoreWeights,
    assign_grade,
    calculate_rates,
    overall_score,
    rate_delivery,
)
from supplier_performance.scoring.records import (
    DEFAULT_CATEGORY,
    EnrichedSupplierRecord,
    RawSupplierRecord,
)
from supplier_performance.scoring.risk_assessor import assess_risk


def enrich_supplier(
    record: RawSupplierRecord,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> EnrichedSupplierRecord:
    """Compute every derived field for one supplier.

    Raises:
        ValueError: if the record has no orders in the period.
    """
    if record.total_orders <= 0:
        raise ValueError(
            f"Supplier {record.supplier_id} has no orders in the period"
        )

    rates = calculate_rates(record)
    score = overall_score(
        rates.on_time_delivery_rate,
        rates.quality_score,
        record.avg_lead_time,
        weights,
    )
    risk = assess_risk(record)

    return EnrichedSupplierRecord(
        supplier_id=record.supplier_id,
        supplier_name=record.supplier_name,
        category=record.category or DEFAULT_CATEGORY,
        total_orders=record.total_orders,
        total_value=record.total_value,
        on_time_deliveries=record.on_time_deliveries,
        late_deliveries=record.late_deliveries,
        quality_issues=record.quality_issues,
        avg_lead_time=record.avg_lead_time,
        on_time_delivery_rate=rates.on_time_delivery_rate,
        delivery_rating=rate_delivery(rates.on_time_delivery_rate),
        quality_score=rates.quality_score,
        avg_order_value=rates.avg_order_value,
        overall_score=score,
        performance_grade=assign_grade(score),
        risk_level=risk.level,
        risk_factors=risk.factors,
    )


def enrich_suppliers(
    records: Iterable[RawSupplierRecord],
    executor: Executor | None = None,
) -> list[EnrichedSupplierRecord]:
    """Enrich a batch, optionally in parallel, preserving input order."""
    if executor is None:
        return [enrich_supplier(r) for r in records]
    return list(executor.map(enrich_supplier, records))
