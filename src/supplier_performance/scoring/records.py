"""Supplier performance records - raw inputs and enriched outputs.

Raw records arrive one per supplier per period from the data source; enriched
records are built from them by the metrics pipeline and never mutated after.
"""

from __future__ import annotations

from dataclasses import dataclass, field


DEFAULT_CATEGORY = "Uncategorized"


@dataclass(frozen=True)
class RawSupplierRecord:
    """Transactional counters for one supplier over one period."""
    supplier_id: str
    supplier_name: str
    total_orders: int
    total_value: float
    on_time_deliveries: int
    late_deliveries: int
    quality_issues: int
    avg_lead_time: float | None = None  # None when nothing was delivered
    category: str | None = None


@dataclass(frozen=True)
class EnrichedSupplierRecord:
    """A raw record plus its derived rates, score, grade and risk."""
    supplier_id: str
    supplier_name: str
    category: str
    total_orders: int
    total_value: float
    on_time_deliveries: int
    late_deliveries: int
    quality_issues: int
    avg_lead_time: float | None
    on_time_delivery_rate: float
    delivery_rating: str  # "Excellent", "Good", "Acceptable", "Poor"
    quality_score: float
    avg_order_value: float
    overall_score: float
    performance_grade: str  # "A".."F"
    risk_level: str  # "Low", "Medium", "High"
    risk_factors: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MonthlyTrendPoint:
    """Order volume and value for one supplier in one month."""
    month: str  # "YYYY-MM"
    orders_count: int
    total_value: float
    avg_lead_time: float | None = None
