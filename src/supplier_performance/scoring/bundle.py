"""Dashboard bundle - the full pipeline from raw records to ranked results.

``build_bundle`` is the pure core of a dashboard run: enrich every supplier,
rank, pick top/under performers and reduce to portfolio figures. The widget
payload is a trimmed view of a bundle for a fixed trailing period.
"""

from __future__ import annotations

from concurrent.futures import Executor
from dataclasses import dataclass, field
from datetime import date

from supplier_performance.scoring.enrichment import enrich_suppliers
from supplier_performance.scoring.portfolio import (
    EMPTY_SUMMARY,
    AggregateMetrics,
    PortfolioSummary,
    aggregate_metrics,
    summarize,
)
from supplier_performance.scoring.ranking import rank_suppliers, top_performers, underperformers
from supplier_performance.scoring.records import EnrichedSupplierRecord, RawSupplierRecord


@dataclass(frozen=True)
class DashboardBundle:
    """Everything a dashboard run produces for one period."""
    suppliers: list[EnrichedSupplierRecord] = field(default_factory=list)
    summary: PortfolioSummary = EMPTY_SUMMARY
    top_performers: list[EnrichedSupplierRecord] = field(default_factory=list)
    underperformers: list[EnrichedSupplierRecord] = field(default_factory=list)
    metrics: AggregateMetrics | None = None


@dataclass(frozen=True)
class WidgetPeriod:
    start: date
    end: date
    days: int


@dataclass(frozen=True)
class WidgetData:
    """Compact dashboard-widget view of a bundle."""
    summary: PortfolioSummary
    top_performers: list[EnrichedSupplierRecord]
    underperformers: list[EnrichedSupplierRecord]
    metrics: AggregateMetrics | None
    period: WidgetPeriod


EMPTY_BUNDLE = DashboardBundle()


def build_bundle(
    records: list[RawSupplierRecord],
    executor: Executor | None = None,
) -> DashboardBundle:
    """Run the scoring pipeline over one period's raw records.

    Records must all have orders in the period. An empty list yields a
    fresh bundle equal to ``EMPTY_BUNDLE``.
    """
    if not records:
        return DashboardBundle()

    ranked = rank_suppliers(enrich_suppliers(records, executor))
    return DashboardBundle(
        suppliers=ranked,
        summary=summarize(ranked),
        top_performers=top_performers(ranked),
        underperformers=underperformers(ranked),
        metrics=aggregate_metrics(ranked),
    )


def widget_view(
    bundle: DashboardBundle,
    start: date,
    end: date,
    top_n: int,
) -> WidgetData:
    """Trim a bundle to the first ``top_n`` top and under performers."""
    return WidgetData(
        summary=bundle.summary,
        top_performers=bundle.top_performers[:top_n],
        underperformers=bundle.underperformers[:top_n],
        metrics=bundle.metrics,
        period=WidgetPeriod(start=start, end=end, days=(end - start).days),
    )
