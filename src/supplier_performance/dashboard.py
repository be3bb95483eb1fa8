"""Supplier performance dashboard - validates the period, fetches and scores.

The dashboard is constructed with its data source; it owns no connection
and keeps no state between calls. Invalid periods come back as ``Err``
before anything is fetched. Data-source failures are logged and re-raised
so a run never returns partial results.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from dataclasses import dataclass, field
from datetime import date, timedelta

from config.settings import settings
from supplier_performance.db.supplier_source import SupplierDataSource
from supplier_performance.result import Ok, Result, validate_date_range
from supplier_performance.scoring.bundle import DashboardBundle, WidgetData, build_bundle, widget_view
from supplier_performance.scoring.comparison import ComparisonResult, compare_suppliers
from supplier_performance.scoring.enrichment import enrich_suppliers
from supplier_performance.scoring.portfolio import group_by_category
from supplier_performance.scoring.records import EnrichedSupplierRecord, MonthlyTrendPoint, RawSupplierRecord
from supplier_performance.scoring.trend_analyzer import performance_trend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SupplierTrend:
    """Monthly history and trend direction for one supplier."""
    supplier_id: str
    monthly_trends: list[MonthlyTrendPoint] = field(default_factory=list)
    performance_trend: str = "stable"


def _active(records: list[RawSupplierRecord]) -> list[RawSupplierRecord]:
    """Drop suppliers with no orders in the period."""
    active = [r for r in records if r.total_orders > 0]
    if len(active) != len(records):
        logger.debug("Dropped %d suppliers with no activity", len(records) - len(active))
    return active


class SupplierPerformanceDashboard:
    """Supplier scorecards, rankings, categories, trends and comparisons."""

    def __init__(self, source: SupplierDataSource, executor: Executor | None = None) -> None:
        self._source = source
        self._executor = executor

    async def _fetch(self, start: date, end: date) -> list[RawSupplierRecord]:
        try:
            records = await self._source.fetch_supplier_records(start, end)
        except Exception:
            logger.exception(
                "Failed to fetch supplier performance data for %s..%s", start, end
            )
            raise
        return _active(records)

    async def generate(self, start: date, end: date) -> Result[DashboardBundle]:
        """Full dashboard bundle for the period."""
        err = validate_date_range(start, end)
        if err is not None:
            return err

        logger.info("Generating supplier performance dashboard for %s..%s", start, end)
        records = await self._fetch(start, end)
        return Ok(build_bundle(records, self._executor))

    async def generate_by_category(
        self, start: date, end: date,
    ) -> Result[dict[str, list[EnrichedSupplierRecord]]]:
        """Enriched suppliers bucketed by category."""
        err = validate_date_range(start, end)
        if err is not None:
            return err

        records = await self._fetch(start, end)
        return Ok(group_by_category(enrich_suppliers(records, self._executor)))

    async def generate_trends(
        self, supplier_id: str, months: int | None = None,
    ) -> SupplierTrend:
        """Trailing monthly history for one supplier and its trend direction."""
        window = months if months is not None else settings.trend_window_months
        points = await self._source.fetch_monthly_trends(supplier_id, window)
        return SupplierTrend(
            supplier_id=supplier_id,
            monthly_trends=points,
            performance_trend=performance_trend(points),
        )

    async def compare_suppliers(
        self, supplier_ids: list[str], start: date, end: date,
    ) -> Result[ComparisonResult]:
        """Rank an explicit set of suppliers against each other."""
        err = validate_date_range(start, end)
        if err is not None:
            return err

        if not supplier_ids:
            return Ok(ComparisonResult())

        records = await self._fetch(start, end)
        return Ok(compare_suppliers(supplier_ids, records))

    async def widget_data(self, today: date | None = None) -> Result[WidgetData]:
        """Dashboard widget payload for the trailing widget window."""
        end = today or date.today()
        start = end - timedelta(days=settings.widget_window_days)

        result = await self.generate(start, end)
        if not isinstance(result, Ok):
            return result
        return Ok(widget_view(result.value, start, end, settings.widget_top_n))
