"""Tests for SupplierPerformanceDashboard with a mock data source."""

from datetime import date, timedelta
from unittest.mock import AsyncMock

import pytest

from supplier_performance.dashboard import SupplierPerformanceDashboard, SupplierTrend
from supplier_performance.result import Err, InvalidDateRange, Ok
from supplier_performance.scoring.bundle import EMPTY_BUNDLE, DashboardBundle, WidgetData
from supplier_performance.scoring.comparison import ComparisonResult
from supplier_performance.scoring.records import DEFAULT_CATEGORY, MonthlyTrendPoint, RawSupplierRecord


START = date(2025, 1, 1)
END = date(2025, 3, 31)


def _records() -> list[RawSupplierRecord]:
    return [
        RawSupplierRecord("S1", "Acme Steel", 100, 50_000.0, 95, 5, 2, 10.0, "Raw Materials"),
        RawSupplierRecord("S2", "Slow Parts", 40, 150_000.0, 20, 20, 3, 35.0),
        RawSupplierRecord("S3", "Idle Inc", 0, 0.0, 0, 0, 0, None),
    ]


def _source(records=None, trends=None) -> AsyncMock:
    source = AsyncMock()
    source.fetch_supplier_records = AsyncMock(return_value=_records() if records is None else records)
    source.fetch_monthly_trends = AsyncMock(return_value=trends or [])
    return source


class TestGenerate:
    @pytest.mark.asyncio
    async def test_returns_ok_bundle(self):
        dashboard = SupplierPerformanceDashboard(_source())
        result = await dashboard.generate(START, END)
        assert isinstance(result, Ok)
        assert result.ok
        assert isinstance(result.value, DashboardBundle)
        assert [s.supplier_id for s in result.value.suppliers] == ["S1", "S2"]

    @pytest.mark.asyncio
    async def test_zero_order_suppliers_dropped(self):
        result = await SupplierPerformanceDashboard(_source()).generate(START, END)
        assert result.value.summary.total_suppliers == 2

    @pytest.mark.asyncio
    async def test_invalid_range_not_fetched(self):
        source = _source()
        result = await SupplierPerformanceDashboard(source).generate(END, START)
        assert isinstance(result, Err)
        assert not result.ok
        assert result.error == InvalidDateRange(start=END, end=START)
        assert "must not be after" in result.error.message
        source.fetch_supplier_records.assert_not_called()

    @pytest.mark.asyncio
    async def test_same_day_is_valid(self):
        result = await SupplierPerformanceDashboard(_source()).generate(START, START)
        assert isinstance(result, Ok)

    @pytest.mark.asyncio
    async def test_empty_period(self):
        result = await SupplierPerformanceDashboard(_source(records=[])).generate(START, END)
        assert result.value == EMPTY_BUNDLE
        assert result.value.summary.overall_quality_score == 100

    @pytest.mark.asyncio
    async def test_source_failure_propagates(self):
        source = _source()
        source.fetch_supplier_records.side_effect = RuntimeError("db down")
        with pytest.raises(RuntimeError, match="db down"):
            await SupplierPerformanceDashboard(source).generate(START, END)

    @pytest.mark.asyncio
    async def test_passes_period_to_source(self):
        source = _source()
        await SupplierPerformanceDashboard(source).generate(START, END)
        source.fetch_supplier_records.assert_awaited_once_with(START, END)


class TestGenerateByCategory:
    @pytest.mark.asyncio
    async def test_groups(self):
        result = await SupplierPerformanceDashboard(_source()).generate_by_category(START, END)
        assert set(result.value) == {"Raw Materials", DEFAULT_CATEGORY}

    @pytest.mark.asyncio
    async def test_invalid_range(self):
        result = await SupplierPerformanceDashboard(_source()).generate_by_category(END, START)
        assert isinstance(result, Err)


class TestGenerateTrends:
    @pytest.mark.asyncio
    async def test_trend(self):
        points = [
            MonthlyTrendPoint("2025-01", 5, 1000.0, 9.0),
            MonthlyTrendPoint("2025-02", 4, 900.0, 10.0),
            MonthlyTrendPoint("2025-03", 6, 1500.0, None),
        ]
        source = _source(trends=points)
        trend = await SupplierPerformanceDashboard(source).generate_trends("S1")
        assert isinstance(trend, SupplierTrend)
        assert trend.supplier_id == "S1"
        assert trend.monthly_trends == points
        assert trend.performance_trend == "improving"
        source.fetch_monthly_trends.assert_awaited_once_with("S1", 12)

    @pytest.mark.asyncio
    async def test_custom_window(self):
        source = _source()
        trend = await SupplierPerformanceDashboard(source).generate_trends("S1", months=6)
        assert trend.performance_trend == "stable"
        source.fetch_monthly_trends.assert_awaited_once_with("S1", 6)

    @pytest.mark.asyncio
    async def test_explicit_zero_window_kept(self):
        source = _source(trends=[])
        trend = await SupplierPerformanceDashboard(source).generate_trends("S1", months=0)
        assert trend.monthly_trends == []
        source.fetch_monthly_trends.assert_awaited_once_with("S1", 0)


class TestCompareSuppliers:
    @pytest.mark.asyncio
    async def test_winner(self):
        result = await SupplierPerformanceDashboard(_source()).compare_suppliers(["S2", "S1"], START, END)
        assert isinstance(result.value, ComparisonResult)
        assert result.value.winner.supplier_id == "S1"

    @pytest.mark.asyncio
    async def test_empty_ids(self):
        source = _source()
        result = await SupplierPerformanceDashboard(source).compare_suppliers([], START, END)
        assert result.value.winner is None
        assert result.value.metrics is None
        source.fetch_supplier_records.assert_not_called()

    @pytest.mark.asyncio
    async def test_zero_order_supplier_not_compared(self):
        result = await SupplierPerformanceDashboard(_source()).compare_suppliers(["S3"], START, END)
        assert result.value.comparison == []

    @pytest.mark.asyncio
    async def test_invalid_range(self):
        result = await SupplierPerformanceDashboard(_source()).compare_suppliers(["S1"], END, START)
        assert isinstance(result, Err)


class TestWidgetData:
    @pytest.mark.asyncio
    async def test_trailing_window(self):
        source = _source()
        today = date(2025, 6, 30)
        result = await SupplierPerformanceDashboard(source).widget_data(today=today)
        assert isinstance(result.value, WidgetData)
        assert result.value.period.end == today
        assert result.value.period.start == today - timedelta(days=90)
        assert result.value.period.days == 90
        source.fetch_supplier_records.assert_awaited_once_with(today - timedelta(days=90), today)

    @pytest.mark.asyncio
    async def test_top_three(self):
        records = [
            RawSupplierRecord(f"S{i}", f"Supplier {i}", 100, 1000.0, 100, 0, 0, 7.0)
            for i in range(6)
        ]
        result = await SupplierPerformanceDashboard(_source(records=records)).widget_data(today=END)
        assert len(result.value.top_performers) == 3
        assert result.value.summary.total_suppliers == 6
