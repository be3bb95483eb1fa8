"""Tests for monthly trend classification."""

from supplier_performance.scoring.records import MonthlyTrendPoint
from supplier_performance.scoring.trend_analyzer import performance_trend


def _points(*values: float) -> list[MonthlyTrendPoint]:
    return [
        MonthlyTrendPoint(month=f"2025-{i + 1:02d}", orders_count=5, total_value=v)
        for i, v in enumerate(values)
    ]


class TestPerformanceTrend:
    def test_empty_is_stable(self):
        assert performance_trend([]) == "stable"

    def test_two_points_is_stable(self):
        assert performance_trend(_points(100, 1000)) == "stable"

    def test_improving(self):
        assert performance_trend(_points(100, 50, 120)) == "improving"

    def test_declining(self):
        assert performance_trend(_points(100, 500, 80)) == "declining"

    def test_within_band_is_stable(self):
        assert performance_trend(_points(100, 100, 105)) == "stable"
        assert performance_trend(_points(100, 100, 95)) == "stable"

    def test_middle_point_ignored(self):
        assert performance_trend(_points(100, 0, 100)) == "stable"
        assert performance_trend(_points(100, 10_000, 100)) == "stable"

    def test_only_last_three_used(self):
        # Early months would read as declining; the last three are rising
        assert performance_trend(_points(5000, 4000, 100, 100, 200)) == "improving"

    def test_from_zero(self):
        assert performance_trend(_points(0, 0, 10)) == "improving"
        assert performance_trend(_points(0, 0, 0)) == "stable"
