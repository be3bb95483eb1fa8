"""Supplier trend direction from monthly order value."""

from __future__ import annotations

from supplier_performance.scoring.records import MonthlyTrendPoint


MIN_TREND_POINTS = 3
IMPROVING_RATIO = 1.1
DECLINING_RATIO = 0.9


def performance_trend(points: list[MonthlyTrendPoint]) -> str:
    """Classify a chronological monthly series as improving/declining/stable.

    Compares the most recent month's value against the month two before it.
    Fewer than three points is reported as stable.
    """
    if len(points) < MIN_TREND_POINTS:
        return "stable"

    first, _, last = points[-3:]
    if last.total_value > first.total_value * IMPROVING_RATIO:
        return "improving"
    if last.total_value < first.total_value * DECLINING_RATIO:
        return "declining"
    return "stable"
