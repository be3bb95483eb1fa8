"""Report formatter - plain-text rendering of a supplier performance dashboard."""

from __future__ import annotations

from supplier_performance.scoring.bundle import DashboardBundle
from supplier_performance.scoring.records import EnrichedSupplierRecord


def _format_money(value: float) -> str:
    return f"{value:,.2f}"


def _supplier_line(rank: int, s: EnrichedSupplierRecord) -> str:
    risk = s.risk_level
    if s.risk_factors:
        risk += f" ({', '.join(s.risk_factors)})"
    return (
        f"{rank:<6}{s.supplier_name[:24]:<25}{s.overall_score:>8.2f}{s.performance_grade:>7}"
        f"{s.on_time_delivery_rate:>10.1f}{s.quality_score:>10.1f}  {risk}"
    )


def format_dashboard(bundle: DashboardBundle, title: str = "Supplier Performance Dashboard") -> str:
    """Format a dashboard bundle as a human-readable text report.

    Args:
        bundle: Result of a dashboard run.
        title: Heading for the first line.

    Returns:
        Multi-line string with summary, ranking table and performer lists.
    """
    summary = bundle.summary
    lines = [
        title,
        "=" * 80,
        (
            f"Suppliers: {summary.total_suppliers}  "
            f"Orders: {summary.total_orders}  "
            f"Value: {_format_money(summary.total_value)}"
        ),
        (
            f"On-time rate: {summary.overall_on_time_rate:.1f}%  "
            f"Quality score: {summary.overall_quality_score:.1f}%  "
            f"Avg order value: {_format_money(summary.avg_order_value)}"
        ),
        "",
    ]

    if not bundle.suppliers:
        lines.append("No supplier activity in this period.")
        return "\n".join(lines)

    lines.extend([
        f"{'Rank':<6}{'Supplier':<25}{'Score':>8}{'Grade':>7}{'On-time':>10}{'Quality':>10}  Risk",
        "-" * 80,
    ])
    for idx, s in enumerate(bundle.suppliers, start=1):
        lines.append(_supplier_line(idx, s))
    lines.append("-" * 80)

    top = ", ".join(s.supplier_name for s in bundle.top_performers) or "-"
    under = ", ".join(s.supplier_name for s in bundle.underperformers) or "-"
    lines.append(f"Top performers: {top}")
    lines.append(f"Underperformers: {under}")

    if bundle.metrics is not None:
        lines.append(
            f"Mean score: {bundle.metrics.avg_performance_score:.2f}  "
            f"Avg lead time: {bundle.metrics.avg_lead_time:.1f} days"
        )
    return "\n".join(lines)
