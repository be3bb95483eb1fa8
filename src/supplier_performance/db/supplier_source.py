"""Supplier data source - raw per-supplier counters and monthly trends from SQL.

The dashboard only depends on the ``SupplierDataSource`` protocol; the SQL
implementation here reads the purchasing tables (suppliers, purch_orders,
grn_batch, supp_trans). Query failures are not caught: a failed fetch must
abort the whole dashboard run.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Protocol

from sqlalchemy import text as sql_text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from config.settings import settings
from supplier_performance.scoring.records import MonthlyTrendPoint, RawSupplierRecord

logger = logging.getLogger(__name__)


class SupplierDataSource(Protocol):
    """What the dashboard needs from the transactional store."""

    async def fetch_supplier_records(self, start: date, end: date) -> list[RawSupplierRecord]:
        """One record per active supplier with orders between start and end."""
        ...

    async def fetch_monthly_trends(self, supplier_id: str, months: int) -> list[MonthlyTrendPoint]:
        """Chronological monthly points for one supplier over the trailing window."""
        ...


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------

_SUPPLIER_PERFORMANCE_SQL = """
    SELECT
        s.supplier_id,
        s.supp_name AS supplier_name,
        s.dimension_id AS category,
        COUNT(DISTINCT po.order_no) AS total_orders,
        COALESCE(SUM(po.total), 0) AS total_value,
        SUM(CASE
            WHEN grn.delivery_date IS NOT NULL
             AND grn.delivery_date <= po.ord_date + CAST(:on_time_days AS integer)
            THEN 1 ELSE 0 END) AS on_time_deliveries,
        SUM(CASE
            WHEN grn.delivery_date IS NOT NULL
             AND grn.delivery_date > po.ord_date + CAST(:on_time_days AS integer)
            THEN 1 ELSE 0 END) AS late_deliveries,
        (SELECT COUNT(*)
           FROM supp_trans st
          WHERE st.supplier_id = s.supplier_id
            AND st.type = :credit_type
            AND st.tran_date BETWEEN :start_date AND :end_date) AS quality_issues,
        AVG(grn.delivery_date - po.ord_date) AS avg_lead_time
    FROM suppliers s
    JOIN purch_orders po ON s.supplier_id = po.supplier_id
    LEFT JOIN grn_batch grn ON po.order_no = grn.purch_order_no
    WHERE po.ord_date BETWEEN :start_date AND :end_date
      AND s.inactive = 0
    GROUP BY s.supplier_id, s.supp_name, s.dimension_id
    HAVING COUNT(DISTINCT po.order_no) > 0
    ORDER BY total_value DESC
"""

_MONTHLY_TRENDS_SQL = """
    SELECT
        to_char(po.ord_date, 'YYYY-MM') AS month,
        COUNT(*) AS orders_count,
        COALESCE(SUM(po.total), 0) AS total_value,
        AVG(grn.delivery_date - po.ord_date) AS avg_lead_time
    FROM purch_orders po
    LEFT JOIN grn_batch grn ON po.order_no = grn.purch_order_no
    WHERE po.supplier_id::text = :supplier_id
      AND po.ord_date >= CURRENT_DATE - make_interval(months => :months)
    GROUP BY to_char(po.ord_date, 'YYYY-MM')
    ORDER BY month ASC
"""


# ---------------------------------------------------------------------------
# Row mapping
# ---------------------------------------------------------------------------


def _safe_float(val) -> float | None:
    """Convert a value to float, returning None on failure."""
    if val is None:
        return None
    try:
        return float(val)
    except (TypeError, ValueError):
        return None


def _category(val) -> str | None:
    """Dimension 0 / empty means the supplier has no category."""
    if val is None or val == 0 or str(val).strip() in ("", "0"):
        return None
    return str(val)


def row_to_record(row: dict) -> RawSupplierRecord:
    """Map one supplier-performance row to a RawSupplierRecord."""
    return RawSupplierRecord(
        supplier_id=str(row["supplier_id"]),
        supplier_name=str(row.get("supplier_name") or ""),
        category=_category(row.get("category")),
        total_orders=int(row.get("total_orders") or 0),
        total_value=_safe_float(row.get("total_value")) or 0.0,
        on_time_deliveries=int(row.get("on_time_deliveries") or 0),
        late_deliveries=int(row.get("late_deliveries") or 0),
        quality_issues=int(row.get("quality_issues") or 0),
        avg_lead_time=_safe_float(row.get("avg_lead_time")),
    )


def row_to_trend_point(row: dict) -> MonthlyTrendPoint:
    """Map one monthly-trend row to a MonthlyTrendPoint."""
    return MonthlyTrendPoint(
        month=str(row["month"]),
        orders_count=int(row.get("orders_count") or 0),
        total_value=_safe_float(row.get("total_value")) or 0.0,
        avg_lead_time=_safe_float(row.get("avg_lead_time")),
    )


# ---------------------------------------------------------------------------
# SQL implementation
# ---------------------------------------------------------------------------


class SqlSupplierDataSource:
    """SupplierDataSource backed by the purchasing tables.

    Opens a fresh session from ``session_factory`` for every fetch.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        on_time_days: int | None = None,
        credit_type: int | None = None,
    ) -> None:
        self._session_factory = session_factory
        self._on_time_days = on_time_days if on_time_days is not None else settings.on_time_window_days
        self._credit_type = credit_type if credit_type is not None else settings.supplier_credit_type

    async def fetch_supplier_records(self, start: date, end: date) -> list[RawSupplierRecord]:
        params = {
            "start_date": start,
            "end_date": end,
            "on_time_days": self._on_time_days,
            "credit_type": self._credit_type,
        }
        async with self._session_factory() as session:
            result = await session.execute(sql_text(_SUPPLIER_PERFORMANCE_SQL), params)
            rows = [dict(r._mapping) for r in result.fetchall()]

        records = [row_to_record(r) for r in rows]
        logger.debug("Fetched %d supplier records for %s..%s", len(records), start, end)
        return records

    async def fetch_monthly_trends(self, supplier_id: str, months: int) -> list[MonthlyTrendPoint]:
        params = {"supplier_id": supplier_id, "months": months}
        async with self._session_factory() as session:
            result = await session.execute(sql_text(_MONTHLY_TRENDS_SQL), params)
            rows = [dict(r._mapping) for r in result.fetchall()]

        return [row_to_trend_point(r) for r in rows]
