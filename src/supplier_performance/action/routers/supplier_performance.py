"""Supplier performance routes."""

import logging
from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse

from supplier_performance.dashboard import SupplierPerformanceDashboard
from supplier_performance.result import Err
from supplier_performance.scoring.report_formatter import format_dashboard

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/supplier-performance", tags=["supplier-performance"])


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register(app: FastAPI, dashboard: SupplierPerformanceDashboard) -> None:
    """Attach the supplier performance routes to ``app``. Call once at startup."""
    app.state.supplier_dashboard = dashboard
    app.include_router(router)
    logger.info("Supplier performance routes registered")


def get_dashboard(request: Request) -> SupplierPerformanceDashboard:
    dashboard = getattr(request.app.state, "supplier_dashboard", None)
    if dashboard is None:
        raise HTTPException(status_code=503, detail="Supplier performance dashboard not registered")
    return dashboard


def _unwrap(result):
    """Return the Ok value or raise 422 for a rejected request."""
    if isinstance(result, Err):
        raise HTTPException(status_code=422, detail=result.error.message)
    return result.value


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


@router.get("/dashboard")
async def get_supplier_dashboard(
    start_date: date,
    end_date: date,
    dashboard: SupplierPerformanceDashboard = Depends(get_dashboard),
) -> dict:
    """Scored and ranked suppliers with portfolio summary for a period."""
    bundle = _unwrap(await dashboard.generate(start_date, end_date))
    return asdict(bundle)


@router.get("/categories")
async def get_supplier_categories(
    start_date: date,
    end_date: date,
    dashboard: SupplierPerformanceDashboard = Depends(get_dashboard),
) -> dict:
    """Scored suppliers grouped by category."""
    categories = _unwrap(await dashboard.generate_by_category(start_date, end_date))
    return {
        "categories": {
            name: [asdict(s) for s in suppliers]
            for name, suppliers in categories.items()
        }
    }


@router.get("/trends/{supplier_id}")
async def get_supplier_trends(
    supplier_id: str,
    months: int | None = Query(default=None, ge=1, le=60),
    dashboard: SupplierPerformanceDashboard = Depends(get_dashboard),
) -> dict:
    """Monthly order history and trend direction for one supplier."""
    trend = await dashboard.generate_trends(supplier_id, months)
    return asdict(trend)


@router.get("/compare")
async def compare_supplier_performance(
    start_date: date,
    end_date: date,
    supplier_ids: list[str] = Query(default=[]),
    dashboard: SupplierPerformanceDashboard = Depends(get_dashboard),
) -> dict:
    """Head-to-head ranking of the requested suppliers."""
    comparison = _unwrap(await dashboard.compare_suppliers(supplier_ids, start_date, end_date))
    return asdict(comparison)


@router.get("/widget")
async def get_supplier_widget(
    dashboard: SupplierPerformanceDashboard = Depends(get_dashboard),
) -> dict:
    """Compact summary for the home dashboard widget."""
    widget = _unwrap(await dashboard.widget_data())
    return asdict(widget)


@router.get("/report", response_class=PlainTextResponse)
async def get_supplier_report(
    start_date: date,
    end_date: date,
    dashboard: SupplierPerformanceDashboard = Depends(get_dashboard),
):
    """Plain-text dashboard report."""
    bundle = _unwrap(await dashboard.generate(start_date, end_date))
    return PlainTextResponse(format_dashboard(bundle))
