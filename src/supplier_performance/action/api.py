"""FastAPI application exposing the supplier performance dashboard."""

import logging

from fastapi import FastAPI

from supplier_performance.action.routers.supplier_performance import register
from supplier_performance.dashboard import SupplierPerformanceDashboard
from supplier_performance.db.connection import create_session_factory
from supplier_performance.db.supplier_source import SqlSupplierDataSource

logger = logging.getLogger(__name__)

app = FastAPI(title="Supplier Performance API", version="1.0.0")

register(app, SupplierPerformanceDashboard(SqlSupplierDataSource(create_session_factory())))


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}
