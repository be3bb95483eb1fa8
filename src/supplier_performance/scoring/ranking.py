"""Supplier ranking - order by overall score and pick top/under performers."""

from __future__ import annotations

from typing import Iterable

from supplier_performance.scoring.records import EnrichedSupplierRecord


TOP_PERFORMER_SCORE = 85.0
TOP_PERFORMER_LIMIT = 5
UNDERPERFORMER_SCORE = 70.0


def rank_suppliers(
    suppliers: Iterable[EnrichedSupplierRecord],
) -> list[EnrichedSupplierRecord]:
    """Sort by overall score descending; equal scores keep input order."""
    return sorted(suppliers, key=lambda s: -s.overall_score)


def top_performers(
    ranked: list[EnrichedSupplierRecord],
    limit: int = TOP_PERFORMER_LIMIT,
) -> list[EnrichedSupplierRecord]:
    """First ``limit`` ranked suppliers scoring at least 85."""
    return [s for s in ranked if s.overall_score >= TOP_PERFORMER_SCORE][:limit]


def underperformers(
    ranked: list[EnrichedSupplierRecord],
) -> list[EnrichedSupplierRecord]:
    """Every ranked supplier scoring below 70."""
    return [s for s in ranked if s.overall_score < UNDERPERFORMER_SCORE]
