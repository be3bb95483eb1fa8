"""Tests for the additive supplier risk assessment."""

from supplier_performance.scoring.records import RawSupplierRecord
from supplier_performance.scoring.risk_assessor import (
    FACTOR_FINANCIAL_DEPENDENCY,
    FACTOR_LEAD_TIMES,
    FACTOR_POOR_DELIVERY,
    FACTOR_QUALITY_ISSUES,
    RiskAssessment,
    assess_risk,
    risk_level,
)


def _record(**overrides) -> RawSupplierRecord:
    defaults = dict(
        supplier_id="S1",
        supplier_name="Acme Steel",
        total_orders=100,
        total_value=50_000.0,
        on_time_deliveries=95,
        late_deliveries=5,
        quality_issues=2,
        avg_lead_time=10.0,
    )
    defaults.update(overrides)
    return RawSupplierRecord(**defaults)


class TestRiskLevel:
    def test_levels(self):
        assert risk_level(0) == "Low"
        assert risk_level(2) == "Low"
        assert risk_level(3) == "Medium"
        assert risk_level(4) == "Medium"
        assert risk_level(5) == "High"
        assert risk_level(9) == "High"


class TestAssessRisk:
    def test_clean_supplier_is_low(self):
        risk = assess_risk(_record())
        assert isinstance(risk, RiskAssessment)
        assert risk.score == 0
        assert risk.level == "Low"
        assert risk.factors == ()

    def test_late_rate_at_threshold(self):
        risk = assess_risk(_record(late_deliveries=30))
        assert risk.factors == (FACTOR_POOR_DELIVERY,)
        assert risk.score == 3
        assert risk.level == "Medium"

    def test_late_rate_below_threshold(self):
        risk = assess_risk(_record(late_deliveries=29))
        assert FACTOR_POOR_DELIVERY not in risk.factors

    def test_quality_issue_rate_at_threshold(self):
        risk = assess_risk(_record(quality_issues=5))
        assert risk.factors == (FACTOR_QUALITY_ISSUES,)
        assert risk.score == 3

    def test_lead_time_over_30(self):
        risk = assess_risk(_record(avg_lead_time=30.5))
        assert risk.factors == (FACTOR_LEAD_TIMES,)
        assert risk.score == 2
        assert risk.level == "Low"

    def test_lead_time_exactly_30_not_flagged(self):
        assert assess_risk(_record(avg_lead_time=30.0)).factors == ()

    def test_missing_lead_time_uses_default(self):
        assert assess_risk(_record(avg_lead_time=None)).factors == ()

    def test_financial_dependency(self):
        risk = assess_risk(_record(total_value=100_000.01))
        assert risk.factors == (FACTOR_FINANCIAL_DEPENDENCY,)
        assert risk.score == 1

    def test_exactly_100k_not_flagged(self):
        assert assess_risk(_record(total_value=100_000.0)).factors == ()

    def test_weak_supplier_all_factors_in_order(self):
        risk = assess_risk(_record(
            total_orders=40,
            total_value=150_000.0,
            on_time_deliveries=20,
            late_deliveries=20,
            quality_issues=3,
            avg_lead_time=35.0,
        ))
        # 3 issues on 40 orders is 7.5%, above the 5% quality threshold
        assert risk.factors == (
            FACTOR_POOR_DELIVERY,
            FACTOR_QUALITY_ISSUES,
            FACTOR_LEAD_TIMES,
            FACTOR_FINANCIAL_DEPENDENCY,
        )
        assert risk.score == 9
        assert risk.level == "High"

    def test_delivery_lead_and_value_is_high(self):
        risk = assess_risk(_record(
            total_orders=40,
            total_value=150_000.0,
            on_time_deliveries=20,
            late_deliveries=20,
            quality_issues=1,
            avg_lead_time=35.0,
        ))
        assert risk.factors == (
            FACTOR_POOR_DELIVERY,
            FACTOR_LEAD_TIMES,
            FACTOR_FINANCIAL_DEPENDENCY,
        )
        assert risk.score == 6
        assert risk.level == "High"

    def test_no_duplicate_factors(self):
        risk = assess_risk(_record(late_deliveries=100, quality_issues=100, avg_lead_time=99, total_value=1e9))
        assert len(risk.factors) == len(set(risk.factors))
