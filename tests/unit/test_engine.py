"""Unit tests for the decision engine facade."""

import math

import orjson
import pytest
from pathlib import Path

from revdecision.config.defaults import get_default_config
from revdecision.engine import DealInputs, DecisionEngine, DecisionReport
from revdecision.errors import ConfigurationError
from revdecision.models.analysis import Recommendation
from revdecision.models.risk import RiskTier


class TestDealInputs:

    def test_liquid_capital_excludes_illiquid(self, sample_deal: DealInputs) -> None:
        """Test liquid capital excludes illiquid"""
        assert sample_deal.liquid_capital == 700000.0

    def test_plan_params(self, sample_deal: DealInputs) -> None:
        """Test plan params"""
        params = sample_deal.plan_params()

        assert params.face_value == 2000000.0
        assert params.upfront_payment == 500000.0
        assert params.duration_years == 15


class TestDecisionEngine:
    """Test suite for the DecisionEngine class."""

    def test_engine_initialization(self) -> None:
        """Test that the engine can be initialized."""
        engine = DecisionEngine()
        assert engine.config == get_default_config()

    def test_engine_with_profile(self) -> None:
        """Test engine with profile"""
        engine = DecisionEngine(profile="growth")

        assert engine.config.trend.window_years == 2
        assert engine.config.investment.risky_fraction == 0.8

    def test_engine_with_overrides(self) -> None:
        """Test engine with overrides"""
        engine = DecisionEngine(overrides={"decision": {"passive_return_rate": 0.08}})
        assert engine.config.decision.passive_return_rate == 0.08

    def test_engine_with_config_dir(self, tmp_path: Path) -> None:
        """Test engine with config dir"""
        (tmp_path / "profiles.yaml").write_text("profiles:\n  slow:\n    trend:\n      window_years: 5\n")

        engine = DecisionEngine(profile="slow", config_dir=str(tmp_path))
        assert engine.config.trend.window_years == 5

    def test_engine_rejects_invalid_overrides(self) -> None:
        """Test engine rejects invalid overrides"""
        with pytest.raises(ConfigurationError):
            DecisionEngine(overrides={"risk": {"full_coverage_pct": -1}})

    def test_engine_rejects_unknown_profile(self) -> None:
        """Test that a misspelled profile is an error, not the defaults."""
        with pytest.raises(ConfigurationError):
            DecisionEngine(profile="cautius")

    def test_ingest(self, sample_rows) -> None:
        """Test ingest"""
        result = DecisionEngine().ingest(sample_rows)

        assert len(result.records) == 4
        assert result.dropped_count == 3

    def test_analyze(self, two_year_records) -> None:
        """Test analyze"""
        analysis = DecisionEngine().analyze(two_year_records)

        assert analysis.total_revenue == 220000.0
        assert analysis.growth_trend == pytest.approx(20.0)


class TestEvaluate:

    @pytest.fixture
    def report(self, monthly_records, sample_deal) -> DecisionReport:
        return DecisionEngine().evaluate(monthly_records, sample_deal)

    def test_report_sections(self, report: DecisionReport) -> None:
        """Test report sections"""
        assert len(report.scenarios) == 4
        assert list(report.alternative_plans) == [10, 15, 20]
        assert report.plan.number_of_installments == 180

    def test_scenarios_use_liquid_capital(self, report: DecisionReport) -> None:
        """Test scenarios use liquid capital"""
        assert all(s.initial_capital == 700000.0 for s in report.scenarios)

    def test_risk(self, report: DecisionReport) -> None:
        """Test risk tier of the reference deal"""
        assert report.risk.tier is RiskTier.MEDIUM
        assert report.risk.capital_required == 1200000.0

    def test_decision(self, report: DecisionReport) -> None:
        """Test recommendation for the reference deal"""
        # Notional payment on 3.2M at 12% over 10 years nearly consumes the revenue
        assert report.decision.recommendation is Recommendation.SELL_AND_INVEST

    def test_empty_records(self, sample_deal) -> None:
        """Test empty records"""
        report = DecisionEngine().evaluate([], sample_deal)

        assert report.analysis.is_empty
        assert report.decision.recommendation is Recommendation.SELL_AND_INVEST

    def test_to_json(self, report: DecisionReport) -> None:
        """Test JSON report fields"""
        payload = orjson.loads(report.to_json())

        assert payload["risk"]["tier"] == 2
        assert payload["decision"]["recommendation"] == "sell_and_invest"
        assert set(payload["alternative_plans"]) == {"10", "15", "20"}
        assert payload["analysis"]["yearly_summaries"][0]["growth_rate"] is None

    def test_to_json_non_finite_become_null(self, monthly_records, sample_deal) -> None:
        """Test non-finite values serialize as null"""
        deal = DealInputs(
            target_price=1000000.0,
            offered_price=1000000.0,
            liquid_cash=100000.0,
            illiquid_holdings=0.0,
            volatile_holdings=0.0,
            face_value=0.0,
            upfront_payment=0.0,
            plan_duration_years=0,
            annual_admin_fee_rate=1.0,
        )
        report = DecisionEngine().evaluate(monthly_records, deal)

        assert math.isinf(report.risk.capital_coverage_ratio)
        assert math.isnan(report.plan.monthly_payment)

        payload = orjson.loads(report.to_json())
        assert payload["risk"]["capital_coverage_ratio"] is None
        assert payload["plan"]["monthly_payment"] is None
