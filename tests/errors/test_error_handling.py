"""
Error handling tests for the revenue decision engine.

Tests cover error classification, dropped rows during ingestion and the
total behaviour of the calculators on degenerate input.
"""

import math
import pytest

from revdecision.analysis.installments import compute_plan, notional_financing
from revdecision.analysis.risk import assess_risk
from revdecision.config.loader import ConfigLoader
from revdecision.config.validation import ValidationError
from revdecision.data.normalizer import RecordNormalizer
from revdecision.errors import (
    ConfigurationError,
    DataQualityError,
    MalformedDataError,
    MissingDataError,
)
from revdecision.models.analysis import InstallmentPlanParams
from revdecision.models.risk import RiskTier


class TestErrorClassification:
    """Test error classification system."""

    def test_data_quality_error_hierarchy(self):
        """Test data quality error hierarchy"""
        base_error = DataQualityError("base error")
        assert base_error.recoverable is True
        assert base_error.context == {}

        missing_error = MissingDataError("missing", data_type="revenue", candidates=("valor",))
        assert isinstance(missing_error, DataQualityError)
        assert missing_error.data_type == "revenue"
        assert missing_error.candidates == ("valor",)

        malformed_error = MalformedDataError("bad", raw_data="x", expected_format="number",
                                             context={"row": 3})
        assert isinstance(malformed_error, DataQualityError)
        assert malformed_error.raw_data == "x"
        assert malformed_error.context == {"row": 3}

    def test_configuration_error(self):
        """Test configuration error"""
        error = ConfigurationError(
            "Invalid configuration",
            errors=[ValidationError("window_years", "Must be a positive integer", 0)],
            profile="growth",
        )

        assert error.recoverable is False
        assert error.profile == "growth"
        assert str(error) == (
            "Invalid configuration: window_years: Must be a positive integer (got: 0)"
        )

    def test_configuration_error_without_details(self):
        """Test configuration error without details"""
        assert str(ConfigurationError("Invalid configuration")) == "Invalid configuration"


class TestIngestionRecovery:
    """Bad rows are dropped, never raised."""

    def test_all_rows_bad(self):
        """Test all rows bad"""
        result = RecordNormalizer().normalize([
            {"date": "garbage", "revenue": 10},
            {"date": "2024-01-01", "revenue": "n/a"},
            {"date": "2024-01-01"},
            {},
        ])

        assert not result.success
        assert result.dropped_count == 4

    def test_reason_recorded(self):
        """Test reason recorded"""
        result = RecordNormalizer().normalize([{"date": "2024-01-01"}])
        assert "revenue" in result.dropped[0].reason.lower()

    def test_profile_with_invalid_values(self, tmp_path):
        """Test profile with invalid values"""
        (tmp_path / "profiles.yaml").write_text(
            "profiles:\n  broken:\n    installment:\n      alternative_terms: [10, -5]\n"
        )

        with pytest.raises(ConfigurationError) as exc_info:
            ConfigLoader.create(tmp_path).load("broken")

        assert exc_info.value.profile == "broken"


class TestDegenerateInputs:
    """Calculators return sentinels instead of raising."""

    def test_zero_duration_plan(self):
        """Test zero duration plan"""
        plan = compute_plan(InstallmentPlanParams(
            target_price=1000.0, face_value=1000.0, upfront_payment=100.0,
            duration_years=0, annual_admin_fee_rate=1.0,
        ))

        assert plan.number_of_installments == 0
        assert math.isnan(plan.monthly_payment)
        assert math.isnan(plan.effective_annual_rate)

    def test_zero_term_financing(self):
        """Test zero term financing"""
        financing = notional_financing(1000.0, 0, 0.12)
        assert math.isnan(financing.monthly_payment)

    def test_risk_with_nan_payment(self):
        """Test risk with nan payment"""
        plan = compute_plan(InstallmentPlanParams(
            target_price=1000.0, face_value=1000.0, upfront_payment=0.0,
            duration_years=0, annual_admin_fee_rate=1.0,
        ))

        assessment = assess_risk(1000.0, 1000.0, 0.0, 0.0, 0.0, plan, 0.0,
                                 recurring_offset_income=500.0)

        assert assessment.tier is RiskTier.LOW
        assert math.isnan(assessment.net_monthly_balance)
