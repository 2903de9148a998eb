"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_investment_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate investment return assumptions."""
        errors = []

        for name in ("conservative_rate", "moderate_rate", "aggressive_rate",
                     "risky_asset_rate", "stable_asset_rate"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an annual rate between 0 and 1",
                        value=value
                    ))

        for name in ("risky_fraction", "stable_fraction"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a fraction between 0 and 1",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_trend_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate trend parameters."""
        errors = []

        if "window_years" in params:
            value = params["window_years"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="window_years",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_installment_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate installment plan defaults."""
        errors = []

        if "alternative_terms" in params:
            value = params["alternative_terms"]
            if (not isinstance(value, (list, tuple)) or not value
                    or not all(isinstance(v, int) and v > 0 for v in value)):
                errors.append(ValidationError(
                    field="alternative_terms",
                    message="Must be a non-empty list of positive integers",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_risk_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate risk thresholds."""
        errors = []

        for name in ("full_coverage_pct", "partial_coverage_pct", "reference_monthly_income",
                     "installment_high_pct", "installment_moderate_pct"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        for name in ("deficit_income_fraction", "volatile_share_limit", "illiquid_share_floor"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a fraction between 0 and 1",
                        value=value
                    ))

        # Bands must stay ordered
        full = params.get("full_coverage_pct")
        partial = params.get("partial_coverage_pct")
        if _is_number(full) and _is_number(partial) and partial > full:
            errors.append(ValidationError(
                field="partial_coverage_pct",
                message="Must not exceed full_coverage_pct",
                value=partial
            ))

        high = params.get("installment_high_pct")
        moderate = params.get("installment_moderate_pct")
        if _is_number(high) and _is_number(moderate) and moderate > high:
            errors.append(ValidationError(
                field="installment_moderate_pct",
                message="Must not exceed installment_high_pct",
                value=moderate
            ))

        return errors

    @staticmethod
    def validate_decision_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate decision parameters."""
        errors = []

        for name in ("kept_value_multiplier", "sale_value_multiplier", "strong_buy_ratio"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        for name in ("passive_return_rate", "plan_annual_rate", "capital_sufficiency_fraction"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0 or value > 1:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a number between 0 and 1",
                        value=value
                    ))

        if "plan_duration_years" in params:
            value = params["plan_duration_years"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="plan_duration_years",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_ingestion_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate candidate header lists."""
        errors = []

        for name in ("date_keys", "revenue_keys"):
            if name in params:
                value = params[name]
                if (not isinstance(value, (list, tuple)) or not value
                        or not all(isinstance(v, str) and v.strip() for v in value)):
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-empty list of header names",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "investment" in config:
            errors.extend(ConfigValidator.validate_investment_params(config["investment"]))

        if "trend" in config:
            errors.extend(ConfigValidator.validate_trend_params(config["trend"]))

        if "installment" in config:
            errors.extend(ConfigValidator.validate_installment_params(config["installment"]))

        if "risk" in config:
            errors.extend(ConfigValidator.validate_risk_params(config["risk"]))

        if "decision" in config:
            errors.extend(ConfigValidator.validate_decision_params(config["decision"]))

        if "ingestion" in config:
            errors.extend(ConfigValidator.validate_ingestion_params(config["ingestion"]))

        return errors
