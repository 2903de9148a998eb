"""
Main decision engine coordinator.

Orchestrates the pipeline from decoded rows to the final report:
Rows → Normalization → Aggregation/Trend → Investments + Plan → Risk → Decision
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence, Union

import orjson
import structlog

from .analysis.calculator import FinancialCalculator
from .config.defaults import DefaultConfig
from .config.loader import ConfigLoader
from .data.models import NormalizationResult, RevenueRecord
from .data.normalizer import RecordNormalizer
from .models.analysis import (
    DecisionAnalysis,
    FinancialAnalysis,
    InstallmentPlanParams,
    InstallmentPlanResult,
    InvestmentScenario,
)
from .models.risk import RiskAssessment

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DealInputs:
    """Property deal and portfolio position evaluated against the business."""

    # Property
    target_price: float
    offered_price: float

    # Portfolio
    liquid_cash: float
    illiquid_holdings: float
    volatile_holdings: float

    # Installment plan
    face_value: float
    upfront_payment: float
    plan_duration_years: int
    annual_admin_fee_rate: float

    # Recurring monthly income tied to the property
    recurring_offset_income: float = 0.0
    recurring_extra_income: float = 0.0

    @property
    def liquid_capital(self) -> float:
        """Capital that may be used; illiquid holdings are excluded."""
        return self.liquid_cash + self.volatile_holdings

    def plan_params(self) -> InstallmentPlanParams:
        return InstallmentPlanParams(
            target_price=self.target_price,
            face_value=self.face_value,
            upfront_payment=self.upfront_payment,
            duration_years=self.plan_duration_years,
            annual_admin_fee_rate=self.annual_admin_fee_rate,
        )


@dataclass(frozen=True)
class DecisionReport:
    """Everything the presentation layer needs for one evaluation."""
    analysis: FinancialAnalysis
    scenarios: tuple[InvestmentScenario, ...]
    plan: InstallmentPlanResult
    alternative_plans: dict[int, InstallmentPlanResult]
    risk: RiskAssessment
    decision: DecisionAnalysis

    def to_json(self) -> bytes:
        """Serialize the report; non-finite numbers become null."""
        return orjson.dumps(self, option=orjson.OPT_NON_STR_KEYS)


class DecisionEngine:
    """
    Main coordinator for the revenue decision pipeline.

    Loads the layered configuration once; every evaluation recomputes all
    results from scratch.
    """

    def __init__(
        self,
        config: Optional[DefaultConfig] = None,
        profile: Optional[str] = None,
        overrides: Optional[dict[str, Any]] = None,
        config_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """
        Initialize the decision engine.

        Args:
            config: Ready configuration; skips loading when given
            profile: Named profile from profiles.yaml
            overrides: Per-call overrides applied on top of the profile
            config_dir: Directory holding profiles.yaml

        Raises:
            ConfigurationError: If the profile is unknown or the merged
                configuration is invalid
        """
        if config is None:
            loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
            config = loader.load(profile, overrides)

        self.config = config
        self.calculator = FinancialCalculator(config)
        self.normalizer = RecordNormalizer(config.ingestion)

        logger.info("Decision engine initialized", profile=profile)

    def ingest(self, rows: Iterable[Mapping[Any, Any]]) -> NormalizationResult:
        """Map decoded spreadsheet rows to revenue records."""
        result = self.normalizer.normalize(rows)

        logger.info(
            "Rows ingested",
            records=len(result.records),
            dropped=result.dropped_count,
        )
        return result

    def analyze(self, records: Sequence[RevenueRecord]) -> FinancialAnalysis:
        """Financial analysis of a record set."""
        return self.calculator.analyze(records)

    def evaluate(self, records: Sequence[RevenueRecord], deal: DealInputs) -> DecisionReport:
        """
        Run the full pipeline for one deal.

        Args:
            records: Revenue records of the business
            deal: Property and portfolio inputs

        Returns:
            DecisionReport
        """
        analysis = self.calculator.analyze(records)
        if analysis.is_empty:
            logger.warning("No revenue records; business figures are zero")

        scenarios = self.calculator.investment_scenarios(deal.liquid_capital)

        plan_params = deal.plan_params()
        plan = self.calculator.installment_plan(plan_params)
        alternative_plans = self.calculator.alternative_terms(plan_params)

        risk = self.calculator.risk(
            deal.target_price,
            deal.offered_price,
            deal.liquid_cash,
            deal.illiquid_holdings,
            deal.volatile_holdings,
            plan,
            deal.upfront_payment,
            recurring_offset_income=deal.recurring_offset_income,
            recurring_extra_income=deal.recurring_extra_income,
        )

        logger.debug("Risk findings", tier=risk.tier.name, findings=risk.messages())

        decision = self.calculator.decision(analysis, deal.target_price, deal.liquid_capital)

        logger.info(
            "Evaluation completed",
            years=len(analysis.yearly_summaries),
            risk=risk.to_context(),
            recommendation=decision.recommendation_label,
        )

        return DecisionReport(
            analysis=analysis,
            scenarios=scenarios,
            plan=plan,
            alternative_plans=alternative_plans,
            risk=risk,
            decision=decision,
        )
