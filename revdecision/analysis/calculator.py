"""Calculator binding the core functions to a configuration"""

from typing import Optional, Sequence

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import RevenueRecord
from ..models.analysis import (
    DecisionAnalysis,
    FinancialAnalysis,
    InstallmentPlanParams,
    InstallmentPlanResult,
    InvestmentScenario,
)
from ..models.risk import RiskAssessment
from .aggregator import analyze
from .decision import decide
from .installments import compute_plan, plan_terms
from .investments import scenarios
from .risk import assess_risk


class FinancialCalculator:
    """
    Runs every core calculation with the policy values of one configuration.

    Holds no state besides the configuration, so calls are idempotent.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()

    def analyze(self, records: Sequence[RevenueRecord]) -> FinancialAnalysis:
        """Aggregate records and project the next period"""
        return analyze(records, window_years=self.config.trend.window_years)

    def investment_scenarios(self, capital: float,
                             risky_fraction: Optional[float] = None,
                             stable_fraction: Optional[float] = None) -> tuple[InvestmentScenario, ...]:
        """Investment scenarios, using the configured split when none is given"""
        investment = self.config.investment
        return scenarios(
            capital,
            investment.risky_fraction if risky_fraction is None else risky_fraction,
            investment.stable_fraction if stable_fraction is None else stable_fraction,
            params=investment,
        )

    def installment_plan(self, params: InstallmentPlanParams) -> InstallmentPlanResult:
        return compute_plan(params)

    def alternative_terms(self, params: InstallmentPlanParams) -> dict[int, InstallmentPlanResult]:
        """The plan recomputed for each configured alternative term"""
        return plan_terms(params, self.config.installment.alternative_terms)

    def risk(self, target_price: float, offered_price: float, liquid_cash: float,
             illiquid_holdings: float, volatile_holdings: float,
             plan: InstallmentPlanResult, upfront_payment: float,
             recurring_offset_income: float = 0.0,
             recurring_extra_income: float = 0.0) -> RiskAssessment:
        return assess_risk(
            target_price, offered_price, liquid_cash, illiquid_holdings, volatile_holdings,
            plan, upfront_payment,
            recurring_offset_income=recurring_offset_income,
            recurring_extra_income=recurring_extra_income,
            params=self.config.risk,
        )

    def decision(self, analysis: FinancialAnalysis, target_price: float,
                 liquid_capital: float) -> DecisionAnalysis:
        """Buy-versus-sell comparison at the configured notional term and rate"""
        return decide(
            analysis,
            target_price,
            liquid_capital,
            plan_duration_years=self.config.decision.plan_duration_years,
            plan_annual_rate=self.config.decision.plan_annual_rate,
            params=self.config.decision,
            investment=self.config.investment,
        )
