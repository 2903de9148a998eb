"""Value objects for revenue analysis, investments, plans and decisions"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class YearlySummary:
    """Aggregated revenue for one calendar year"""
    year: int
    total_revenue: float
    average_monthly_revenue: float
    growth_rate: Optional[float]      # Percent vs previous year, None for the first year
    observed_months: int              # Number of records in the year


@dataclass(frozen=True)
class TrendProjection:
    """Smoothed recent growth and next-period projection"""
    growth_trend: float               # Percent
    projected_revenue: float
    last_year_revenue: float


@dataclass(frozen=True)
class FinancialAnalysis:
    """Aggregate view over all yearly summaries"""
    total_revenue: float
    average_yearly_revenue: float
    average_monthly_revenue: float
    yearly_summaries: tuple[YearlySummary, ...]
    growth_trend: float
    projected_revenue: float
    last_year_revenue: float

    @property
    def is_empty(self) -> bool:
        """True when no records were analyzed"""
        return not self.yearly_summaries


@dataclass(frozen=True)
class InvestmentScenario:
    """Passive income projection for one return assumption"""
    label: str
    annual_rate: float
    initial_capital: float
    monthly_passive_income: float
    yearly_passive_income: float
    value_after_5_years: float
    value_after_10_years: float


@dataclass(frozen=True)
class InstallmentPlanParams:
    """Inputs of a structured installment (consortium) purchase plan"""
    target_price: float
    face_value: float
    upfront_payment: float
    duration_years: int
    annual_admin_fee_rate: float      # Percent per year, 1.2 means 1.2%


@dataclass(frozen=True)
class InstallmentPlanResult:
    """Closed-form amortization of an installment plan"""
    financed_balance: float
    total_admin_fee: float
    total_payable: float
    monthly_payment: float
    number_of_installments: int
    effective_annual_rate: float      # Approximation, not an IRR
    base_monthly_payment: float
    monthly_admin_fee: float


@dataclass(frozen=True)
class NotionalFinancing:
    """Rough amortized financing estimate used by the buy-versus-sell comparison"""
    target_price: float
    annual_rate: float
    duration_months: int
    monthly_payment: float
    total_payable: float
    financing_cost: float             # total_payable - target_price


@dataclass(frozen=True)
class BuyScenario:
    """Keep the business and buy the property"""
    target_price: float
    plan_cost: float
    monthly_payment: float
    business_value: float
    net_position: float


@dataclass(frozen=True)
class SellScenario:
    """Sell the business and invest the proceeds"""
    liquid_capital: float
    business_sale_value: float
    total_capital: float
    passive_income_monthly: float
    passive_income_yearly: float
    risk_note: str


class Recommendation(str, Enum):
    """Outcome of the buy-versus-sell rule"""
    BUY = "buy"
    BUY_WITH_RESERVATIONS = "buy_with_reservations"
    SELL_AND_INVEST = "sell_and_invest"

    @property
    def label(self) -> str:
        return _RECOMMENDATION_LABELS[self]


_RECOMMENDATION_LABELS = {
    Recommendation.BUY: "Buy",
    Recommendation.BUY_WITH_RESERVATIONS: "Buy, with reservations",
    Recommendation.SELL_AND_INVEST: "Sell and invest",
}


@dataclass(frozen=True)
class DecisionAnalysis:
    """Two-scenario comparison with recommendation and reasoning"""
    buy_scenario: BuyScenario
    sell_scenario: SellScenario
    recommendation: Recommendation
    reasoning: tuple[str, ...]

    @property
    def recommendation_label(self) -> str:
        return self.recommendation.label
