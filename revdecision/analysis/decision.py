"""
Buy-versus-sell decision analysis.

Compares keeping the business while financing the property against selling
the business and living on passive income. Business values use fixed
revenue multiples, a rough valuation rather than a discounted cash flow.
"""

from typing import Optional

from ..config.defaults import DecisionParams, InvestmentParams
from ..logging.config import get_logger, log_recommendation
from ..models.analysis import (
    BuyScenario,
    DecisionAnalysis,
    FinancialAnalysis,
    Recommendation,
    SellScenario,
)
from .installments import notional_financing

logger = get_logger(__name__)

SELL_RISK_NOTE = (
    "Moderate - country risk considered, but diversification across volatile "
    "and real-estate assets reduces exposure"
)


def recommend(net_business_income: float, passive_income: float,
              strong_buy_ratio: float = 1.5) -> Recommendation:
    """
    Apply the recommendation rule

    Returns:
        BUY above strong_buy_ratio times the passive income,
        BUY_WITH_RESERVATIONS above the passive income,
        SELL_AND_INVEST otherwise
    """
    if net_business_income > passive_income * strong_buy_ratio:
        return Recommendation.BUY
    if net_business_income > passive_income:
        return Recommendation.BUY_WITH_RESERVATIONS
    return Recommendation.SELL_AND_INVEST


def _rationale(recommendation: Recommendation) -> list[str]:
    if recommendation is Recommendation.BUY:
        return [
            "The business generates significantly more net income than the passive income",
            "Positive cash flow covers the installments and still leaves a profit",
        ]
    if recommendation is Recommendation.BUY_WITH_RESERVATIONS:
        return [
            "The business generates more net income, but the difference is not significant",
            "Weigh the stress and workload of running the business",
            "Passive income offers more peace of mind and less work",
        ]
    return [
        "Passive income is greater than or similar to the net business income",
        "Less stress and operational work",
        "Diversification reduces exposure to country risk",
        "Freedom to work in the field without being a business owner",
    ]


def _diversification_block(investment: InvestmentParams) -> list[str]:
    return [
        "",
        "COUNTRY RISK ANALYSIS:",
        f"- Volatile assets ({investment.risky_fraction:.0%}) are less affected by the local economy",
        f"- Real-estate securities ({investment.stable_fraction:.0%}) offer inflation protection",
        "- The local currency may depreciate, but diversified investments mitigate the risk",
    ]


def decide(
    analysis: FinancialAnalysis,
    target_price: float,
    liquid_capital: float,
    plan_duration_years: int = 10,
    plan_annual_rate: float = 0.12,
    params: Optional[DecisionParams] = None,
    investment: Optional[InvestmentParams] = None,
) -> DecisionAnalysis:
    """
    Compare buying the property against selling the business

    The financing here is a notional first-pass estimate at a fixed term and
    rate, independent of any installment plan configured elsewhere.

    Args:
        analysis: Financial analysis of the business revenue
        target_price: Property price
        liquid_capital: Capital currently available
        plan_duration_years: Notional financing term
        plan_annual_rate: Notional annual rate as a fraction
        params: Decision policy values (defaults when omitted)
        investment: Portfolio split quoted in the reasoning (defaults when omitted)

    Returns:
        DecisionAnalysis with ordered reasoning lines
    """
    params = params or DecisionParams()
    investment = investment or InvestmentParams()

    plan = notional_financing(target_price, plan_duration_years, plan_annual_rate)

    # Scenario 1: keep the business and buy
    business_value = analysis.projected_revenue * params.kept_value_multiplier
    buy_scenario = BuyScenario(
        target_price=target_price,
        plan_cost=plan.total_payable,
        monthly_payment=plan.monthly_payment,
        business_value=business_value,
        net_position=liquid_capital + business_value - plan.total_payable,
    )

    # Scenario 2: sell and invest
    sale_value = analysis.projected_revenue * params.sale_value_multiplier
    total_capital = liquid_capital + sale_value
    sell_scenario = SellScenario(
        liquid_capital=liquid_capital,
        business_sale_value=sale_value,
        total_capital=total_capital,
        passive_income_monthly=total_capital * params.passive_return_rate / 12,
        passive_income_yearly=total_capital * params.passive_return_rate,
        risk_note=SELL_RISK_NOTE,
    )

    net_business_income = analysis.average_monthly_revenue - plan.monthly_payment
    recommendation = recommend(
        net_business_income, sell_scenario.passive_income_monthly, params.strong_buy_ratio
    )

    reasoning = [
        f"Average monthly business revenue: {analysis.average_monthly_revenue:.2f}",
        f"Monthly financing payment: {plan.monthly_payment:.2f}",
        f"Net monthly balance (if buying): {net_business_income:.2f}",
        f"Monthly passive income (if selling): {sell_scenario.passive_income_monthly:.2f}",
    ]
    reasoning.extend(_rationale(recommendation))
    reasoning.extend(_diversification_block(investment))

    # Capital sufficiency
    reasoning.extend([
        "",
        "CAPITAL REQUIRED:",
        f"To buy the property ({target_price:.2f}):",
        f"- Total via financing: {plan.total_payable:.2f}",
        f"- Capital currently available: {liquid_capital:.2f}",
    ])
    if liquid_capital >= target_price * params.capital_sufficiency_fraction:
        reasoning.append("You have enough capital for the upfront payment")
    else:
        reasoning.append("Part of the capital may be needed for the upfront payment")

    log_recommendation(
        logger,
        recommendation.label,
        net_business_income,
        sell_scenario.passive_income_monthly,
        context={"target_price": target_price, "liquid_capital": liquid_capital},
    )

    return DecisionAnalysis(
        buy_scenario=buy_scenario,
        sell_scenario=sell_scenario,
        recommendation=recommendation,
        reasoning=tuple(reasoning),
    )
