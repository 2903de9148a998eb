"""Passive income projections for invested capital"""

from typing import Optional

from ..config.defaults import InvestmentParams
from ..models.analysis import InvestmentScenario


def calculate_blended_rate(risky_fraction: float, stable_fraction: float,
                           risky_rate: float = 0.12, stable_rate: float = 0.08) -> float:
    """
    Annual return of a two-asset portfolio

    Fractions are not validated and need not sum to one.

    Returns:
        risky_fraction * risky_rate + stable_fraction * stable_rate
    """
    return risky_fraction * risky_rate + stable_fraction * stable_rate


def project_scenario(label: str, capital: float, rate: float) -> InvestmentScenario:
    """
    Project passive income and compound growth for a single rate

    Args:
        label: Scenario name
        capital: Invested amount
        rate: Annual return as a fraction

    Returns:
        InvestmentScenario with 5 and 10 year values
    """
    return InvestmentScenario(
        label=label,
        annual_rate=rate,
        initial_capital=capital,
        monthly_passive_income=capital * rate / 12,
        yearly_passive_income=capital * rate,
        value_after_5_years=capital * (1 + rate) ** 5,
        value_after_10_years=capital * (1 + rate) ** 10,
    )


def scenarios(capital: float, risky_fraction: float, stable_fraction: float,
              params: Optional[InvestmentParams] = None) -> tuple[InvestmentScenario, ...]:
    """
    Build the fixed set of investment scenarios

    Order is always conservative, moderate, aggressive, blended.

    Args:
        capital: Capital to invest
        risky_fraction: Share held in volatile assets
        stable_fraction: Share held in stable real-estate securities
        params: Return assumptions (defaults when omitted)

    Returns:
        Exactly four scenarios
    """
    params = params or InvestmentParams()

    blended_rate = calculate_blended_rate(
        risky_fraction, stable_fraction,
        risky_rate=params.risky_asset_rate,
        stable_rate=params.stable_asset_rate,
    )

    return (
        project_scenario("conservative", capital, params.conservative_rate),
        project_scenario("moderate", capital, params.moderate_rate),
        project_scenario("aggressive", capital, params.aggressive_rate),
        project_scenario("blended", capital, blended_rate),
    )
