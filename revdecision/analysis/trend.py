"""Recent growth trend and next-period revenue projection"""

from typing import Sequence

from ..models.analysis import TrendProjection, YearlySummary


def calculate_growth_trend(summaries: Sequence[YearlySummary], window_years: int = 3) -> float:
    """
    Mean growth rate over the most recent summaries

    Only summaries with a defined growth rate count. The first observed
    year never has one.

    Args:
        summaries: Yearly summaries ordered by year
        window_years: Number of trailing summaries considered

    Returns:
        Growth trend percentage, 0.0 when no rate is defined
    """
    if len(summaries) < 2:
        return 0.0

    recent = summaries[-window_years:]
    rates = [s.growth_rate for s in recent if s.growth_rate is not None]

    if not rates:
        return 0.0

    return sum(rates) / len(rates)


def project(summaries: Sequence[YearlySummary], window_years: int = 3) -> TrendProjection:
    """
    Project next-period revenue from the recent growth trend

    projected = last_year_revenue * (1 + growth_trend / 100)

    Args:
        summaries: Yearly summaries ordered by year
        window_years: Number of trailing summaries considered

    Returns:
        TrendProjection
    """
    last_year_revenue = summaries[-1].total_revenue if summaries else 0.0
    growth_trend = calculate_growth_trend(summaries, window_years)

    return TrendProjection(
        growth_trend=growth_trend,
        projected_revenue=last_year_revenue * (1 + growth_trend / 100),
        last_year_revenue=last_year_revenue,
    )
