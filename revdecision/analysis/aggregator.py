"""Yearly revenue aggregation"""

from collections import defaultdict
from typing import Sequence

from ..models.analysis import FinancialAnalysis, YearlySummary
from ..data.models import RevenueRecord
from .trend import project


def calculate_growth_rate(current: float, previous: float) -> float:
    """
    Year-over-year growth in percent

    growth = (current - previous) / previous * 100

    Args:
        current: Current year total
        previous: Previous year total (must be positive)

    Returns:
        Growth rate percentage
    """
    return (current - previous) / previous * 100


def aggregate(records: Sequence[RevenueRecord]) -> tuple[YearlySummary, ...]:
    """
    Group revenue records into yearly summaries

    Years without records produce no entry. The monthly average divides by
    the number of records in the year, one record standing for one month
    or sale.

    Args:
        records: Revenue records in any order

    Returns:
        Summaries ordered by year ascending, empty for empty input
    """
    totals: dict[int, float] = defaultdict(float)
    counts: dict[int, int] = defaultdict(int)

    for record in records:
        totals[record.year] += record.revenue
        counts[record.year] += 1

    summaries = []
    previous_total = None

    for year in sorted(totals):
        total = totals[year]
        growth_rate = None
        if previous_total is not None and previous_total > 0:
            growth_rate = calculate_growth_rate(total, previous_total)

        summaries.append(YearlySummary(
            year=year,
            total_revenue=total,
            average_monthly_revenue=total / counts[year],
            growth_rate=growth_rate,
            observed_months=counts[year],
        ))
        previous_total = total

    return tuple(summaries)


def analyze(records: Sequence[RevenueRecord], window_years: int = 3) -> FinancialAnalysis:
    """
    Build the full financial analysis for a record set

    Args:
        records: Revenue records
        window_years: Recent summaries used for the growth trend

    Returns:
        FinancialAnalysis, all zeros for empty input
    """
    if not records:
        return FinancialAnalysis(
            total_revenue=0.0,
            average_yearly_revenue=0.0,
            average_monthly_revenue=0.0,
            yearly_summaries=(),
            growth_trend=0.0,
            projected_revenue=0.0,
            last_year_revenue=0.0,
        )

    summaries = aggregate(records)
    projection = project(summaries, window_years=window_years)

    total_revenue = sum(r.revenue for r in records)

    return FinancialAnalysis(
        total_revenue=total_revenue,
        average_yearly_revenue=total_revenue / len(summaries),
        average_monthly_revenue=total_revenue / len(records),
        yearly_summaries=summaries,
        growth_trend=projection.growth_trend,
        projected_revenue=projection.projected_revenue,
        last_year_revenue=projection.last_year_revenue,
    )
