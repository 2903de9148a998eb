"""Tests for growth trend and revenue projection"""

import pytest

from revdecision.analysis.trend import calculate_growth_trend, project
from revdecision.models.analysis import YearlySummary


def summary(year, total, growth=None):
    return YearlySummary(
        year=year,
        total_revenue=total,
        average_monthly_revenue=total / 12,
        growth_rate=growth,
        observed_months=12,
    )


class TestGrowthTrend:
    """Test calculate_growth_trend"""

    def test_empty_summaries(self):
        """Test empty summaries"""
        assert calculate_growth_trend([]) == 0.0

    def test_single_summary(self):
        """Test single summary"""
        assert calculate_growth_trend([summary(2024, 100.0)]) == 0.0

    def test_single_defined_rate(self):
        """Test single defined rate"""
        summaries = [summary(2023, 100.0), summary(2024, 120.0, 20.0)]
        assert calculate_growth_trend(summaries) == pytest.approx(20.0)

    def test_uses_last_three_summaries(self):
        """Older growth rates fall out of the window"""
        summaries = [
            summary(2019, 100.0),
            summary(2020, 200.0, 100.0),
            summary(2021, 220.0, 10.0),
            summary(2022, 242.0, 10.0),
            summary(2023, 290.4, 20.0),
        ]
        assert calculate_growth_trend(summaries) == pytest.approx(40.0 / 3)

    def test_window_is_configurable(self):
        """Test window is configurable"""
        summaries = [
            summary(2021, 100.0),
            summary(2022, 110.0, 10.0),
            summary(2023, 132.0, 20.0),
        ]
        assert calculate_growth_trend(summaries, window_years=1) == pytest.approx(20.0)

    def test_no_defined_rates(self):
        """Test no defined rates"""
        summaries = [summary(2023, 100.0), summary(2024, 100.0)]
        assert calculate_growth_trend(summaries) == 0.0


class TestProject:
    """Test project"""

    def test_empty_projection(self):
        """Test empty projection"""
        projection = project([])

        assert projection.growth_trend == 0.0
        assert projection.projected_revenue == 0.0
        assert projection.last_year_revenue == 0.0

    def test_single_year_projects_flat(self):
        """Test single year projects flat"""
        projection = project([summary(2024, 500.0)])

        assert projection.growth_trend == 0.0
        assert projection.projected_revenue == pytest.approx(500.0)

    def test_projection_applies_trend(self):
        """Test projection applies trend"""
        projection = project([summary(2023, 100000.0), summary(2024, 120000.0, 20.0)])

        assert projection.last_year_revenue == pytest.approx(120000.0)
        assert projection.projected_revenue == pytest.approx(144000.0)

    def test_negative_trend(self):
        """Test negative trend"""
        projection = project([summary(2023, 100.0), summary(2024, 80.0, -20.0)])
        assert projection.projected_revenue == pytest.approx(64.0)
