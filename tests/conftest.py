"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timezone
from typing import Any, Dict, List

from revdecision.data.models import RevenueRecord
from revdecision.engine import DealInputs
from revdecision.logging.config import configure_logging
from revdecision.models.analysis import InstallmentPlanParams


@pytest.fixture(scope="session", autouse=True)
def quiet_logging():
    """Keep debug audit logs out of test output."""
    configure_logging(level="WARNING")


def make_record(year: int, month: int, revenue: float, day: int = 1) -> RevenueRecord:
    """Build a record at midnight UTC."""
    return RevenueRecord.from_timestamp(datetime(year, month, day, tzinfo=timezone.utc), revenue)


@pytest.fixture
def two_year_records() -> List[RevenueRecord]:
    """One record per year, 20% growth."""
    return [
        make_record(2023, 6, 100000.0),
        make_record(2024, 6, 120000.0),
    ]


@pytest.fixture
def monthly_records() -> List[RevenueRecord]:
    """Twelve monthly records for 2022-2024 with rising revenue."""
    records = []
    for year, monthly in ((2022, 40000.0), (2023, 45000.0), (2024, 54000.0)):
        for month in range(1, 13):
            records.append(make_record(year, month, monthly))
    return records


@pytest.fixture
def sample_plan_params() -> InstallmentPlanParams:
    """Plan used in the property acquisition screen."""
    return InstallmentPlanParams(
        target_price=3200000.0,
        face_value=2000000.0,
        upfront_payment=500000.0,
        duration_years=15,
        annual_admin_fee_rate=1.2,
    )


@pytest.fixture
def sample_deal() -> DealInputs:
    """Property deal with rent and sub-lease income."""
    return DealInputs(
        target_price=3200000.0,
        offered_price=2500000.0,
        liquid_cash=0.0,
        illiquid_holdings=500000.0,
        volatile_holdings=700000.0,
        face_value=2000000.0,
        upfront_payment=500000.0,
        plan_duration_years=15,
        annual_admin_fee_rate=1.2,
        recurring_offset_income=7000.0,
        recurring_extra_income=4500.0,
    )


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    """Decoded spreadsheet rows with mixed headers and formats."""
    return [
        {"Data": "2023-01-15", "Receita": "R$ 10.500,00"},
        {"DATE": "2023-02-15", "REVENUE": 11000},
        {"dt_venda": 45000, "VL_TOTAL": "12,000.50"},
        {"Data da Venda": "15/03/2024", "Valor Total": "9800"},
        {"Data": "not a date", "Receita": "1000"},
        {"Data": "2024-04-01", "Receita": "0"},
        {"Descricao": "no useful columns"},
    ]


@pytest.fixture
def record_factory():
    """Factory for single revenue records."""
    return make_record
