"""Calculation core: aggregation, projection, investments, plans, risk and decision"""

from .aggregator import aggregate, analyze
from .calculator import FinancialCalculator
from .decision import decide
from .installments import compute_plan, notional_financing, plan_terms
from .investments import scenarios
from .risk import assess_risk
from .trend import project

__all__ = [
    "FinancialCalculator",
    "aggregate",
    "analyze",
    "project",
    "scenarios",
    "compute_plan",
    "plan_terms",
    "notional_financing",
    "assess_risk",
    "decide",
]
