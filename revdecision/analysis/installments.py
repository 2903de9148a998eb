"""
Structured installment (consortium) plan calculations.

A buyer pledges a face value, pays an upfront amount and repays the rest in
equal monthly installments. An administrative fee accrues on the face value
for the whole term. There is no compound interest on the principal, so every
figure is closed-form.
"""

import math
from dataclasses import replace
from typing import Sequence

from ..models.analysis import InstallmentPlanParams, InstallmentPlanResult, NotionalFinancing

MONTHS_PER_YEAR = 12


def calculate_effective_rate(upfront_payment: float, monthly_payment: float,
                             installments: int, face_value: float, duration_years: int) -> float:
    """
    Approximate annual cost of the plan in percent

    rate = (total_paid - face_value) / face_value * 100 / duration_years

    This spreads the total overpayment evenly across the term. It is not an
    IRR solve and understates the cost of money paid late in the plan.

    Returns:
        Approximate annual rate, nan when face value or duration is zero
    """
    if face_value == 0 or duration_years == 0:
        return math.nan

    total_paid = upfront_payment + monthly_payment * installments
    return (total_paid - face_value) / face_value * 100 / duration_years


def compute_plan(params: InstallmentPlanParams) -> InstallmentPlanResult:
    """
    Amortize an installment plan

    Args:
        params: Plan inputs; a negative financed balance (upfront above face
            value) is propagated as-is

    Returns:
        InstallmentPlanResult; monthly figures are nan when the plan has no
        installments
    """
    financed_balance = params.face_value - params.upfront_payment
    installments = params.duration_years * MONTHS_PER_YEAR

    total_admin_fee = params.face_value * params.annual_admin_fee_rate * params.duration_years / 100
    monthly_admin_fee = params.face_value * params.annual_admin_fee_rate / (100 * MONTHS_PER_YEAR)

    if installments > 0:
        base_monthly_payment = financed_balance / installments
    else:
        base_monthly_payment = math.nan

    monthly_payment = base_monthly_payment + monthly_admin_fee

    return InstallmentPlanResult(
        financed_balance=financed_balance,
        total_admin_fee=total_admin_fee,
        total_payable=params.upfront_payment + financed_balance + total_admin_fee,
        monthly_payment=monthly_payment,
        number_of_installments=installments,
        effective_annual_rate=calculate_effective_rate(
            params.upfront_payment, monthly_payment, installments,
            params.face_value, params.duration_years,
        ),
        base_monthly_payment=base_monthly_payment,
        monthly_admin_fee=monthly_admin_fee,
    )


def plan_terms(params: InstallmentPlanParams,
               durations: Sequence[int] = (10, 15, 20)) -> dict[int, InstallmentPlanResult]:
    """
    Compute the same plan over alternative terms

    Args:
        params: Base plan inputs; duration_years is replaced per term
        durations: Terms in years

    Returns:
        Mapping of term to plan result, in the order given
    """
    return {
        years: compute_plan(replace(params, duration_years=years))
        for years in durations
    }


def notional_financing(target_price: float, duration_years: int = 10,
                       annual_rate: float = 0.12) -> NotionalFinancing:
    """
    Rough amortized financing estimate for the decision comparison

    Uses the standard annuity payment on the full price:
    payment = P * r * (1 + r)^n / ((1 + r)^n - 1) with monthly rate r.
    A zero rate falls back to straight-line repayment.

    Args:
        target_price: Amount financed
        duration_years: Term in years
        annual_rate: Nominal annual rate as a fraction

    Returns:
        NotionalFinancing; payment and totals are nan without installments
    """
    months = duration_years * MONTHS_PER_YEAR
    monthly_rate = annual_rate / MONTHS_PER_YEAR

    if months <= 0:
        monthly_payment = math.nan
    elif monthly_rate == 0:
        monthly_payment = target_price / months
    else:
        growth = (1 + monthly_rate) ** months
        monthly_payment = target_price * monthly_rate * growth / (growth - 1)

    total_payable = monthly_payment * months if months > 0 else math.nan

    return NotionalFinancing(
        target_price=target_price,
        annual_rate=annual_rate,
        duration_months=months,
        monthly_payment=monthly_payment,
        total_payable=total_payable,
        financing_cost=total_payable - target_price,
    )
