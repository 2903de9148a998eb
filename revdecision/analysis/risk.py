"""
Risk scoring for a property acquisition through an installment plan.

The tier starts at MEDIUM and is adjusted by checks applied in a fixed
order. Each check may move the running tier one step up or down; later
checks see the tier left by earlier ones.

Check order:
1. Capital coverage       (sets the tier)
2. Recurring cash flow    (raises or lowers the tier; skipped without recurring income)
3. Installment vs income  (informational)
4. Liquidity composition  (informational)
"""

import math
from typing import Optional

from ..config.defaults import RiskParams
from ..logging.config import get_risk_logger, log_tier_adjustment
from ..models.analysis import InstallmentPlanResult
from ..models.risk import FindingKind, RiskAssessment, RiskFinding, RiskTier

logger = get_risk_logger(__name__)


def calculate_coverage_ratio(capital_available: float, capital_required: float) -> float:
    """
    Share of the required capital covered by available capital, in percent

    Returns:
        Coverage percentage, inf when nothing is required
    """
    if capital_required <= 0:
        return math.inf
    return capital_available / capital_required * 100


def calculate_installment_ratio(monthly_payment: float, reference_income: float) -> float:
    """
    Monthly installment as a percentage of reference income

    Returns:
        Percentage; inf when the income is not positive and a payment is due,
        0.0 when neither is
    """
    if reference_income <= 0:
        return math.inf if monthly_payment > 0 else 0.0
    return monthly_payment / reference_income * 100


def _check_coverage(coverage_ratio: float, params: RiskParams) -> tuple[RiskTier, str, list[RiskFinding]]:
    figures = {"coverage_pct": coverage_ratio}

    if coverage_ratio >= params.full_coverage_pct:
        return RiskTier.LOW, "Sufficient capital for the transaction", [
            RiskFinding(FindingKind.POSITIVE,
                        "Available capital covers the upfront payment and the price difference",
                        figures),
        ]

    if coverage_ratio >= params.partial_coverage_pct:
        return RiskTier.MEDIUM, "Sufficient capital, but with a tight margin", [
            RiskFinding(FindingKind.CAUTION,
                        "Available capital covers most of the requirement", figures),
            RiskFinding(FindingKind.CAUTION,
                        "Keep an emergency reserve"),
        ]

    return RiskTier.HIGH, "Insufficient capital for the complete transaction", [
        RiskFinding(FindingKind.NEGATIVE,
                    "Available capital does not cover the requirement", figures),
        RiskFinding(FindingKind.CAUTION,
                    "Part of the illiquid holdings may have to be drawn on"),
    ]


def _check_cash_flow(tier: RiskTier, net_balance: float, offset_income: float,
                     extra_income: float, monthly_payment: float,
                     params: RiskParams) -> tuple[RiskTier, RiskFinding]:
    figures = {
        "offset_income": offset_income,
        "extra_income": extra_income,
        "monthly_payment": monthly_payment,
        "net_monthly_balance": net_balance,
    }

    if net_balance > 0:
        finding = RiskFinding(
            FindingKind.POSITIVE,
            f"Recurring income ({offset_income:.2f} + {extra_income:.2f}) exceeds "
            f"the monthly installment of {monthly_payment:.2f}",
            figures,
        )
        return tier.lowered(), finding

    finding = RiskFinding(
        FindingKind.NEGATIVE,
        f"Recurring income ({offset_income:.2f} + {extra_income:.2f}) does not cover "
        f"the monthly installment of {monthly_payment:.2f}",
        figures,
    )

    deficit_limit = params.reference_monthly_income * params.deficit_income_fraction
    if abs(net_balance) > deficit_limit:
        return tier.raised(), finding

    return tier, finding


def _check_installment_ratio(installment_ratio: float, params: RiskParams) -> RiskFinding:
    figures = {"installment_pct": installment_ratio}

    if installment_ratio > params.installment_high_pct:
        return RiskFinding(
            FindingKind.CAUTION,
            f"Monthly installment exceeds {params.installment_high_pct:g}% of the reference income",
            figures,
        )

    if installment_ratio > params.installment_moderate_pct:
        return RiskFinding(
            FindingKind.CAUTION,
            f"Monthly installment is between {params.installment_moderate_pct:g}% and "
            f"{params.installment_high_pct:g}% of the reference income",
            figures,
        )

    return RiskFinding(FindingKind.POSITIVE, "Monthly installment is at a comfortable level", figures)


def _check_liquidity(liquid_cash: float, illiquid_holdings: float, volatile_holdings: float,
                     capital_available: float, params: RiskParams) -> list[RiskFinding]:
    findings = []
    total_holdings = liquid_cash + illiquid_holdings + volatile_holdings

    if volatile_holdings > capital_available * params.volatile_share_limit:
        findings.append(RiskFinding(
            FindingKind.CAUTION,
            "Most of the available capital is in volatile holdings",
            {"volatile_holdings": volatile_holdings, "capital_available": capital_available},
        ))

    if illiquid_holdings > total_holdings * params.illiquid_share_floor:
        findings.append(RiskFinding(
            FindingKind.POSITIVE,
            "Good diversification through illiquid real-estate holdings",
            {"illiquid_holdings": illiquid_holdings, "total_holdings": total_holdings},
        ))

    return findings


def assess_risk(
    target_price: float,
    offered_price: float,
    liquid_cash: float,
    illiquid_holdings: float,
    volatile_holdings: float,
    plan: InstallmentPlanResult,
    upfront_payment: float,
    recurring_offset_income: float = 0.0,
    recurring_extra_income: float = 0.0,
    params: Optional[RiskParams] = None,
) -> RiskAssessment:
    """
    Rate the affordability risk of an installment purchase.

    Illiquid holdings are never counted as available capital.

    The cash-flow check runs only when some recurring income is supplied;
    otherwise net_monthly_balance is None. Zero income on both inputs is
    read as "no recurring income declared" rather than as a deficit equal
    to the full installment. This is a product decision: the balance is
    optional in the report and is only shown when income was entered.
    The installment-to-income check is likewise informational only.

    Args:
        target_price: Price asked for the property
        offered_price: Price offered by the buyer
        liquid_cash: Cash on hand
        illiquid_holdings: Holdings that are not to be touched
        volatile_holdings: Liquid but volatile holdings
        plan: Installment plan result providing the monthly payment
        upfront_payment: Upfront amount paid into the plan
        recurring_offset_income: Monthly cost avoided by owning (e.g. current rent)
        recurring_extra_income: Monthly income from the property (e.g. sub-lease)
        params: Thresholds (defaults when omitted)

    Returns:
        RiskAssessment, never raises
    """
    params = params or RiskParams()

    capital_available = liquid_cash + volatile_holdings
    capital_required = upfront_payment + (target_price - offered_price)
    coverage_ratio = calculate_coverage_ratio(capital_available, capital_required)

    # 1. Capital coverage
    tier, summary, findings = _check_coverage(coverage_ratio, params)
    log_tier_adjustment(logger, "capital_coverage", RiskTier.MEDIUM.name, tier.name,
                        context={"coverage_pct": coverage_ratio})

    # 2. Recurring cash flow
    net_monthly_balance = None
    if recurring_offset_income or recurring_extra_income:
        net_monthly_balance = (recurring_offset_income + recurring_extra_income) - plan.monthly_payment
        previous = tier
        tier, finding = _check_cash_flow(
            tier, net_monthly_balance, recurring_offset_income, recurring_extra_income,
            plan.monthly_payment, params,
        )
        findings.append(finding)
        log_tier_adjustment(logger, "recurring_cash_flow", previous.name, tier.name,
                            context={"net_monthly_balance": net_monthly_balance})

    # 3. Installment vs reference income
    installment_ratio = calculate_installment_ratio(plan.monthly_payment, params.reference_monthly_income)
    findings.append(_check_installment_ratio(installment_ratio, params))

    # 4. Liquidity composition
    findings.extend(_check_liquidity(
        liquid_cash, illiquid_holdings, volatile_holdings, capital_available, params,
    ))

    return RiskAssessment(
        tier=tier,
        summary=summary,
        findings=tuple(findings),
        capital_required=capital_required,
        capital_available=capital_available,
        capital_coverage_ratio=coverage_ratio,
        installment_to_income_ratio=installment_ratio,
        net_monthly_balance=net_monthly_balance,
    )
