"""
Risk assessment models.

RiskTier is a three-valued ordinal. Checks move it one step at a time with
raised() / lowered(), which clamp at HIGH and LOW.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Any, Mapping, Optional


class RiskTier(IntEnum):
    """Ordered affordability risk tier."""
    LOW = 1
    MEDIUM = 2
    HIGH = 3

    def raised(self) -> "RiskTier":
        """One step riskier, clamped at HIGH."""
        return RiskTier(min(self.value + 1, RiskTier.HIGH.value))

    def lowered(self) -> "RiskTier":
        """One step safer, clamped at LOW."""
        return RiskTier(max(self.value - 1, RiskTier.LOW.value))


class FindingKind(str, Enum):
    """Annotation attached to a risk finding."""
    POSITIVE = "positive"
    CAUTION = "caution"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class RiskFinding:
    """
    Single qualitative finding with the figures it was derived from.

    Figures may be passed as a mapping; they are stored as ordered
    (name, value) pairs so the finding stays hashable and immutable.
    """
    kind: FindingKind
    message: str
    figures: tuple[tuple[str, float], ...] = ()

    def __post_init__(self) -> None:
        if isinstance(self.figures, Mapping):
            object.__setattr__(self, "figures", tuple(self.figures.items()))

    def figure(self, name: str) -> Optional[float]:
        """Value of a named figure, None when absent."""
        return dict(self.figures).get(name)


@dataclass(frozen=True)
class RiskAssessment:
    """
    Tiered risk rating with ordered findings.

    Ratios are percentages. capital_coverage_ratio is inf when nothing is
    required; installment_to_income_ratio is inf when the reference income
    is not positive.
    """
    tier: RiskTier
    summary: str
    findings: tuple[RiskFinding, ...]
    capital_required: float
    capital_available: float
    capital_coverage_ratio: float
    installment_to_income_ratio: float
    net_monthly_balance: Optional[float] = None

    @property
    def remaining_capital(self) -> float:
        """Capital left after covering the transaction requirement."""
        return self.capital_available - self.capital_required

    def messages(self) -> list[str]:
        return [f.message for f in self.findings]

    def to_context(self) -> dict[str, Any]:
        """Compact form for structured logging."""
        return {
            "tier": self.tier.name,
            "coverage_pct": self.capital_coverage_ratio,
            "installment_pct": self.installment_to_income_ratio,
            "findings": len(self.findings),
        }
