"""Default business-policy parameters for the revenue decision engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class InvestmentParams:
    """Annual return assumptions for passive investment scenarios."""
    conservative_rate: float = 0.04                  # Fixed-income style portfolio
    moderate_rate: float = 0.06
    aggressive_rate: float = 0.08

    # Blended scenario asset classes
    risky_asset_rate: float = 0.12                   # Volatile holdings nominal return
    stable_asset_rate: float = 0.08                  # Real-estate securities nominal return

    # Default portfolio split used by the engine facade
    risky_fraction: float = 0.6
    stable_fraction: float = 0.4


@dataclass(frozen=True)
class TrendParams:
    """Growth trend smoothing parameters."""
    window_years: int = 3                            # Recent summaries considered


@dataclass(frozen=True)
class InstallmentParams:
    """Installment plan defaults."""
    alternative_terms: tuple[int, ...] = (10, 15, 20)


@dataclass(frozen=True)
class RiskParams:
    """Risk scoring thresholds."""
    # Capital coverage bands (percent of required capital)
    full_coverage_pct: float = 100.0
    partial_coverage_pct: float = 70.0

    # Baseline business income for ratio checks
    reference_monthly_income: float = 50000.0
    deficit_income_fraction: float = 0.30            # Deficit size that raises the tier

    # Installment-to-income bands (percent)
    installment_high_pct: float = 50.0
    installment_moderate_pct: float = 30.0

    # Liquidity composition
    volatile_share_limit: float = 0.5                # Of available capital
    illiquid_share_floor: float = 0.4                # Of total holdings


@dataclass(frozen=True)
class DecisionParams:
    """Buy-versus-sell comparison parameters."""
    # Revenue-multiple valuation
    kept_value_multiplier: float = 3.0
    sale_value_multiplier: float = 2.0

    # Sell scenario
    passive_return_rate: float = 0.06

    # Recommendation thresholds
    strong_buy_ratio: float = 1.5
    capital_sufficiency_fraction: float = 0.30

    # Notional financing used for the first-pass comparison
    plan_duration_years: int = 10
    plan_annual_rate: float = 0.12


@dataclass(frozen=True)
class IngestionParams:
    """Candidate header names tried in order when mapping tabular rows."""
    date_keys: tuple[str, ...] = (
        "date", "data", "dt", "dt_venda", "data venda", "data de venda",
        "data da venda", "sale date",
    )
    revenue_keys: tuple[str, ...] = (
        "revenue", "receita", "value", "valor", "vl_receita", "vl_total",
        "valor total", "valor da venda", "total", "amount",
    )


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    investment: InvestmentParams
    trend: TrendParams
    installment: InstallmentParams
    risk: RiskParams
    decision: DecisionParams
    ingestion: IngestionParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        investment=InvestmentParams(),
        trend=TrendParams(),
        installment=InstallmentParams(),
        risk=RiskParams(),
        decision=DecisionParams(),
        ingestion=IngestionParams(),
    )
