"""Default configuration parameters for the dream calculators."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class PlanLimits:
    """Input ranges accepted by the calculators."""
    min_term_years: int = 1                          # Term is clamped to this range
    max_term_years: int = 50
    min_rate_pct: float = 0.0                        # Documented input range only
    max_rate_pct: float = 100.0
    min_growth_pct: float = 0.0
    max_growth_pct: float = 100.0
    max_amount: float = 1_000_000_000.0              # Largest amount a form accepts
    strict_ranges: bool = False                      # Reject instead of clamping


@dataclass(frozen=True)
class SavingsDefaults:
    """Initial values of the piggy-bank growth calculator."""
    amount_per_period: float = 100.0
    term_years: int = 10
    compounding: bool = True
    annual_rate_pct: float = 8.0
    frequency: str = "monthly"
    annual_growth_pct: float = 0.0


@dataclass(frozen=True)
class DreamDefaults:
    """Initial values of the dream goal calculator."""
    target_amount: float = 20000.0
    term_years: int = 5
    compounding: bool = True
    annual_rate_pct: float = 8.0
    frequency: str = "monthly"


@dataclass(frozen=True)
class CurrencyParams:
    """Currency set and user-editable exchange rates (units per pivot unit)."""
    pivot: str = "USD"
    display_currency: str = "USD"
    rates: dict[str, float] = field(default_factory=lambda: {
        "USD": 1.0,
        "EUR": 0.92,
        "GBP": 0.79,
        "RUB": 90.0,
    })


@dataclass(frozen=True)
class SelfTestParams:
    """Tolerances of the formula self-checks."""
    plain_eps: float = 1e-6                          # Zero-interest checks
    compound_eps: float = 1e-4                       # Compounding checks
    run_on_startup: bool = True


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    limits: PlanLimits
    savings: SavingsDefaults
    dream: DreamDefaults
    currency: CurrencyParams
    selftest: SelfTestParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        limits=PlanLimits(),
        savings=SavingsDefaults(),
        dream=DreamDefaults(),
        currency=CurrencyParams(),
        selftest=SelfTestParams(),
    )
