"""
Plan and result models for the savings calculators.

This module defines immutable data structures describing a savings plan,
a dream goal, and everything the finance engine derives from them.
"""

from dataclasses import dataclass, field
from enum import Enum


class Frequency(str, Enum):
    """How often a contribution is made."""
    DAILY = "daily"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class ContributionPlan:
    """Recurring savings plan ("how much will my piggy bank grow?")."""
    amount_per_period: float                        # Base contribution per period
    annual_rate_pct: float                          # Annual interest rate, percent
    term_years: int                                 # Clamped to [1, 50] on use
    compounding: bool = True                        # Apply interest at all
    frequency: Frequency = Frequency.MONTHLY
    annual_growth_pct: float = 0.0                  # Contribution raise once a year, percent


@dataclass(frozen=True)
class GoalPlan:
    """Target amount to reach by the end of the term."""
    target_amount: float
    annual_rate_pct: float
    term_years: int
    compounding: bool = True
    frequency: Frequency = Frequency.MONTHLY
    dream_name: str = ""


@dataclass(frozen=True)
class ProjectionResult:
    """Outcome of a savings plan at the end of its term."""
    future_value: float
    total_invested: float
    interest_earned: float

    @classmethod
    def from_totals(cls, future_value: float, total_invested: float) -> "ProjectionResult":
        """Build a result so that interest is always value minus invested."""
        return cls(
            future_value=future_value,
            total_invested=total_invested,
            interest_earned=future_value - total_invested,
        )


@dataclass(frozen=True)
class SeriesPoint:
    """Balance snapshot at the end of a plan year (year 0 is the baseline)."""
    year: int
    cumulative_total: float
    cumulative_invested: float


@dataclass(frozen=True)
class YearRow:
    """One row of the yearly contribution table."""
    year: int
    per_period_contribution: float
    delta_from_year_one: float
    invested_this_year: float


@dataclass(frozen=True)
class ContributionTable:
    """Yearly contribution rows together with the period count they assume."""
    periods_per_year: int
    rows: tuple[YearRow, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self):
        return iter(self.rows)


@dataclass(frozen=True)
class SelfTestResult:
    """Outcome of a single analytic cross-check."""
    name: str
    passed: bool
    expected: float
    actual: float


@dataclass(frozen=True)
class SelfTestReport:
    """Aggregated outcome of the self-test battery."""
    results: tuple[SelfTestResult, ...]

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def total_count(self) -> int:
        return len(self.results)

    @property
    def all_passed(self) -> bool:
        return self.passed_count == self.total_count

    def failures(self) -> list[SelfTestResult]:
        """Checks that did not pass."""
        return [r for r in self.results if not r.passed]
