"""Future value of a recurring contribution with yearly contribution growth"""

from ..models.plans import ContributionPlan, ProjectionResult
from .periods import periods_per_year, total_periods_for


def period_rate(annual_rate_pct: float, periods: int, compounding: bool) -> float:
    """
    Interest rate applied once per contribution period

    Args:
        annual_rate_pct: Annual rate in percent
        periods: Periods per year
        compounding: When False no interest is earned at all

    Returns:
        Per-period rate as a fraction
    """
    if not compounding:
        return 0.0
    return (annual_rate_pct / 100) / periods


def contribution_for_period(base_amount: float, yearly_growth: float,
                            period_index: int, periods: int) -> float:
    """
    Contribution posted in a given period

    The contribution is raised once a year: every period of plan year k
    (counting from 0) pays base * (1 + growth)^k.
    """
    year_index = period_index // periods
    return base_amount * (1 + yearly_growth) ** year_index


def compute_future_value(plan: ContributionPlan) -> ProjectionResult:
    """
    Calculate the accumulated value of a savings plan

    Each contribution is posted at the start of its period and earns that
    period's interest immediately (annuity-due). Nothing is ever withdrawn,
    interest compounds on the full balance every period.

    Args:
        plan: Savings plan; term years are clamped to [1, 50]

    Returns:
        ProjectionResult with future value, total invested and interest
    """
    periods = periods_per_year(plan.frequency)
    total_periods = total_periods_for(plan.term_years, periods)
    rate = period_rate(plan.annual_rate_pct, periods, plan.compounding)
    yearly_growth = plan.annual_growth_pct / 100

    balance = 0.0
    invested = 0.0

    for p in range(total_periods):
        contribution = contribution_for_period(plan.amount_per_period, yearly_growth, p, periods)
        balance += contribution
        invested += contribution
        if rate > 0:
            balance *= 1 + rate

    return ProjectionResult.from_totals(balance, invested)
