"""
Year-by-year projections of a savings plan.

Two outputs are derived here and they are intentionally kept apart:

- yearly_series replays the period recurrence of compute_future_value and
  samples the running balance at each year boundary (growth chart data).
- contribution_table describes the per-period contribution of every year,
  assuming the contribution is constant within that year.

The invested-per-year figure of the table is an approximation of what the
series accumulates. The two are not reconciled against each other.
"""

from ..models.plans import ContributionPlan, ContributionTable, SeriesPoint, YearRow
from .future_value import contribution_for_period, period_rate
from .periods import periods_per_year, whole_years


def yearly_series(plan: ContributionPlan) -> list[SeriesPoint]:
    """
    Build the growth chart series for a savings plan

    Args:
        plan: Savings plan; term years are clamped to [1, 50]

    Returns:
        Points for years 0..term, year 0 being the zero baseline
    """
    years = whole_years(plan.term_years)
    periods = periods_per_year(plan.frequency)
    rate = period_rate(plan.annual_rate_pct, periods, plan.compounding)
    yearly_growth = plan.annual_growth_pct / 100

    series = [SeriesPoint(year=0, cumulative_total=0.0, cumulative_invested=0.0)]
    balance = 0.0

    for year in range(1, years + 1):
        invested_year = 0.0
        for i in range(periods):
            p = (year - 1) * periods + i
            contribution = contribution_for_period(plan.amount_per_period, yearly_growth, p, periods)
            balance += contribution
            invested_year += contribution
            if rate > 0:
                balance *= 1 + rate

        series.append(SeriesPoint(
            year=year,
            cumulative_total=balance,
            cumulative_invested=series[-1].cumulative_invested + invested_year,
        ))

    return series


def contribution_table(plan: ContributionPlan) -> ContributionTable:
    """
    Build the yearly contribution table for a savings plan

    Args:
        plan: Savings plan; term years are clamped to [1, 50]

    Returns:
        ContributionTable with one row per plan year
    """
    years = whole_years(plan.term_years)
    periods = periods_per_year(plan.frequency)
    base = plan.amount_per_period
    yearly_growth = plan.annual_growth_pct / 100

    rows = []
    for year in range(1, years + 1):
        per_period = base * (1 + yearly_growth) ** (year - 1)
        rows.append(YearRow(
            year=year,
            per_period_contribution=per_period,
            delta_from_year_one=per_period - base,
            invested_this_year=per_period * periods,
        ))

    return ContributionTable(periods_per_year=periods, rows=tuple(rows))
