"""Periodic deposit required to reach a dream amount (sinking-fund payment)"""

from ..models.plans import GoalPlan
from .periods import periods_per_year, total_periods_for


def compute_required_payment(plan: GoalPlan) -> float:
    """
    Calculate the per-period deposit needed to reach the target amount

    Deposits are assumed at the end of each period (ordinary annuity):

        payment = target * r / ((1 + r)^n - 1)

    This is deliberately a different timing convention from
    compute_future_value, which posts contributions at period start.
    Contribution growth is not modelled here.

    Args:
        plan: Goal plan; term years are clamped to [1, 50]

    Returns:
        Deposit per period. Without interest this is an equal share of the
        target; degenerate inputs fall back to the equal share as well.
    """
    periods = periods_per_year(plan.frequency)
    n = total_periods_for(plan.term_years, periods)

    if n <= 0:
        return plan.target_amount

    if not plan.compounding or plan.annual_rate_pct <= 0:
        return plan.target_amount / n

    r = (plan.annual_rate_pct / 100) / periods
    denom = (1 + r) ** n - 1
    if denom <= 0:
        return plan.target_amount / n

    return plan.target_amount * r / denom


def total_deposited(payment: float, plan: GoalPlan) -> float:
    """Sum of all deposits made over the plan at a fixed payment."""
    return payment * total_periods_for(plan.term_years, periods_per_year(plan.frequency))
