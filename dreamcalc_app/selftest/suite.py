"""
Analytic cross-checks of the finance engine.

Each check compares an engine output with an independently derived
closed-form annuity formula. A failing check means the engine is wrong;
it is reported as a diagnostic row and never raised.
"""

from typing import Callable, Optional

from ..config.defaults import SelfTestParams
from ..logging.config import get_selftest_logger, log_self_test_result
from ..models.plans import (
    ContributionPlan,
    Frequency,
    GoalPlan,
    SelfTestReport,
    SelfTestResult,
)
from ..finance.future_value import compute_future_value
from ..finance.goal_payment import compute_required_payment
from ..finance.periods import periods_per_year
from ..utils.formatting import round2, round4

logger = get_selftest_logger(__name__)


def nearly_equal(a: float, b: float, eps: float = 1e-6) -> bool:
    return abs(a - b) <= eps


def check_goal_without_interest(params: SelfTestParams) -> SelfTestResult:
    """1200 over one year of monthly deposits without interest is 100 a month."""
    got = compute_required_payment(GoalPlan(
        target_amount=1200,
        annual_rate_pct=0,
        term_years=1,
        compounding=False,
        frequency=Frequency.MONTHLY,
    ))
    return SelfTestResult(
        name="goal(no interest) 1200 / 12 = 100",
        passed=nearly_equal(got, 100, params.plain_eps),
        expected=100,
        actual=round2(got),
    )


def check_goal_with_interest(params: SelfTestParams) -> SelfTestResult:
    """A goal built from the ordinary-annuity formula inverts back to its payment."""
    py = periods_per_year(Frequency.MONTHLY)
    r = 0.12 / py
    n = 12
    target_payment = 100
    goal = target_payment * ((1 + r) ** n - 1) / r

    got = compute_required_payment(GoalPlan(
        target_amount=goal,
        annual_rate_pct=12,
        term_years=1,
        compounding=True,
        frequency=Frequency.MONTHLY,
    ))
    return SelfTestResult(
        name="goal(interest) invert to payment≈100",
        passed=nearly_equal(got, target_payment, params.compound_eps),
        expected=round4(target_payment),
        actual=round4(got),
    )


def check_future_value_without_interest(params: SelfTestParams) -> SelfTestResult:
    """Without interest or growth the future value is the sum of contributions."""
    result = compute_future_value(ContributionPlan(
        amount_per_period=100,
        annual_rate_pct=0,
        term_years=1,
        compounding=False,
        frequency=Frequency.MONTHLY,
        annual_growth_pct=0,
    ))
    return SelfTestResult(
        name="FV no interest: 100*12 = 1200",
        passed=nearly_equal(result.future_value, 1200, params.plain_eps),
        expected=1200,
        actual=round2(result.future_value),
    )


def check_future_value_annuity_due(params: SelfTestParams) -> SelfTestResult:
    """With interest the future value matches the annuity-due closed form."""
    py = periods_per_year(Frequency.MONTHLY)
    r = 0.12 / py
    n = 12
    payment = 100
    expected = payment * (((1 + r) ** n - 1) / r) * (1 + r)

    result = compute_future_value(ContributionPlan(
        amount_per_period=payment,
        annual_rate_pct=12,
        term_years=1,
        compounding=True,
        frequency=Frequency.MONTHLY,
        annual_growth_pct=0,
    ))
    return SelfTestResult(
        name="FV with interest (annuity-due)",
        passed=nearly_equal(result.future_value, expected, params.compound_eps),
        expected=round4(expected),
        actual=round4(result.future_value),
    )


SELF_CHECKS: tuple[Callable[[SelfTestParams], SelfTestResult], ...] = (
    check_goal_without_interest,
    check_goal_with_interest,
    check_future_value_without_interest,
    check_future_value_annuity_due,
)


def run_self_tests(params: Optional[SelfTestParams] = None) -> SelfTestReport:
    """
    Run the fixed battery of formula self-checks

    Args:
        params: Tolerances; defaults to 1e-6 for plain and 1e-4 for
            compounding checks

    Returns:
        SelfTestReport with one result per check
    """
    params = params or SelfTestParams()
    results = tuple(check(params) for check in SELF_CHECKS)

    for result in results:
        log_self_test_result(logger, result)

    report = SelfTestReport(results=results)
    logger.info(
        "Self-tests finished",
        passed=report.passed_count,
        total=report.total_count,
    )
    return report
