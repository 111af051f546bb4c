"""
Main calculator coordinator.

Orchestrates the two dream calculators, coordinating configuration, form
input normalization, the finance engine and currency conversion for display.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional, Union

import structlog

from .config.loader import ConfigLoader, build_config
from .config.validation import ConfigValidator
from .currency.converter import CurrencyConverter
from .data.plan_normalizer import PlanNormalizer
from .errors import CalculationError, ConfigurationError
from .finance.future_value import compute_future_value
from .finance.goal_payment import compute_required_payment, total_deposited
from .finance.periods import periods_per_year, total_periods_for
from .finance.schedule import contribution_table, yearly_series
from .models.plans import (
    ContributionPlan,
    ContributionTable,
    GoalPlan,
    ProjectionResult,
    SelfTestReport,
    SeriesPoint,
    YearRow,
)
from .selftest.suite import run_self_tests
from .utils.formatting import report_title

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SavingsProjection:
    """Everything the piggy-bank calculator shows, in one currency."""
    plan: ContributionPlan
    result: ProjectionResult
    series: list[SeriesPoint]
    table: ContributionTable
    currency: str


@dataclass(frozen=True)
class DreamPlan:
    """Everything the dream calculator shows, in one currency."""
    title: str
    plan: GoalPlan
    payment_per_period: float
    periods_per_year: int
    total_periods: int
    total_deposited: float
    currency: str


class DreamCalculatorEngine:
    """
    Main coordinator for the dream calculators.

    Manages the calculation pipeline:
    Form Data → Normalization → Finance Engine → Currency Conversion
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None,
                 overrides: Optional[dict[str, Any]] = None) -> None:
        """Initialize the calculator engine."""
        self.logger = logger

        self.config_loader = ConfigLoader.create(config_dir)
        merged = self.config_loader.merge_config(overrides)

        validation_errors = ConfigValidator.validate_config(merged)
        if validation_errors:
            error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in validation_errors]
            self.logger.error("Configuration validation failed", errors=error_msgs)
            raise ConfigurationError("Invalid calculator configuration", errors=validation_errors)

        self.config = build_config(merged)
        self.normalizer = PlanNormalizer(self.config.limits)
        self.converter = CurrencyConverter.from_rates(
            self.config.currency.pivot, self.config.currency.rates
        )

        self.self_test_report: Optional[SelfTestReport] = None
        if self.config.selftest.run_on_startup:
            self.self_test_report = run_self_tests(self.config.selftest)
            if not self.self_test_report.all_passed:
                self.logger.warning(
                    "Finance engine self-tests failed",
                    failed=[r.name for r in self.self_test_report.failures()],
                )

        self.logger.info(
            "Dream calculator engine initialized",
            pivot=self.converter.pivot,
            currencies=self.converter.currencies,
        )

    @property
    def display_currency(self) -> str:
        return self.config.currency.display_currency

    def set_exchange_rate(self, currency: str, rate: float) -> None:
        """Apply a user edit to the exchange rate table."""
        self.converter.set_rate(currency, rate)

    def default_savings_input(self) -> dict[str, Any]:
        """Initial form values of the savings calculator."""
        return asdict(self.config.savings)

    def default_dream_input(self) -> dict[str, Any]:
        """Initial form values of the dream calculator."""
        return asdict(self.config.dream)

    def project_savings(self, raw: dict[str, Any],
                        display_currency: Optional[str] = None) -> SavingsProjection:
        """
        Run the piggy-bank calculator on raw form data.

        Args:
            raw: Form data; an optional "currency" key names the currency the
                amounts are entered in (pivot by default)
            display_currency: Currency to express results in

        Returns:
            SavingsProjection converted to the display currency

        Raises:
            InputError: Form data could not be normalized
            CalculationError: Arithmetic fault in the finance engine
        """
        normalization_result = self.normalizer.normalize_contribution(raw)
        if not normalization_result.success:
            self.logger.error("Savings input normalization failed", error=normalization_result.error_msg)
            raise normalization_result.error

        plan = normalization_result.plan
        source = raw.get("currency") or self.converter.pivot
        target = display_currency or self.display_currency

        try:
            result = compute_future_value(plan)
            series = yearly_series(plan)
            table = contribution_table(plan)
        except (OverflowError, ZeroDivisionError) as e:
            raise CalculationError(
                f"Savings projection failed: {str(e)}",
                operation="project_savings",
                calculation_input={"plan": plan},
            )

        projection = SavingsProjection(
            plan=plan,
            result=self._convert_result(result, source, target),
            series=[self._convert_point(p, source, target) for p in series],
            table=self._convert_table(table, source, target),
            currency=target,
        )

        self.logger.info(
            "Savings projection calculated",
            frequency=plan.frequency.value,
            term_years=plan.term_years,
            currency=target,
            future_value=projection.result.future_value,
        )
        return projection

    def plan_dream(self, raw: dict[str, Any],
                   display_currency: Optional[str] = None) -> DreamPlan:
        """
        Run the dream calculator on raw form data.

        Args:
            raw: Form data; an optional "currency" key names the currency the
                target is entered in (pivot by default)
            display_currency: Currency to express results in

        Returns:
            DreamPlan converted to the display currency

        Raises:
            InputError: Form data could not be normalized
            CalculationError: Arithmetic fault in the finance engine
        """
        normalization_result = self.normalizer.normalize_goal(raw)
        if not normalization_result.success:
            self.logger.error("Dream input normalization failed", error=normalization_result.error_msg)
            raise normalization_result.error

        plan = normalization_result.plan
        source = raw.get("currency") or self.converter.pivot
        target = display_currency or self.display_currency

        try:
            payment = compute_required_payment(plan)
        except (OverflowError, ZeroDivisionError) as e:
            raise CalculationError(
                f"Dream payment calculation failed: {str(e)}",
                operation="plan_dream",
                calculation_input={"plan": plan},
            )

        py = periods_per_year(plan.frequency)
        n = total_periods_for(plan.term_years, py)
        payment = self.converter.convert(payment, source, target)

        dream = DreamPlan(
            title=report_title(plan.dream_name),
            plan=plan,
            payment_per_period=payment,
            periods_per_year=py,
            total_periods=n,
            total_deposited=total_deposited(payment, plan),
            currency=target,
        )

        self.logger.info(
            "Dream plan calculated",
            dream_name=plan.dream_name,
            frequency=plan.frequency.value,
            term_years=plan.term_years,
            currency=target,
            payment_per_period=payment,
        )
        return dream

    def _convert_result(self, result: ProjectionResult, source: str, target: str) -> ProjectionResult:
        return ProjectionResult.from_totals(
            self.converter.convert(result.future_value, source, target),
            self.converter.convert(result.total_invested, source, target),
        )

    def _convert_point(self, point: SeriesPoint, source: str, target: str) -> SeriesPoint:
        return SeriesPoint(
            year=point.year,
            cumulative_total=self.converter.convert(point.cumulative_total, source, target),
            cumulative_invested=self.converter.convert(point.cumulative_invested, source, target),
        )

    def _convert_table(self, table: ContributionTable, source: str, target: str) -> ContributionTable:
        rows = tuple(
            YearRow(
                year=row.year,
                per_period_contribution=self.converter.convert(row.per_period_contribution, source, target),
                delta_from_year_one=self.converter.convert(row.delta_from_year_one, source, target),
                invested_this_year=self.converter.convert(row.invested_this_year, source, target),
            )
            for row in table.rows
        )
        return ContributionTable(periods_per_year=table.periods_per_year, rows=rows)
