"""
Plan data normalization for converting raw form input to plan models.

This module handles parsing, validation, and normalization of calculator
form data: numbers that arrive as strings, frequency names, checkbox
values, and values outside the ranges the calculators accept.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Optional, Union

import structlog

from ..config.defaults import PlanLimits
from ..errors import InputError, InvalidRangeError, MalformedInputError, MissingInputError
from ..models.plans import ContributionPlan, Frequency, GoalPlan

logger = structlog.get_logger(__name__)

_TRUE_STRINGS = {"true", "1", "yes", "on"}
_FALSE_STRINGS = {"false", "0", "no", "off", ""}


@dataclass
class PlanNormalizationResult:
    """Result of plan normalization process."""
    # Normalized plan (None if invalid)
    plan: Optional[Union[ContributionPlan, GoalPlan]] = None
    # Fields whose values were pulled into range
    clamped_fields: list[str] = field(default_factory=list)
    # Processing metadata
    success: bool = True
    error: Optional[InputError] = None

    @property
    def error_msg(self) -> Optional[str]:
        return str(self.error) if self.error else None

    @classmethod
    def ok(cls, plan: Union[ContributionPlan, GoalPlan],
           clamped_fields: Optional[list[str]] = None) -> "PlanNormalizationResult":
        """Create successful result with normalized plan."""
        return cls(plan=plan, clamped_fields=clamped_fields or [], success=True)

    @classmethod
    def failed(cls, error: InputError) -> "PlanNormalizationResult":
        """Create error result."""
        return cls(success=False, error=error)


class PlanNormalizer:
    """
    Form data normalization pipeline.

    Out-of-range values are clamped to the configured limits, unless the
    limits ask for strict ranges, in which case InvalidRangeError is
    reported instead.
    """

    def __init__(self, limits: Optional[PlanLimits] = None):
        """
        Initialize plan normalizer with input limits.

        Args:
            limits: Accepted input ranges
        """
        self.limits = limits or PlanLimits()
        self.logger = logger

    def normalize_contribution(self, raw: dict[str, Any]) -> PlanNormalizationResult:
        """
        Normalize savings calculator input into a ContributionPlan.

        Args:
            raw: Form data with amount_per_period, annual_rate_pct, term_years
                and optionally compounding, frequency, annual_growth_pct

        Returns:
            PlanNormalizationResult with the plan or the input error
        """
        clamped: list[str] = []
        try:
            plan = ContributionPlan(
                amount_per_period=self._amount(raw, "amount_per_period", clamped),
                annual_rate_pct=self._percent(raw, "annual_rate_pct", clamped,
                                              self.limits.min_rate_pct, self.limits.max_rate_pct),
                term_years=self._term(raw, clamped),
                compounding=self._flag(raw, "compounding", default=True),
                frequency=self._frequency(raw),
                annual_growth_pct=self._percent(raw, "annual_growth_pct", clamped,
                                                self.limits.min_growth_pct, self.limits.max_growth_pct,
                                                default=0.0),
            )
        except InputError as e:
            return PlanNormalizationResult.failed(e)

        self._log_clamped("contribution", clamped)
        return PlanNormalizationResult.ok(plan, clamped)

    def normalize_goal(self, raw: dict[str, Any]) -> PlanNormalizationResult:
        """
        Normalize dream calculator input into a GoalPlan.

        Args:
            raw: Form data with target_amount, annual_rate_pct, term_years
                and optionally compounding, frequency, dream_name

        Returns:
            PlanNormalizationResult with the plan or the input error
        """
        clamped: list[str] = []
        try:
            plan = GoalPlan(
                target_amount=self._amount(raw, "target_amount", clamped),
                annual_rate_pct=self._percent(raw, "annual_rate_pct", clamped,
                                              self.limits.min_rate_pct, self.limits.max_rate_pct),
                term_years=self._term(raw, clamped),
                compounding=self._flag(raw, "compounding", default=True),
                frequency=self._frequency(raw),
                dream_name=str(raw.get("dream_name") or "").strip(),
            )
        except InputError as e:
            return PlanNormalizationResult.failed(e)

        self._log_clamped("goal", clamped)
        return PlanNormalizationResult.ok(plan, clamped)

    def _number(self, raw: dict[str, Any], name: str, default: Optional[float] = None) -> float:
        if name not in raw or raw[name] is None or raw[name] == "":
            if default is None:
                raise MissingInputError(f"Missing required field: {name}", field_name=name)
            return default

        value = raw[name]
        if isinstance(value, bool):
            raise MalformedInputError(f"Invalid {name}: expected a number", field_name=name, raw_value=value)
        try:
            number = float(value)
        except (ValueError, TypeError) as e:
            raise MalformedInputError(f"Invalid {name}: {e}", field_name=name, raw_value=value)

        if math.isnan(number) or math.isinf(number):
            raise MalformedInputError(f"Invalid {name}: must be finite", field_name=name, raw_value=value)
        return number

    def _bounded(self, name: str, value: float, minimum: float, maximum: float,
                 clamped: list[str]) -> float:
        if minimum <= value <= maximum:
            return value
        if self.limits.strict_ranges:
            raise InvalidRangeError(
                f"{name} must be between {minimum} and {maximum}",
                field_name=name,
                value=value,
                minimum=minimum,
                maximum=maximum,
            )
        clamped.append(name)
        return max(minimum, min(maximum, value))

    def _amount(self, raw: dict[str, Any], name: str, clamped: list[str]) -> float:
        return self._bounded(name, self._number(raw, name), 0.0, self.limits.max_amount, clamped)

    def _percent(self, raw: dict[str, Any], name: str, clamped: list[str],
                 minimum: float, maximum: float, default: Optional[float] = None) -> float:
        return self._bounded(name, self._number(raw, name, default), minimum, maximum, clamped)

    def _term(self, raw: dict[str, Any], clamped: list[str]) -> int:
        # whole years first, so the range applies to the term actually used
        years = int(math.floor(self._number(raw, "term_years") + 0.5))
        return int(self._bounded("term_years", years, self.limits.min_term_years,
                                 self.limits.max_term_years, clamped))

    def _flag(self, raw: dict[str, Any], name: str, default: bool) -> bool:
        value = raw.get(name, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, str):
            text = value.strip().lower()
            if text in _TRUE_STRINGS:
                return True
            if text in _FALSE_STRINGS:
                return False
        if value is None:
            return default
        raise MalformedInputError(f"Invalid {name}: expected a boolean", field_name=name, raw_value=value)

    def _frequency(self, raw: dict[str, Any]) -> Frequency:
        value = raw.get("frequency", Frequency.MONTHLY)
        if isinstance(value, Frequency):
            return value
        try:
            return Frequency(str(value).strip().lower())
        except ValueError:
            # Unknown frequencies count as monthly, same as periods_per_year
            self.logger.warning("Unknown frequency, using monthly", frequency=value)
            return Frequency.MONTHLY

    def _log_clamped(self, kind: str, clamped: list[str]) -> None:
        if clamped:
            self.logger.info("Input values clamped to limits", plan_kind=kind, fields=clamped)
