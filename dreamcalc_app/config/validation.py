"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

FREQUENCIES = ("daily", "biweekly", "monthly")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_limits(params: dict[str, Any]) -> list[ValidationError]:
        """Validate input range limits."""
        errors = []

        for name in ("min_term_years", "max_term_years"):
            if name in params:
                value = params[name]
                if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive integer",
                        value=value
                    ))

        lo = params.get("min_term_years")
        hi = params.get("max_term_years")
        if isinstance(lo, int) and isinstance(hi, int) and lo > hi:
            errors.append(ValidationError(
                field="max_term_years",
                message="Must not be less than min_term_years",
                value=hi
            ))

        if "max_amount" in params:
            value = params["max_amount"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="max_amount",
                    message="Must be a positive number",
                    value=value
                ))

        if "strict_ranges" in params:
            value = params["strict_ranges"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="strict_ranges",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_calculator_defaults(params: dict[str, Any]) -> list[ValidationError]:
        """Validate initial values of either calculator."""
        errors = []

        for name in ("amount_per_period", "target_amount", "annual_rate_pct", "annual_growth_pct"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative number",
                        value=value
                    ))

        if "term_years" in params:
            value = params["term_years"]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field="term_years",
                    message="Must be a positive integer",
                    value=value
                ))

        if "frequency" in params and params["frequency"] not in FREQUENCIES:
            errors.append(ValidationError(
                field="frequency",
                message=f"Must be one of {', '.join(FREQUENCIES)}",
                value=params["frequency"]
            ))

        if "compounding" in params and not isinstance(params["compounding"], bool):
            errors.append(ValidationError(
                field="compounding",
                message="Must be a boolean",
                value=params["compounding"]
            ))

        return errors

    @staticmethod
    def validate_currency_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate the currency set and exchange rates."""
        errors = []

        rates = params.get("rates", {})
        if not isinstance(rates, dict) or len(rates) < 2:
            errors.append(ValidationError(
                field="rates",
                message="Must map at least two currency codes to rates",
                value=rates
            ))
            return errors

        for code, rate in rates.items():
            if not _is_number(rate) or rate <= 0:
                errors.append(ValidationError(
                    field=f"rates.{code}",
                    message="Must be a positive number",
                    value=rate
                ))

        pivot = params.get("pivot")
        if pivot is not None:
            if pivot not in rates:
                errors.append(ValidationError(
                    field="pivot",
                    message="Must be one of the configured currencies",
                    value=pivot
                ))
            elif rates[pivot] != 1:
                errors.append(ValidationError(
                    field=f"rates.{pivot}",
                    message="Pivot currency rate must be 1",
                    value=rates[pivot]
                ))

        display = params.get("display_currency")
        if display is not None and display not in rates:
            errors.append(ValidationError(
                field="display_currency",
                message="Must be one of the configured currencies",
                value=display
            ))

        return errors

    @staticmethod
    def validate_selftest_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate self-check tolerances."""
        errors = []

        for name in ("plain_eps", "compound_eps"):
            if name in params:
                value = params[name]
                if not _is_number(value) or value <= 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a positive number",
                        value=value
                    ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "limits" in config:
            errors.extend(ConfigValidator.validate_limits(config["limits"]))

        if "savings" in config:
            errors.extend(ConfigValidator.validate_calculator_defaults(config["savings"]))

        if "dream" in config:
            errors.extend(ConfigValidator.validate_calculator_defaults(config["dream"]))

        if "currency" in config:
            errors.extend(ConfigValidator.validate_currency_params(config["currency"]))

        if "selftest" in config:
            errors.extend(ConfigValidator.validate_selftest_params(config["selftest"]))

        return errors
