"""Contribution frequency to period-count mapping and term clamping"""

import math
from typing import Any, Union

from ..models.plans import Frequency

MIN_TERM_YEARS = 1
MAX_TERM_YEARS = 50
DEFAULT_PERIODS_PER_YEAR = 12

_PERIODS_PER_YEAR = {
    Frequency.DAILY.value: 365,
    Frequency.BIWEEKLY.value: 26,
    Frequency.MONTHLY.value: 12,
}


def periods_per_year(frequency: Union[Frequency, str, Any]) -> int:
    """
    Number of contribution periods in one year

    Args:
        frequency: Frequency member or its string value

    Returns:
        365, 26 or 12; anything unrecognised counts as monthly
    """
    key = frequency.value if isinstance(frequency, Frequency) else frequency
    try:
        return _PERIODS_PER_YEAR.get(key, DEFAULT_PERIODS_PER_YEAR)
    except TypeError:
        # unhashable input
        return DEFAULT_PERIODS_PER_YEAR


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def clamp_term(years: float, minimum: int = MIN_TERM_YEARS, maximum: int = MAX_TERM_YEARS) -> float:
    """Clamp a plan term to the supported range of years."""
    return clamp(years, minimum, maximum)


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up (not banker's rounding)."""
    return math.floor(value + 0.5)


def total_periods_for(term_years: float, periods: int) -> int:
    """
    Total number of contribution periods over a clamped term

    Args:
        term_years: Plan term, clamped to [1, 50]
        periods: Periods per year

    Returns:
        Whole number of periods
    """
    return round_half_up(clamp_term(term_years) * periods)


def whole_years(term_years: float) -> int:
    """Number of complete plan years covered by a clamped term."""
    return math.floor(clamp_term(term_years))
