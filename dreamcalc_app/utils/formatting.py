"""
Display formatting helpers.

The engine never rounds; everything shown to a reader goes through these.
"""

import math

DEFAULT_TITLE = "Dream Calculator"
DREAM_TITLE_PREFIX = "My dream"


def _round_half_up(value: float, digits: int) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def round2(value: float) -> float:
    """Round to cents, halves going up."""
    return _round_half_up(value, 2)


def round4(value: float) -> float:
    return _round_half_up(value, 4)


def format_amount(value: float) -> str:
    """Whole units with thousands separators, e.g. 12,345."""
    return f"{value:,.0f}"


def format_amount2(value: float) -> str:
    """Exactly two decimals with thousands separators, e.g. 1,234.50."""
    return f"{value:,.2f}"


def format_money(value: float, currency: str, decimals: int = 0) -> str:
    """Amount followed by its currency code."""
    text = format_amount2(value) if decimals == 2 else format_amount(value)
    return f"{text} {currency}"


def report_title(dream_name: str = "") -> str:
    """
    Title of a printed dream plan

    Args:
        dream_name: Name the child gave to the dream, may be blank

    Returns:
        "My dream: <name>" or the default calculator title
    """
    name = (dream_name or "").strip()
    if name:
        return f"{DREAM_TITLE_PREFIX}: {name}"
    return DEFAULT_TITLE
