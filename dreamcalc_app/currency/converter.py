"""
Currency conversion through a pivot currency.

Exchange rates are expressed as units of a currency per one unit of the
pivot currency. Rates are user-edited constants; nothing is fetched.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

import structlog

logger = structlog.get_logger(__name__)

# Units of the currency per one unit of the pivot currency
ExchangeRateTable = dict[str, float]

DEFAULT_RATE = 1.0


def rate_for(currency: str, table: Mapping[str, float]) -> float:
    """
    Look up the exchange rate of a currency

    Args:
        currency: Currency code
        table: Exchange rate table

    Returns:
        Configured rate; a missing or zero entry counts as 1
    """
    return table.get(currency) or DEFAULT_RATE


def to_pivot(amount: float, currency: str, table: Mapping[str, float]) -> float:
    """Express an amount in the pivot currency."""
    return amount / rate_for(currency, table)


def from_pivot(amount_pivot: float, currency: str, table: Mapping[str, float]) -> float:
    """Express a pivot-currency amount in the given currency."""
    return amount_pivot * rate_for(currency, table)


def convert(amount: float, from_currency: str, to_currency: str,
            table: Mapping[str, float]) -> float:
    """
    Convert an amount between two currencies via the pivot

    Args:
        amount: Amount in from_currency
        from_currency: Source currency code
        to_currency: Target currency code
        table: Exchange rate table

    Returns:
        Unrounded amount in to_currency
    """
    return from_pivot(to_pivot(amount, from_currency, table), to_currency, table)


@dataclass
class CurrencyConverter:
    """Caller-owned exchange rate table with user-editable rates."""

    pivot: str
    rates: ExchangeRateTable = field(default_factory=dict)

    @classmethod
    def from_rates(cls, pivot: str, rates: Mapping[str, float]) -> "CurrencyConverter":
        """Create a converter over a copy of the given rates."""
        table = {code: float(rate) for code, rate in rates.items()}
        table.setdefault(pivot, DEFAULT_RATE)
        return cls(pivot=pivot, rates=table)

    @property
    def currencies(self) -> list[str]:
        return list(self.rates)

    def set_rate(self, currency: str, rate: float) -> None:
        """Update a rate between calculations."""
        previous: Optional[float] = self.rates.get(currency)
        self.rates[currency] = float(rate)
        logger.info(
            "Exchange rate updated",
            currency=currency,
            previous_rate=previous,
            rate=float(rate),
        )
        if rate <= 0:
            logger.warning(
                "Non-positive exchange rate configured",
                currency=currency,
                rate=float(rate),
            )

    def convert(self, amount: float, from_currency: str, to_currency: str) -> float:
        if from_currency == to_currency:
            return amount
        return convert(amount, from_currency, to_currency, self.rates)

    def snapshot(self) -> ExchangeRateTable:
        """Copy of the current rates, safe to hand to pure functions."""
        return dict(self.rates)
