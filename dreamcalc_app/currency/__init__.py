"""Currency conversion layer applied to calculator outputs"""

from .converter import (
    CurrencyConverter,
    ExchangeRateTable,
    convert,
    from_pivot,
    rate_for,
    to_pivot,
)

__all__ = [
    "CurrencyConverter",
    "ExchangeRateTable",
    "convert",
    "from_pivot",
    "rate_for",
    "to_pivot",
]
