"""Tests for pivot-based currency conversion"""

import itertools

import pytest
from dreamcalc_app.currency.converter import (
    CurrencyConverter,
    convert,
    from_pivot,
    rate_for,
    to_pivot,
)


class TestPivotConversion:
    """Test conversion to and from the pivot currency"""

    def test_to_pivot(self, rate_table):
        assert to_pivot(92, "EUR", rate_table) == pytest.approx(100)

    def test_from_pivot(self, rate_table):
        assert from_pivot(100, "RUB", rate_table) == pytest.approx(9000)

    def test_pivot_is_identity(self, rate_table):
        assert to_pivot(123.45, "USD", rate_table) == 123.45
        assert from_pivot(123.45, "USD", rate_table) == 123.45

    def test_convert_between_non_pivot(self, rate_table):
        assert convert(92, "EUR", "RUB", rate_table) == pytest.approx(9000)

    def test_no_rounding(self, rate_table):
        assert convert(1, "USD", "EUR", rate_table) == 0.92

    def test_round_trip(self, rate_table):
        """Test converting there and back returns the original amount"""
        for a, b in itertools.permutations(rate_table, 2):
            for amount in (0, 1, 99.99, 20000):
                there = convert(amount, a, b, rate_table)
                assert convert(there, b, a, rate_table) == pytest.approx(amount)


class TestRateFallbacks:
    """Test missing and degenerate rates"""

    def test_missing_currency_defaults_to_one(self, rate_table):
        assert rate_for("JPY", rate_table) == 1.0
        assert convert(50, "JPY", "USD", rate_table) == 50

    def test_zero_rate_defaults_to_one(self):
        assert rate_for("EUR", {"USD": 1.0, "EUR": 0.0}) == 1.0
        assert to_pivot(10, "EUR", {"USD": 1.0, "EUR": 0.0}) == 10

    def test_negative_rate_not_rejected(self):
        assert from_pivot(10, "XXX", {"XXX": -2.0}) == -20


class TestCurrencyConverter:
    """Test the caller-owned converter"""

    def test_from_rates_copies_table(self, rate_table):
        converter = CurrencyConverter.from_rates("USD", rate_table)
        converter.set_rate("EUR", 0.5)
        assert rate_table["EUR"] == 0.92
        assert converter.rates["EUR"] == 0.5

    def test_from_rates_adds_pivot(self):
        converter = CurrencyConverter.from_rates("USD", {"EUR": 0.9})
        assert converter.rates["USD"] == 1.0
        assert converter.currencies == ["EUR", "USD"]

    def test_set_rate_affects_next_conversion(self, rate_table):
        converter = CurrencyConverter.from_rates("USD", rate_table)
        assert converter.convert(100, "USD", "EUR") == pytest.approx(92)
        converter.set_rate("EUR", 1.1)
        assert converter.convert(100, "USD", "EUR") == pytest.approx(110)

    def test_same_currency_is_identity(self, rate_table):
        converter = CurrencyConverter.from_rates("USD", rate_table)
        assert converter.convert(42.5, "RUB", "RUB") == 42.5

    def test_snapshot_is_a_copy(self, rate_table):
        converter = CurrencyConverter.from_rates("USD", rate_table)
        snapshot = converter.snapshot()
        snapshot["EUR"] = 5.0
        assert converter.rates["EUR"] == 0.92
