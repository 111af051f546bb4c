"""Tests for display formatting helpers."""

import pytest

from dreamcalc_app.utils.formatting import (
    format_amount,
    format_amount2,
    format_money,
    report_title,
    round2,
    round4,
)


class TestRounding:
    """Test display rounding."""

    def test_round2(self):
        assert round2(1234.5678) == 1234.57
        assert round2(0.125) == 0.13
        assert round2(100) == 100

    def test_round4(self):
        assert round4(1.23456) == 1.2346

    def test_negative_halves_go_up(self):
        assert round2(-0.125) == -0.12


class TestAmountFormatting:
    """Test amount formatting."""

    def test_format_amount(self):
        assert format_amount(1234567.89) == "1,234,568"
        assert format_amount(0) == "0"

    def test_format_amount2(self):
        assert format_amount2(1234.5) == "1,234.50"
        assert format_amount2(0.004) == "0.00"

    def test_format_money(self):
        assert format_money(20000, "EUR") == "20,000 EUR"
        assert format_money(12.346, "USD", decimals=2) == "12.35 USD"


class TestReportTitle:
    """Test printed report title."""

    def test_named_dream(self):
        assert report_title("Bike") == "My dream: Bike"

    def test_blank_dream(self):
        assert report_title("") == "Dream Calculator"
        assert report_title("   ") == "Dream Calculator"
