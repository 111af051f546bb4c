#!/usr/bin/env python3
"""
Basic Usage Example - DreamCalc Engine

This script demonstrates the basic usage of the dream calculators. It shows
how to:
- Initialize the engine (self-checks run on start-up)
- Project how a piggy bank grows, year by year
- Work out how much to set aside for a dream
- Show the results in another currency

Run: python examples/basic_usage.py
"""

from typing import Dict, Any

from dreamcalc_app.engine import DreamCalculatorEngine
from dreamcalc_app.logging.config import configure_logging
from dreamcalc_app.utils.formatting import format_amount, format_amount2, format_money


def create_savings_form() -> Dict[str, Any]:
    """Form data for 'How much will my piggy bank grow?'."""
    return {
        "amount_per_period": 100,
        "frequency": "monthly",
        "term_years": 10,
        "compounding": True,
        "annual_rate_pct": 8,
        "annual_growth_pct": 5,
    }


def create_dream_form() -> Dict[str, Any]:
    """Form data for 'I want my dream, how much should I save?'."""
    return {
        "dream_name": "Telescope",
        "target_amount": 20000,
        "term_years": 5,
        "compounding": True,
        "annual_rate_pct": 8,
        "frequency": "daily",
    }


def show_self_tests(engine: DreamCalculatorEngine) -> None:
    report = engine.self_test_report
    print("🔎 Technical tests")
    for result in report.results:
        mark = "✅" if result.passed else "❌"
        print(f"   {mark} {result.name}: expected {result.expected}, got {result.actual}")
    print(f"   Passed: {report.passed_count} / {report.total_count}\n")


def show_savings(engine: DreamCalculatorEngine) -> None:
    projection = engine.project_savings(create_savings_form())
    currency = projection.currency

    print("🐷 HOW MUCH WILL MY PIGGY BANK GROW?")
    print("=" * 50)
    print(f"   Saved in total : {format_money(projection.result.future_value, currency)}")
    print(f"   Put in yourself: {format_money(projection.result.total_invested, currency)}")
    print(f"   Magic of growth: {format_money(projection.result.interest_earned, currency)}")

    print("\n   Year   Total        Invested")
    for point in projection.series:
        print(f"   {point.year:>4}   {format_amount(point.cumulative_total):>10}   "
              f"{format_amount(point.cumulative_invested):>10}")

    print(f"\n   Contribution per period ({projection.table.periods_per_year} periods a year):")
    for row in projection.table:
        print(f"   Year {row.year:>2}: {format_amount2(row.per_period_contribution):>8} "
              f"(+{format_amount2(row.delta_from_year_one)}), "
              f"{format_amount(row.invested_this_year)} this year")
    print()


def show_dream(engine: DreamCalculatorEngine) -> None:
    for currency in ("USD", "EUR"):
        dream = engine.plan_dream(create_dream_form(), display_currency=currency)
        print(f"🌟 {dream.title.upper()} ({currency})")
        print("=" * 50)
        print(f"   Set aside every day: {format_money(dream.payment_per_period, currency, decimals=2)}")
        print(f"   Deposits           : {dream.total_periods}")
        print(f"   You put in         : {format_money(dream.total_deposited, currency)}")
        print()


def main():
    configure_logging(level="WARNING")

    engine = DreamCalculatorEngine()
    show_self_tests(engine)
    show_savings(engine)
    show_dream(engine)


if __name__ == "__main__":
    main()
