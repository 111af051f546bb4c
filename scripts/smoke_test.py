#!/usr/bin/env python3
"""End-to-end smoke check of the dream calculators.

Runs, in order:

1. the finance engine self-checks (every one must pass)
2. the piggy-bank calculator on its default form, in every configured currency
3. the dream calculator on its default form, in every configured currency
4. the example scripts under examples/

Exits with status 0 when every check passes, 1 otherwise.

Usage:
    python scripts/smoke_test.py [--skip-examples]
"""

import argparse
import math
import runpy
import sys
import traceback
from pathlib import Path
from typing import Callable, List, Optional, Tuple

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dreamcalc_app.engine import DreamCalculatorEngine
from dreamcalc_app.logging.config import configure_logging
from dreamcalc_app.selftest.suite import run_self_tests

EXAMPLES_DIR = project_root / "examples"
EXAMPLE_FILES = ("basic_usage.py", "configuration_demo.py")


def check_self_tests(engine: DreamCalculatorEngine) -> None:
    report = run_self_tests(engine.config.selftest)
    if not report.all_passed:
        failed = ", ".join(r.name for r in report.failures())
        raise AssertionError(f"{report.total_count - report.passed_count} self-check(s) failed: {failed}")


def check_savings(engine: DreamCalculatorEngine) -> None:
    form = engine.default_savings_input()
    for currency in engine.converter.currencies:
        projection = engine.project_savings(form, display_currency=currency)
        result = projection.result
        if not math.isfinite(result.future_value):
            raise AssertionError(f"Future value is not finite in {currency}")
        if result.future_value < result.total_invested:
            raise AssertionError(f"Savings lost money in {currency}")
        if len(projection.series) != projection.plan.term_years + 1:
            raise AssertionError(f"Series has {len(projection.series)} points in {currency}")


def check_dream(engine: DreamCalculatorEngine) -> None:
    form = engine.default_dream_input()
    for currency in engine.converter.currencies:
        dream = engine.plan_dream(form, display_currency=currency)
        if not dream.payment_per_period > 0:
            raise AssertionError(f"Dream payment is {dream.payment_per_period} in {currency}")
        if dream.total_periods != dream.plan.term_years * dream.periods_per_year:
            raise AssertionError(f"Dream has {dream.total_periods} deposits in {currency}")


def check_examples(engine: DreamCalculatorEngine) -> None:
    for filename in EXAMPLE_FILES:
        runpy.run_path(str(EXAMPLES_DIR / filename), run_name="__main__")


ENGINE_CHECKS: List[Tuple[str, Callable[[DreamCalculatorEngine], None]]] = [
    ("Self-checks", check_self_tests),
    ("Savings projection", check_savings),
    ("Dream plan", check_dream),
]


def run_checks(engine: Optional[DreamCalculatorEngine] = None,
               include_examples: bool = True) -> List[Tuple[str, str]]:
    """Run every smoke check and return (name, error) for each failure."""
    engine = engine or DreamCalculatorEngine()
    checks = list(ENGINE_CHECKS)
    if include_examples:
        checks.append(("Examples", check_examples))

    failures = []
    for name, check in checks:
        try:
            check(engine)
        except Exception as e:  # pylint: disable=broad-except
            traceback.print_exc()
            failures.append((name, str(e)))
            print(f"❌ {name}: {e}")
        else:
            print(f"✅ {name}")
    return failures


def main():
    parser = argparse.ArgumentParser(description="Smoke check the dream calculators")
    parser.add_argument("--skip-examples", action="store_true", help="Do not run examples/")
    args = parser.parse_args()

    configure_logging(level="WARNING")

    print("🧪 DreamCalc smoke check")
    print("=" * 60)
    failures = run_checks(include_examples=not args.skip_examples)
    print("=" * 60)

    if failures:
        print(f"⚠️  {len(failures)} check(s) failed")
        sys.exit(1)
    print("🎉 All checks passed")


if __name__ == "__main__":
    main()
