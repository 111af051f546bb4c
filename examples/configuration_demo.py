#!/usr/bin/env python3
"""
Configuration Demo - DreamCalc Engine

This script demonstrates the configuration system of the dream calculators,
showing how to:
- Inspect the default configuration
- Use 3-tier configuration precedence
- Edit exchange rates between calculations
- Switch from clamping to strict range checking
- Validate configuration parameters

Run: python examples/configuration_demo.py
"""

import tempfile
from pathlib import Path

from dreamcalc_app.config.defaults import get_default_config
from dreamcalc_app.config.loader import ConfigLoader
from dreamcalc_app.config.validation import ConfigValidator
from dreamcalc_app.engine import DreamCalculatorEngine
from dreamcalc_app.errors import ConfigurationError, InvalidRangeError
from dreamcalc_app.logging.config import configure_logging
from dreamcalc_app.utils.formatting import format_money


def demonstrate_default_config():
    """Show the default configuration structure."""
    print("⚙️ DEFAULT CONFIGURATION")
    print("=" * 50)

    config = get_default_config()
    print(f"1. Term years: {config.limits.min_term_years}..{config.limits.max_term_years}")
    print(f"2. Pivot currency: {config.currency.pivot}")
    print("3. Exchange rates:")
    for code, rate in config.currency.rates.items():
        print(f"   {code}: {rate}")
    print()


def demonstrate_precedence():
    """Show defaults < calculator.yaml < per-call overrides."""
    print("📚 CONFIGURATION PRECEDENCE")
    print("=" * 50)

    with tempfile.TemporaryDirectory() as tmp:
        config_dir = Path(tmp)
        (config_dir / "calculator.yaml").write_text(
            "currency:\n"
            "  display_currency: EUR\n"
            "  rates:\n"
            "    EUR: 0.9\n"
        )
        loader = ConfigLoader.create(config_dir)

        from_file = loader.merge_config()
        print(f"1. From file : EUR rate {from_file['currency']['rates']['EUR']}, "
              f"display {from_file['currency']['display_currency']}")

        overridden = loader.merge_config({"currency": {"rates": {"EUR": 0.95}}})
        print(f"2. Overridden: EUR rate {overridden['currency']['rates']['EUR']}")
    print()


def demonstrate_rate_edits():
    """Show a user editing an exchange rate between calculations."""
    print("💱 EXCHANGE RATE EDITS")
    print("=" * 50)

    engine = DreamCalculatorEngine()
    form = {"target_amount": 1200, "annual_rate_pct": 0, "term_years": 1, "compounding": False}

    before = engine.plan_dream(form, display_currency="EUR")
    engine.set_exchange_rate("EUR", 1.1)
    after = engine.plan_dream(form, display_currency="EUR")

    print(f"1. Monthly deposit before edit: {format_money(before.payment_per_period, 'EUR', decimals=2)}")
    print(f"2. Monthly deposit after edit : {format_money(after.payment_per_period, 'EUR', decimals=2)}")
    print()


def demonstrate_strict_ranges():
    """Show clamping versus strict range checking."""
    print("📏 RANGE HANDLING")
    print("=" * 50)

    form = {"amount_per_period": 10, "annual_rate_pct": 5, "term_years": 80}

    projection = DreamCalculatorEngine().project_savings(form)
    print(f"1. Clamping: 80 years becomes {projection.plan.term_years}")

    strict = DreamCalculatorEngine(overrides={"limits": {"strict_ranges": True}})
    try:
        strict.project_savings(form)
    except InvalidRangeError as e:
        print(f"2. Strict  : rejected ({e})")
    print()


def demonstrate_config_validation():
    """Show configuration validation."""
    print("✅ CONFIGURATION VALIDATION")
    print("=" * 50)

    invalid = {"currency": {"pivot": "USD", "rates": {"USD": 1.0, "EUR": -0.5}}}
    for error in ConfigValidator.validate_config(invalid):
        print(f"1. {error.field}: {error.message} (value: {error.value})")

    try:
        DreamCalculatorEngine(overrides=invalid)
    except ConfigurationError as e:
        print(f"2. Engine refused to start: {e} ({len(e.errors)} error)")
    print()


def main():
    configure_logging(level="WARNING")

    demonstrate_default_config()
    demonstrate_precedence()
    demonstrate_rate_edits()
    demonstrate_strict_ranges()
    demonstrate_config_validation()


if __name__ == "__main__":
    main()
