#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dreamcalc_app.config.loader import ConfigLoader
from dreamcalc_app.config.validation import ConfigValidator, ValidationError


def validate_merged_config(overrides=None) -> List[ValidationError]:
    """Validate the merged configuration with optional overrides."""
    loader = ConfigLoader.create()
    config = loader.merge_config(overrides)
    return ConfigValidator.validate_config(config)


def main():
    """Main validation function."""
    print("🔍 Validating DreamCalc configuration...")

    loader = ConfigLoader.create()
    print(f"📁 Config directory: {loader.config_dir}")

    all_valid = True

    print("\n📊 Validating calculator.yaml on top of defaults...")
    try:
        errors = validate_merged_config()

        if errors:
            print(f"❌ Found {len(errors)} validation errors:")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print("✅ Configuration is valid")

    except Exception as e:
        print(f"❌ Error validating configuration: {e}")
        all_valid = False

    # Test a typical user edit of the exchange rates
    print("\n💱 Testing exchange-rate overrides...")
    test_overrides = {
        "currency": {
            "display_currency": "EUR",
            "rates": {"EUR": 0.95},
        }
    }

    try:
        errors = validate_merged_config(test_overrides)

        if errors:
            print("❌ Exchange-rate override validation failed:")
            for error in errors:
                print(f"  • {error.field}: {error.message}")
            all_valid = False
        else:
            print("✅ Exchange-rate override validation passed")

    except Exception as e:
        print(f"❌ Error testing overrides: {e}")
        all_valid = False

    if all_valid:
        print("\n🎉 All configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
