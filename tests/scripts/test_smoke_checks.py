"""Tests for the end-to-end smoke check script"""

import runpy
from pathlib import Path
from unittest.mock import patch

import pytest
from dreamcalc_app.engine import DreamCalculatorEngine

SCRIPT = Path(__file__).resolve().parents[2] / "scripts" / "smoke_test.py"


@pytest.fixture
def smoke():
    return runpy.run_path(str(SCRIPT))


class TestSmokeChecks:
    """Test the smoke check battery"""

    def test_engine_checks_pass(self, smoke):
        assert smoke["run_checks"](include_examples=False) == []

    def test_examples_run(self, smoke):
        assert smoke["run_checks"](include_examples=True) == []

    def test_failing_self_check_is_reported(self, smoke):
        """Test a broken finance engine fails the smoke run instead of passing silently"""
        engine = DreamCalculatorEngine()
        with patch("dreamcalc_app.selftest.suite.compute_required_payment", return_value=99.0):
            failures = smoke["run_checks"](engine, include_examples=False)
        assert [name for name, _ in failures] == ["Self-checks"]

    def test_calculator_error_is_reported(self, smoke):
        engine = DreamCalculatorEngine()
        with patch.object(engine, "plan_dream", side_effect=ValueError("boom")):
            failures = smoke["run_checks"](engine, include_examples=False)
        assert failures == [("Dream plan", "boom")]
