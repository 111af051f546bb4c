"""Tests for the start-up formula self-checks"""

from unittest.mock import Mock, patch

import pytest
from dreamcalc_app.config.defaults import SelfTestParams
from dreamcalc_app.logging.config import configure_logging, log_self_test_result
from dreamcalc_app.models.plans import SelfTestReport, SelfTestResult
from dreamcalc_app.selftest.suite import SELF_CHECKS, nearly_equal, run_self_tests


class TestSelfTestSuite:
    """Test the self-check battery"""

    def test_all_checks_pass(self):
        report = run_self_tests()
        assert report.total_count == 4
        assert report.passed_count == 4
        assert report.all_passed
        assert report.failures() == []

    def test_check_names(self):
        names = [r.name for r in run_self_tests().results]
        assert names == [
            "goal(no interest) 1200 / 12 = 100",
            "goal(interest) invert to payment≈100",
            "FV no interest: 100*12 = 1200",
            "FV with interest (annuity-due)",
        ]

    def test_reported_values_are_rounded(self):
        results = run_self_tests().results
        assert results[0].expected == 100
        assert results[0].actual == 100
        assert results[2].actual == 1200
        assert results[3].actual == results[3].expected

    def test_every_check_runs_once(self):
        assert len(SELF_CHECKS) == run_self_tests().total_count

    def test_broken_engine_reports_failure_without_raising(self):
        """Test a wrong engine shows up as a failed row"""
        with patch("dreamcalc_app.selftest.suite.compute_required_payment", return_value=99.0):
            report = run_self_tests()
        assert report.passed_count == 2
        assert not report.all_passed
        assert [r.name for r in report.failures()][0].startswith("goal(no interest)")

    def test_tolerances_from_params(self):
        """Test tighter-than-float tolerances can make compounding checks fail"""
        report = run_self_tests(SelfTestParams(plain_eps=1e-6, compound_eps=-1.0))
        assert report.passed_count == 2


class TestNearlyEqual:
    """Test the tolerance helper"""

    def test_default_epsilon(self):
        assert nearly_equal(1.0, 1.0 + 1e-7)
        assert not nearly_equal(1.0, 1.0 + 1e-5)

    def test_custom_epsilon(self):
        assert nearly_equal(100.0, 100.00005, 1e-4)


class TestSelfTestReport:
    """Test report aggregation"""

    def test_counts(self):
        report = SelfTestReport(results=(
            SelfTestResult(name="a", passed=True, expected=1, actual=1),
            SelfTestResult(name="b", passed=False, expected=1, actual=2),
        ))
        assert report.passed_count == 1
        assert report.total_count == 2
        assert not report.all_passed


class TestSelfTestLogging:
    """Test structured logging of self-check results"""

    def setup_method(self):
        configure_logging(level="DEBUG", format_json=True)
        self.logger = Mock()
        self.logger.bind.return_value = self.logger

    def test_pass_logged_as_info(self):
        result = SelfTestResult(name="check", passed=True, expected=1.0, actual=1.0)
        log_self_test_result(self.logger, result)

        kwargs = self.logger.bind.call_args.kwargs
        assert kwargs["check_name"] == "check"
        assert kwargs["check_result"] == "PASS"
        self.logger.info.assert_called_once_with("Self-check passed")
        self.logger.warning.assert_not_called()

    def test_failure_logged_as_warning(self):
        result = SelfTestResult(name="check", passed=False, expected=1.0, actual=2.0)
        log_self_test_result(self.logger, result, context={"source": "test"})

        self.logger.warning.assert_called_once_with("Self-check failed")
        self.logger.info.assert_not_called()
        self.logger.bind.assert_any_call(context={"source": "test"})
