"""
Logging configuration and utilities for the DreamCalc calculators.
"""
from .config import configure_logging, get_logger, get_selftest_logger, log_self_test_result

__all__ = ["configure_logging", "get_logger", "get_selftest_logger", "log_self_test_result"]
