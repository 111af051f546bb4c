"""
Centralized logging configuration for the DreamCalc calculators.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the package should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger

from ..models.plans import SelfTestResult


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_selftest_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound to the self-test subsystem.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for formula self-checks
    """
    return get_logger(name).bind(subsystem="selftest")


def log_self_test_result(
    logger: FilteringBoundLogger,
    result: SelfTestResult,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of one analytic self-check with standardized format.

    Args:
        logger: Structlog logger instance
        result: Outcome of the check
        context: Additional context data
    """
    bound_logger = logger.bind(
        check_name=result.name,
        check_result="PASS" if result.passed else "FAIL",
        expected=result.expected,
        actual=result.actual,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if result.passed:
        bound_logger.info("Self-check passed")
    else:
        bound_logger.warning("Self-check failed")
