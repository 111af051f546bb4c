"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that the user cannot fix by editing
a form: broken configuration or an arithmetic fault inside the engine.
"""

from typing import Any, Dict, Optional


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Loaded configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class CalculationError(SystemFailureError):
    """Arithmetic fault while evaluating a plan."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 calculation_input: Optional[Dict[str, Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.calculation_input = calculation_input
