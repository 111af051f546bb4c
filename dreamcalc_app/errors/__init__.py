"""
Error classification for the dream calculators.

The finance engine itself never raises for numeric input; these exceptions
belong to the layers around it: form input normalization, configuration
loading and the coordinator.
"""

from .input_errors import (
    InputError,
    MissingInputError,
    MalformedInputError,
    InvalidRangeError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    CalculationError,
)

__all__ = [
    # Input Errors
    "InputError",
    "MissingInputError",
    "MalformedInputError",
    "InvalidRangeError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "CalculationError",
]
