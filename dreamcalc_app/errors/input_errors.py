"""
Input error classifications for calculator form data.

These exceptions categorize problems with raw user input before it reaches
the finance engine. They are recoverable: the caller can ask for new input.
"""

from typing import Any, Dict, Optional


class InputError(Exception):
    """Base class for user input issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class MissingInputError(InputError):
    """A required form field was not supplied."""

    def __init__(self, message: str, field_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name


class MalformedInputError(InputError):
    """A form field is present but cannot be interpreted."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 raw_value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.raw_value = raw_value


class InvalidRangeError(InputError):
    """A value lies outside its documented bounds (strict mode only)."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 value: Optional[float] = None, minimum: Optional[float] = None,
                 maximum: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.field_name = field_name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
