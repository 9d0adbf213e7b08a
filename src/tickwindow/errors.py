"""
Exception hierarchy for tickwindow.

Only construction can fail: update operations are total over the float
domain and let NaN/inf propagate instead of raising.

Hierarchy:
    IndicatorError
    └── InvalidParameterError (also a ValueError)
    RegistryError
    ├── ComponentNotFoundError
    ├── DuplicateComponentError
    └── InvalidComponentError
    ConfigError
"""

from typing import Any


class IndicatorError(Exception):
    """Base exception for indicator errors."""

    def __init__(self, message: str, indicator_name: str | None = None):
        self.indicator_name = indicator_name
        if indicator_name:
            message = f"[{indicator_name}] {message}"
        super().__init__(message)


class InvalidParameterError(IndicatorError, ValueError):
    """
    Invalid indicator parameter.

    Raised at construction time when the window length is not positive.

    Attributes:
        parameter_name: Name of the offending parameter (e.g. "length")
        value: Value that was rejected
        expected: Human-readable description of valid values
    """

    def __init__(self, parameter_name: str, value: Any, expected: str, indicator_name: str | None = None):
        message = f"Invalid parameter '{parameter_name}': got {value}, expected {expected}"
        super().__init__(message, indicator_name)
        self.parameter_name = parameter_name
        self.value = value
        self.expected = expected


class RegistryError(Exception):
    """Base exception for registry errors."""

    pass


class ComponentNotFoundError(RegistryError):
    """Component not found in registry."""

    pass


class DuplicateComponentError(RegistryError):
    """Component already registered with this name."""

    pass


class InvalidComponentError(RegistryError):
    """Component does not inherit from BaseIndicator."""

    pass


class ConfigError(Exception):
    """System configuration could not be loaded or validated."""

    pass
