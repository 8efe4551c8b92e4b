"""
Configuration-related exceptions.

All exceptions related to configuration parsing and validation.
"""

from typing import Any, List

from .base import ExceptionContext, SessionGateError
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(SessionGateError):
    """Base class for configuration-related errors."""
    pass


class InvalidConfigurationError(ConfigurationError):
    """Raised when configuration contains invalid values."""

    def __init__(self, field: str, value: Any, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        message = ErrorMessageTemplates.CONFIG_INVALID.format(
            field=field, value=value, expected=expected
        )
        context = ExceptionContext(
            help_text=f"Please check the configuration for '{field}' and ensure it matches the expected format: {expected}",
            error_code=ErrorCodes.CONFIG_INVALID,
        )
        super().__init__(message, context)


class ConfigurationValidationError(ConfigurationError):
    """Raised when configuration validation fails."""

    def __init__(self, errors: List[str]):
        self.errors = errors
        message = "Configuration validation failed:"
        for error in errors:
            message += f"\n  - {error}"

        context = ExceptionContext(
            help_text="Please check your configuration file and fix the validation errors listed above",
            error_code=ErrorCodes.CONFIG_VALIDATION,
        )
        super().__init__(message, context)
