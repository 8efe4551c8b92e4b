"""
sessiongate exception hierarchy.

Exception Hierarchy:
    SessionGateError (base)
    ├── CsrfMissingError
    └── ConfigurationError
        ├── InvalidConfigurationError
        └── ConfigurationValidationError

Transport failures are not wrapped: they surface as ``requests`` exceptions
and are normalized into ``ErrorInfo`` data by the request pipeline.
"""

from .base import ExceptionContext, SessionGateError
from .client import CsrfMissingError
from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .templates import ErrorCodes, ErrorMessageTemplates

__all__ = [
    "SessionGateError",
    "ExceptionContext",
    "CsrfMissingError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    "ErrorCodes",
    "ErrorMessageTemplates",
]
