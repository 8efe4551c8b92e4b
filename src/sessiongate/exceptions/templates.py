"""
Standardized error codes and message templates.

Error codes double as the ``code`` field of synthesized ``ErrorInfo``
mappings, so callers can branch on them without parsing messages.
"""


class ErrorCodes:
    """Standard error codes for programmatic handling."""

    CSRF_MISSING = "CsrfMissing"
    NETWORK_OR_UNKNOWN = "NetworkOrUnknown"

    CONFIG_INVALID = "CONFIG_INVALID"
    CONFIG_VALIDATION = "CONFIG_VALIDATION"


class ErrorMessageTemplates:
    """Message templates for consistent wording across the client."""

    CSRF_MISSING = (
        "CSRF token missing from {path} response (expected {fields})"
    )
    NETWORK_ERROR = (
        "Network error (status 0). Check: backend running, proxy enabled, correct port."
    )
    REQUEST_FAILED = "Request failed"

    CONFIG_INVALID = "Invalid configuration for '{field}': got {value!r}, expected {expected}"
