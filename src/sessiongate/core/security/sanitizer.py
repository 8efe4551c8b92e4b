"""
Sensitive data sanitization for log output.

Request bodies and headers are logged at DEBUG level; everything passes
through this module first so that passwords, session cookies and the CSRF
token never reach a log handler.
"""

from typing import Any, Dict, Set


class SensitiveDataSanitizer:
    """Sanitize sensitive data from payloads and headers."""

    # Sensitive keys that should be redacted in payloads
    SENSITIVE_PAYLOAD_KEYS: Set[str] = {
        "password",
        "passwd",
        "pwd",
        "username",
        "email",
        "token",
        "csrf",
        "xsrf",
        "secret",
        "authorization",
        "session",
        "cookie",
    }

    # Sensitive headers that should be redacted
    SENSITIVE_HEADER_KEYS: Set[str] = {
        "authorization",
        "cookie",
        "set-cookie",
        "x-csrf-token",
        "x-xsrf-token",
        "proxy-authorization",
    }

    @classmethod
    def sanitize_payload(cls, payload: Any) -> Any:
        """Return a copy of ``payload`` with sensitive fields redacted.

        Non-mapping payloads (strings, numbers, None) are returned as-is.
        """
        if isinstance(payload, list):
            return [cls.sanitize_payload(item) for item in payload]
        if not isinstance(payload, dict):
            return payload

        sanitized = {}

        for key, value in payload.items():
            key_lower = str(key).lower()

            if any(sensitive in key_lower for sensitive in cls.SENSITIVE_PAYLOAD_KEYS):
                # Replace with redacted placeholder showing length
                if isinstance(value, str):
                    sanitized[key] = f"[REDACTED_{len(value)}_CHARS]"
                elif isinstance(value, (int, float)):
                    sanitized[key] = "[REDACTED_NUMBER]"
                else:
                    sanitized[key] = "[REDACTED]"
            elif isinstance(value, (dict, list)):
                sanitized[key] = cls.sanitize_payload(value)
            else:
                sanitized[key] = value

        return sanitized

    @classmethod
    def sanitize_headers(cls, headers: Dict[str, str]) -> Dict[str, str]:
        """Return a copy of ``headers`` with sensitive values redacted."""
        if not isinstance(headers, dict):
            return headers

        return {
            key: "[REDACTED]" if key.lower() in cls.SENSITIVE_HEADER_KEYS else value
            for key, value in headers.items()
        }


def mask_credential(credential: str, visible_chars: int = 4) -> str:
    """Mask credential for display/logging purposes.

    Args:
        credential: Credential to mask
        visible_chars: Number of characters to show at the end

    Returns:
        Masked credential string
    """
    if not credential:
        return "[empty]"

    if len(credential) <= visible_chars:
        return "*" * len(credential)

    return "*" * (len(credential) - visible_chars) + credential[-visible_chars:]
