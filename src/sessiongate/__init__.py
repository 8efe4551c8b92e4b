"""
sessiongate: CSRF-aware HTTP client for session-cookie backends.

Architecture Overview:
- Services: AuthenticatedApiClient, the request pipeline and public operations
- Infrastructure: HTTP transport, CSRF token manager, result normalization
- Models: ApiResult (ApiOk / ApiErr) and request payload shapes
- Core: Configuration and log sanitization
- CLI: Command-line front end
"""

__version__ = "0.1.0"

from .exceptions import CsrfMissingError, SessionGateError
from .infrastructure.auth import CsrfTokenManager
from .infrastructure.http import HttpClient, normalize_error, normalize_response
from .models import ApiErr, ApiOk, ApiResult, ErrorInfo
from .services import AuthenticatedApiClient

__all__ = [
    "AuthenticatedApiClient",
    "CsrfTokenManager",
    "HttpClient",
    "normalize_error",
    "normalize_response",
    "ApiOk",
    "ApiErr",
    "ApiResult",
    "ErrorInfo",
    "SessionGateError",
    "CsrfMissingError",
]
