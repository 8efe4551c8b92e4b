"""HTTP transport and result normalization."""

from .client import HttpClient
from .normalizer import normalize_error, normalize_response, parse_body, raise_for_non_success

__all__ = [
    "HttpClient",
    "normalize_error",
    "normalize_response",
    "parse_body",
    "raise_for_non_success",
]
