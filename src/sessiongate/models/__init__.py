"""Result and payload models."""

from .payloads import LoginRequest, ProcessParams, ProcessRequest
from .result import ApiErr, ApiOk, ApiResult, ErrorInfo

__all__ = [
    "ApiOk",
    "ApiErr",
    "ApiResult",
    "ErrorInfo",
    "LoginRequest",
    "ProcessRequest",
    "ProcessParams",
]
