"""
Uniform result shape returned by every public client operation.

An ``ApiResult`` is either ``ApiOk`` (carrying the parsed payload) or
``ApiErr`` (carrying an ``ErrorInfo`` mapping). Callers branch on ``ok``
instead of catching exceptions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Union

# Backend-supplied error bodies are passed through untouched, so ErrorInfo
# stays a plain mapping rather than a model with a fixed schema.
ErrorInfo = Dict[str, Any]


@dataclass(frozen=True)
class ApiOk:
    """Successful outcome: ``data`` is the parsed response payload."""

    data: Any
    ok: bool = field(default=True, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": True, "data": self.data}


@dataclass(frozen=True)
class ApiErr:
    """Failed outcome: ``error`` is an ErrorInfo mapping (``code``, ``msg``, ...)."""

    error: ErrorInfo
    ok: bool = field(default=False, init=False)

    @property
    def code(self) -> Any:
        return self.error.get("code")

    @property
    def msg(self) -> Any:
        return self.error.get("msg")

    def to_dict(self) -> Dict[str, Any]:
        return {"ok": False, "error": self.error}


ApiResult = Union[ApiOk, ApiErr]
