"""
Client-side protocol exceptions.

These are raised inside the request pipeline and converted into ``ErrorInfo``
data by the error normalizer; they never reach callers of the public
operations.
"""

from typing import Any, Dict, Iterable

from .base import ExceptionContext, SessionGateError
from .templates import ErrorCodes, ErrorMessageTemplates


class CsrfMissingError(SessionGateError):
    """Raised when a 2xx CSRF response carries no recognized token field.

    This is a contract violation by the backend, not a transport failure.
    The parsed body (or raw text) is kept in ``raw`` for diagnosis.
    """

    def __init__(self, raw: Any, path: str = "/csrf", fields: Iterable[str] = ("csrfToken", "token")):
        self.raw = raw
        self.path = path
        field_list = "/".join(fields)
        message = ErrorMessageTemplates.CSRF_MISSING.format(path=path, fields=field_list)
        context = ExceptionContext(
            error_code=ErrorCodes.CSRF_MISSING,
            help_text=f"Check that the backend's {path} endpoint returns one of: {field_list}",
            context={"path": path},
        )
        super().__init__(message, context)

    def to_error_info(self) -> Dict[str, Any]:
        return {"code": self.code, "msg": self.msg, "raw": self.raw}
