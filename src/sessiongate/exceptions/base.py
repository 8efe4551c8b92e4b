"""
Base exception classes for sessiongate.

Provides the foundational SessionGateError class that all other exceptions
inherit from. Unlike transport exceptions, these errors know how to render
themselves as ``ErrorInfo`` data, which is what the request pipeline hands
back to callers.
"""

import uuid
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class ExceptionContext:
    """Context information for sessiongate exceptions."""

    help_text: Optional[str] = None
    error_code: Optional[str] = None
    context: Dict[str, Any] = field(default_factory=dict)
    correlation_id: Optional[str] = None


class SessionGateError(Exception):
    """Base exception for all sessiongate errors.

    Attributes:
        message: The error message, reported as ``msg`` in error info
        help_text: Optional actionable guidance, shown by the CLI only
        error_code: Reported as ``code``; defaults to the class name
        correlation_id: Short ID printed with the error so CLI output can be matched to logs
        context: Extra fields, reported as ``details``
    """

    def __init__(self, message: str, context: Optional[ExceptionContext] = None):
        context = context or ExceptionContext()
        self.message = message
        self.help_text = context.help_text
        self.error_code = context.error_code
        self.context = context.context
        self.correlation_id = context.correlation_id or str(uuid.uuid4())[:8]
        super().__init__(message)

    def __str__(self) -> str:
        result = self.message

        if self.help_text:
            result += f"\n\nHelp: {self.help_text}"

        if self.context:
            context_items = [
                f"{k}: {v}" for k, v in self.context.items() if v is not None
            ]
            if context_items:
                result += f"\n\nContext: {', '.join(context_items)}"

        result += f"\n\nError ID: {self.correlation_id}"
        return result

    @property
    def code(self) -> str:
        return self.error_code or self.__class__.__name__

    @property
    def msg(self) -> str:
        return self.message

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.code,
            "correlation_id": self.correlation_id,
            "context": self.context,
            "help_text": self.help_text,
        }

    def to_error_info(self) -> Dict[str, Any]:
        """Render this error as an ``ErrorInfo`` mapping."""
        info: Dict[str, Any] = {"code": self.code, "msg": self.msg}
        if self.context:
            info["details"] = dict(self.context)
        return info
