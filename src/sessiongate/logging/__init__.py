"""
sessiongate logging package.

- formatters: Log formatting (JSON, console, rich)
- manager: Centralized logging setup
- context: Entry/success/failure logging around an operation
"""

from .context import LoggingConfiguration, LoggingContext
from .formatters import StructuredFormatter, create_console_formatter, create_rich_handler
from .manager import LoggingManager, configure_logging, logging_manager

__all__ = [
    "LoggingManager",
    "configure_logging",
    "logging_manager",
    "LoggingContext",
    "LoggingConfiguration",
    "StructuredFormatter",
    "create_console_formatter",
    "create_rich_handler",
]
