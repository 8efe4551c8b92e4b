"""
Logging context management.

``LoggingContext`` wraps an operation with entry, success and failure
messages so call sites stay free of repetitive log statements.
"""

import logging
from dataclasses import dataclass
from typing import Optional


@dataclass
class LoggingConfiguration:
    """Configuration for LoggingContext."""
    entry_msg: Optional[str] = None
    success_msg: Optional[str] = None
    failure_msg: Optional[str] = None
    exit_msg: Optional[str] = None
    logger: Optional[logging.Logger] = None
    entry_level: int = logging.DEBUG
    exit_level: int = logging.DEBUG
    success_level: int = logging.INFO
    failure_level: int = logging.ERROR


class LoggingContext:

    def __init__(self, config: Optional[LoggingConfiguration] = None):
        config = config or LoggingConfiguration()
        self.entry_msg = config.entry_msg
        self.success_msg = config.success_msg
        self.failure_msg = config.failure_msg
        self.exit_msg = config.exit_msg
        self.logger = config.logger or logging.getLogger(__name__)
        self.entry_level = config.entry_level
        self.exit_level = config.exit_level
        self.success_level = config.success_level
        self.failure_level = config.failure_level

    def __enter__(self):
        self.log(self.entry_msg, level=self.entry_level)
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        if exc_type is None:
            self.log(self.success_msg, level=self.success_level)
        else:
            self.log(self.failure_msg, level=self.failure_level)

        self.log(self.exit_msg, level=self.exit_level)

    def log(self, message, level=logging.INFO):
        if message:
            self.logger.log(level, message)
