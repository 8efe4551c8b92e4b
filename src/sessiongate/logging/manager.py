"""
Centralized logging setup.

Installs handlers on the root logger according to a ``LoggingConfig``.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import List

from sessiongate.core.config.models import LoggingConfig

from .formatters import (
    StructuredFormatter,
    create_console_formatter,
    create_rich_handler,
)

DEFAULT_LOG_FILE = Path("logs/sessiongate.log")


class LoggingManager:
    """Centralized logging configuration and management."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self.config = None
            self.handlers: List[logging.Handler] = []
            self._initialized = True

    def configure(self, config: LoggingConfig, version: str = "unknown"):
        """Configure the logging system."""
        self.config = config
        level = getattr(logging, config.level.value)

        root_logger = logging.getLogger()
        for handler in self.handlers:
            root_logger.removeHandler(handler)
            handler.close()
        self.handlers.clear()

        root_logger.setLevel(level)

        for output in config.output:
            if output == "console":
                self._add_console_handler(config, version)
            elif output == "file":
                self._add_file_handler(config, version)

        logging.getLogger("sessiongate").setLevel(level)
        # urllib3 connection chatter drowns the client's own DEBUG lines
        logging.getLogger("urllib3").setLevel(max(level, logging.INFO))

    def _add_console_handler(self, config: LoggingConfig, version: str):
        """Add console handler."""
        if config.format == "rich":
            handler = create_rich_handler()
            handler.setFormatter(logging.Formatter("%(message)s"))
        elif config.format == "json":
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(StructuredFormatter(version=version))
        else:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(create_console_formatter())

        self._install(handler, config)

    def _add_file_handler(self, config: LoggingConfig, version: str):
        """Add file handler with rotation."""
        file_path = config.file_path or DEFAULT_LOG_FILE
        file_path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            file_path,
            maxBytes=config.max_file_size,
            backupCount=config.backup_count,
        )

        if config.format == "json":
            handler.setFormatter(StructuredFormatter(version=version))
        else:
            handler.setFormatter(create_console_formatter())

        self._install(handler, config)

    def _install(self, handler: logging.Handler, config: LoggingConfig):
        handler.setLevel(getattr(logging, config.level.value))
        logging.getLogger().addHandler(handler)
        self.handlers.append(handler)


# Global logging manager instance
logging_manager = LoggingManager()


def configure_logging(config: LoggingConfig, version: str = "unknown"):
    """Configure the global logging system."""
    logging_manager.configure(config, version)
