"""
Configuration management for sessiongate.

Usage:
    from sessiongate.core.config import ConfigManager

    config = ConfigManager().load_config()
    client = AuthenticatedApiClient.from_config(config.client)
"""

from ...exceptions.config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .manager import ConfigManager, default_config_file
from .models import (
    ClientConfig,
    LoggingConfig,
    LogLevel,
    SessionGateConfig,
    SessionGateSettings,
)

__all__ = [
    "SessionGateConfig",
    "ClientConfig",
    "LoggingConfig",
    "LogLevel",
    "SessionGateSettings",
    "ConfigManager",
    "default_config_file",
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
]
