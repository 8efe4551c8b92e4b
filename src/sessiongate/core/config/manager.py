"""
Configuration manager for sessiongate.

Loads the TOML configuration file, applies ``SESSIONGATE_*`` environment
overrides and validates the result into a ``SessionGateConfig``.
"""

import sys
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import ValidationError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from ...exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)
from .models import SessionGateConfig, SessionGateSettings


def default_config_file() -> Path:
    return Path.home() / ".config" / "sessiongate" / "config.toml"


class ConfigManager:
    """Load and cache the sessiongate configuration."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_file: Path to custom config file. If None, uses default location.
        """
        self.config_file = Path(config_file) if config_file else default_config_file()
        self._config: Optional[SessionGateConfig] = None

    def load_config(self) -> SessionGateConfig:
        """Load and validate configuration from file and environment."""
        if self._config is not None:
            return self._config

        config_data: Dict[str, Any] = {}
        if self.config_file.exists():
            config_data = self._load_toml_file()

        config_data = self._apply_env_overrides(config_data)

        try:
            self._config = SessionGateConfig(**config_data)
        except ValidationError as e:
            errors = [
                f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
                for err in e.errors()
            ]
            raise ConfigurationValidationError(errors) from e

        return self._config

    def reload(self) -> SessionGateConfig:
        self._config = None
        return self.load_config()

    def _load_toml_file(self) -> Dict[str, Any]:
        """Load configuration from TOML file."""
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file),
                f"Invalid TOML syntax: {e}",
                "valid TOML format",
            ) from e
        except OSError as e:
            raise InvalidConfigurationError(
                str(self.config_file),
                f"Unable to read file: {e}",
                "a readable configuration file",
            ) from e

    def _apply_env_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply environment variable overrides to configuration."""
        settings = SessionGateSettings()

        client = config_data.setdefault("client", {})
        logging_config = config_data.setdefault("logging", {})

        if settings.base_url:
            client["base_url"] = settings.base_url
        if settings.timeout is not None:
            client["timeout"] = settings.timeout
        if settings.verify_ssl is not None:
            client["verify_ssl"] = settings.verify_ssl

        if settings.log_level:
            logging_config["level"] = settings.log_level.upper()
        if settings.log_format:
            logging_config["format"] = settings.log_format
        if settings.log_file:
            logging_config["file_path"] = settings.log_file
            outputs = list(logging_config.get("output", ["console"]))
            if "file" not in outputs:
                outputs.append("file")
            logging_config["output"] = outputs

        return config_data
