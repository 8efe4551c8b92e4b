"""
Configuration models for sessiongate.

This module defines Pydantic-based configuration models that provide
validation, type safety, and documentation for the client and logging
configuration, plus the environment-backed settings used for overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sessiongate.constants import (
    CSRF_ENDPOINT,
    CSRF_HEADER,
    CSRF_TOKEN_FIELDS,
    DEFAULT_BASE_URL,
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_FILE_SIZE_BYTES,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    MAX_TIMEOUT_SECONDS,
    MIN_LOG_FILE_SIZE_BYTES,
)


class LogLevel(str, Enum):
    """Valid logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ClientConfig(BaseModel):
    """Backend connection and CSRF protocol settings."""

    base_url: str = Field(DEFAULT_BASE_URL, description="Backend origin (or dev proxy) all paths are relative to")
    timeout: float = Field(
        DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        le=MAX_TIMEOUT_SECONDS,
        description="Request timeout in seconds",
    )
    verify_ssl: bool = Field(True, description="Verify TLS certificates")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent header sent on every request")
    csrf_path: str = Field(CSRF_ENDPOINT, description="Endpoint issuing the CSRF token")
    csrf_header: str = Field(CSRF_HEADER, description="Header the token is echoed in")
    token_fields: List[str] = Field(
        default_factory=lambda: list(CSRF_TOKEN_FIELDS),
        min_length=1,
        description="Response fields holding the token, in order of preference",
    )
    csrf_reset_statuses: List[int] = Field(
        default_factory=list,
        description="POST statuses that clear the cached token for the next call",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("csrf_path")
    @classmethod
    def validate_csrf_path(cls, v: str) -> str:
        if not v.startswith("/"):
            return "/" + v
        return v

    @field_validator("csrf_reset_statuses")
    @classmethod
    def validate_statuses(cls, v: List[int]) -> List[int]:
        for status in v:
            if not 400 <= status <= 599:
                raise ValueError(f"csrf_reset_statuses entries must be 4xx/5xx codes, got {status}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Logging level")
    format: str = Field("console", description="Log format: console, json, rich")
    output: List[str] = Field(["console"], description="Log outputs: console, file")
    file_path: Optional[Path] = Field(None, description="Log file path")
    max_file_size: int = Field(
        DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=MIN_LOG_FILE_SIZE_BYTES,
        description="Maximum log file size in bytes",
    )
    backup_count: int = Field(
        DEFAULT_LOG_BACKUP_COUNT,
        ge=1,
        le=20,
        description="Number of backup log files to keep",
    )

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ["console", "json", "rich"]:
            raise ValueError("format must be one of: console, json, rich")
        return v

    @field_validator("output")
    @classmethod
    def validate_output(cls, v: List[str]) -> List[str]:
        for output in v:
            if output not in ["console", "file"]:
                raise ValueError("output entries must be one of: console, file")
        return v


class SessionGateConfig(BaseModel):
    """Complete sessiongate configuration."""

    client: ClientConfig = Field(default_factory=ClientConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class SessionGateSettings(BaseSettings):
    """Environment variable overrides, read with the ``SESSIONGATE_`` prefix."""

    model_config = SettingsConfigDict(
        env_prefix="SESSIONGATE_",
        case_sensitive=False,
        extra="ignore",
    )

    base_url: Optional[str] = None
    timeout: Optional[float] = None
    verify_ssl: Optional[bool] = None
    log_level: Optional[str] = None
    log_format: Optional[str] = None
    log_file: Optional[Path] = None
