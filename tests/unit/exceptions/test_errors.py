"""
Tests for the sessiongate exception hierarchy.
"""

import pytest

from sessiongate.exceptions import (
    ConfigurationError,
    ConfigurationValidationError,
    CsrfMissingError,
    ErrorCodes,
    ExceptionContext,
    InvalidConfigurationError,
    SessionGateError,
)


@pytest.mark.unit
class TestSessionGateError:

    def test_basic(self):
        """Test base error defaults."""
        error = SessionGateError("boom")

        assert error.message == "boom"
        assert error.code == "SessionGateError"
        assert len(error.correlation_id) == 8
        assert "Error ID" in str(error)

    def test_context(self):
        """Test explicit exception context."""
        context = ExceptionContext(help_text="try again", error_code="E1", context={"path": "/x"})
        error = SessionGateError("boom", context)

        assert error.code == "E1"
        assert "Help: try again" in str(error)
        assert "path: /x" in str(error)
        assert error.to_error_info() == {"code": "E1", "msg": "boom", "details": {"path": "/x"}}

    def test_to_dict(self):
        """Test dictionary serialization."""
        data = SessionGateError("boom").to_dict()

        assert data["error_type"] == "SessionGateError"
        assert data["message"] == "boom"
        assert data["error_code"] == "SessionGateError"


@pytest.mark.unit
class TestCsrfMissingError:

    def test_error_info(self):
        """Test error info."""
        error = CsrfMissingError({}, path="/csrf")

        assert error.to_error_info() == {
            "code": ErrorCodes.CSRF_MISSING,
            "msg": "CSRF token missing from /csrf response (expected csrfToken/token)",
            "raw": {},
        }

    def test_custom_fields_in_message(self):
        """Test custom fields in message."""
        error = CsrfMissingError(None, path="/auth/xsrf", fields=["xsrf"])

        assert error.msg == "CSRF token missing from /auth/xsrf response (expected xsrf)"

    def test_is_session_gate_error(self):
        """Test every error derives from SessionGateError."""
        assert isinstance(CsrfMissingError({}), SessionGateError)


@pytest.mark.unit
class TestConfigurationErrors:

    def test_invalid_configuration(self):
        """Test invalid configuration."""
        error = InvalidConfigurationError("config.toml", "bad", "valid TOML format")

        assert isinstance(error, ConfigurationError)
        assert error.code == "CONFIG_INVALID"
        assert "config.toml" in error.message

    def test_validation_error_lists_errors(self):
        """Test validation error lists errors."""
        error = ConfigurationValidationError(["client.timeout: too small", "logging.format: bad"])

        assert "client.timeout: too small" in error.message
        assert "logging.format: bad" in error.message
        assert error.errors == ["client.timeout: too small", "logging.format: bad"]
