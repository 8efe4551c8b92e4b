"""
Unit tests for response and error normalization.
"""

import pytest
import requests

from sessiongate.exceptions import CsrfMissingError, SessionGateError
from sessiongate.infrastructure.http import (
    normalize_error,
    normalize_response,
    parse_body,
    raise_for_non_success,
)
from sessiongate.models import ApiOk
from tests.conftest import BASE_URL, make_response


def http_error_for(response):
    """Raise and capture the HTTPError requests produces for ``response``."""
    with pytest.raises(requests.HTTPError) as exc_info:
        raise_for_non_success(response)
    return exc_info.value


@pytest.mark.unit
class TestParseBody:

    def test_json_body(self):
        """Test JSON body."""
        assert parse_body(make_response(200, {"a": [1, 2]})) == {"a": [1, 2]}

    def test_json_scalar_body(self):
        """Test JSON scalar body."""
        assert parse_body(make_response(200, "done")) == "done"

    def test_empty_body(self):
        """Test empty body."""
        assert parse_body(make_response(204)) is None

    def test_text_body(self):
        """Test text body."""
        assert parse_body(make_response(200, text="plain text")) == "plain text"


@pytest.mark.unit
class TestRaiseForNonSuccess:
    """Only 2xx responses count as success."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_passes(self, status):
        """Test 2xx statuses do not raise."""
        raise_for_non_success(make_response(status))

    @pytest.mark.parametrize("status", [101, 301, 302, 304, 400, 419, 500])
    def test_non_2xx_raises_http_error(self, status):
        """Test informational, redirect and error statuses raise HTTPError."""
        response = make_response(status, path="/login", method="POST")

        with pytest.raises(requests.HTTPError) as exc_info:
            raise_for_non_success(response)

        assert exc_info.value.response is response
        assert str(exc_info.value).startswith(f"{status} ")

    def test_reason_used_when_present(self):
        """Test the HTTP reason phrase appears in the message."""
        response = make_response(302, path="/csrf")
        response.reason = "Found"

        with pytest.raises(requests.HTTPError, match="302 Found for url: http://backend.test/csrf"):
            raise_for_non_success(response)


@pytest.mark.unit
class TestNormalizeResponse:

    def test_wraps_payload_unchanged(self):
        """Test wraps payload unchanged."""
        payload = {"user": {"id": 7}, "roles": ["admin"]}

        result = normalize_response(make_response(200, payload))

        assert result == ApiOk(payload)
        assert result.ok is True

    def test_no_shape_validation(self):
        """Test no shape validation."""
        result = normalize_response(make_response(200, [1, 2, 3]))

        assert result.data == [1, 2, 3]


@pytest.mark.unit
class TestNormalizeErrorBackendBody:
    """Tier 1: structured backend errors pass through verbatim."""

    def test_backend_error_passed_through(self):
        """Test backend error passed through."""
        body = {"code": "badCreds", "msg": "invalid"}
        exc = http_error_for(make_response(401, body, path="/login", method="POST"))

        assert normalize_error(exc) == body

    def test_backend_body_is_not_rewrapped(self):
        """Test backend body is not rewrapped."""
        body = {"error": "forbidden", "reason": "csrf mismatch"}
        exc = http_error_for(make_response(403, body))

        info = normalize_error(exc)

        assert info == body
        assert "code" not in info

    def test_empty_object_body_is_not_structured(self):
        """Test empty object body is not structured."""
        exc = http_error_for(make_response(500, {}, path="/toProcess"))

        info = normalize_error(exc)

        assert info["code"] == "NetworkOrUnknown"
        assert info["status"] == 500

    def test_text_body_is_not_structured(self):
        """Test text body is not structured."""
        exc = http_error_for(make_response(502, text="<html>Bad Gateway</html>", path="/login"))

        info = normalize_error(exc)

        assert info["code"] == "NetworkOrUnknown"
        assert info["status"] == 502
        assert info["url"] == BASE_URL + "/login"


@pytest.mark.unit
class TestNormalizeErrorInternal:
    """Tier 2: internal errors keep their own shape."""

    def test_csrf_missing_passed_through(self):
        """Test CSRF missing passed through."""
        exc = CsrfMissingError({"unexpected": True})

        info = normalize_error(exc)

        assert info["code"] == "CsrfMissing"
        assert info["raw"] == {"unexpected": True}
        assert "/csrf" in info["msg"]

    def test_generic_internal_error(self):
        """Test generic internal error."""
        exc = SessionGateError("something specific")

        info = normalize_error(exc)

        assert info == {"code": "SessionGateError", "msg": "something specific"}


@pytest.mark.unit
class TestNormalizeErrorSynthesized:
    """Tier 3: synthesized NetworkOrUnknown errors."""

    def test_connection_error_is_status_zero(self):
        """Test connection error is status zero."""
        request = requests.Request("POST", BASE_URL + "/login").prepare()
        exc = requests.ConnectionError("Connection refused", request=request)

        info = normalize_error(exc)

        assert info["code"] == "NetworkOrUnknown"
        assert info["status"] == 0
        assert "Network error" in info["msg"]
        assert "backend running" in info["msg"]
        assert info["url"] == BASE_URL + "/login"
        assert info["details"] == {"type": "ConnectionError", "reason": "Connection refused"}

    def test_timeout_is_network_error(self):
        """Test timeout is network error."""
        info = normalize_error(requests.Timeout("read timed out"))

        assert info["status"] == 0
        assert info["details"]["type"] == "Timeout"
        assert info["url"] is None

    def test_http_error_without_body_uses_exception_message(self):
        """Test HTTP error without body uses exception message."""
        exc = http_error_for(make_response(404, path="/toProcess", method="POST"))

        info = normalize_error(exc)

        assert info["code"] == "NetworkOrUnknown"
        assert info["status"] == 404
        assert info["msg"] == "404 Non-2xx response for url: " + BASE_URL + "/toProcess"
        assert info["url"] == BASE_URL + "/toProcess"
        assert info["details"] is None

    def test_fallback_message_when_exception_is_blank(self):
        """Test fallback message when exception is blank."""
        response = make_response(500)
        exc = requests.HTTPError("", response=response)

        info = normalize_error(exc)

        assert info["msg"] == "Request failed"
        assert info["status"] == 500
