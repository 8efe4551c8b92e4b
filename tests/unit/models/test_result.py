"""
Tests for the ApiResult variants and request payload models.
"""

import dataclasses

import pytest
from pydantic import ValidationError

from sessiongate.models import ApiErr, ApiOk, LoginRequest, ProcessRequest


@pytest.mark.unit
class TestApiResult:

    def test_ok_variant(self):
        """Test the ApiOk variant."""
        result = ApiOk({"id": 1})

        assert result.ok is True
        assert result.to_dict() == {"ok": True, "data": {"id": 1}}
        assert not hasattr(result, "error")

    def test_err_variant(self):
        """Test the ApiErr variant."""
        result = ApiErr({"code": "badCreds", "msg": "invalid"})

        assert result.ok is False
        assert result.code == "badCreds"
        assert result.msg == "invalid"
        assert result.to_dict() == {"ok": False, "error": {"code": "badCreds", "msg": "invalid"}}
        assert not hasattr(result, "data")

    def test_err_without_code(self):
        """Test ApiErr accessors without a code."""
        result = ApiErr({"detail": "backend specific"})

        assert result.code is None

    def test_ok_flag_is_not_settable(self):
        """Test the ok flag is not a constructor argument."""
        with pytest.raises(TypeError):
            ApiOk(data=1, ok=False)

    def test_frozen(self):
        """Test results are immutable."""
        result = ApiOk(1)

        with pytest.raises(dataclasses.FrozenInstanceError):
            result.data = 2

    def test_equality(self):
        """Test equality."""
        assert ApiOk(None) == ApiOk(None)
        assert ApiErr({"code": "x", "msg": "y"}) == ApiErr({"code": "x", "msg": "y"})
        assert ApiOk({"code": "x"}) != ApiErr({"code": "x"})


@pytest.mark.unit
class TestProcessRequest:

    @pytest.mark.parametrize("params", [{"a": 1}, "text", 5, 2.5, None])
    def test_accepted_params(self, params):
        """Test accepted params."""
        request = ProcessRequest(tx=3, params=params)

        assert request.params == params

    def test_params_optional(self):
        """Test params optional."""
        assert ProcessRequest(tx=3).params is None

    def test_rejects_arrays(self):
        """Test rejects arrays."""
        with pytest.raises(ValidationError, match="params must not be an array"):
            ProcessRequest(tx=3, params=[1, 2])

    def test_tx_required(self):
        """Test tx is required."""
        with pytest.raises(ValidationError):
            ProcessRequest(params="x")


@pytest.mark.unit
def test_login_request_shape():
    """Test login request shape."""
    assert LoginRequest(username="alice", password="pw").model_dump() == {
        "username": "alice",
        "password": "pw",
    }


@pytest.mark.unit
def test_login_request_requires_username():
    """Test an empty username is rejected."""
    with pytest.raises(ValidationError, match="at least 1 character"):
        LoginRequest(username="", password="pw")
