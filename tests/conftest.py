"""
Pytest configuration and shared fixtures for sessiongate tests.
"""

import json as jsonlib
from unittest.mock import Mock

import pytest
import requests

from sessiongate.infrastructure.auth import CsrfTokenManager
from sessiongate.infrastructure.http import HttpClient
from sessiongate.services import AuthenticatedApiClient

BASE_URL = "http://backend.test"


def make_response(status=200, json=None, text=None, path="/", method="GET"):
    """Build a real ``requests.Response`` as the transport would return it."""
    url = BASE_URL + path
    response = requests.Response()
    response.status_code = status
    response.url = url
    response.encoding = "utf-8"
    response.request = requests.Request(method, url).prepare()
    if json is not None:
        response._content = jsonlib.dumps(json).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    elif text is not None:
        response._content = text.encode("utf-8")
        response.headers["Content-Type"] = "text/plain"
    else:
        response._content = b""
    return response


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def mock_http():
    """Transport double returning a valid CSRF token by default."""
    http = Mock(spec=HttpClient)
    http.base_url = BASE_URL
    http.get.return_value = make_response(200, {"csrfToken": "tok-123"}, path="/csrf")
    http.post.return_value = make_response(200, {"ok": True}, path="/", method="POST")
    return http


@pytest.fixture
def csrf_manager(mock_http):
    return CsrfTokenManager(mock_http)


@pytest.fixture
def api_client(mock_http):
    return AuthenticatedApiClient(mock_http)


@pytest.fixture
def config_file(tmp_path):
    return tmp_path / "config.toml"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SESSIONGATE_* variables from the developer's shell out of tests."""
    import os

    for key in list(os.environ):
        if key.startswith("SESSIONGATE_"):
            monkeypatch.delenv(key, raising=False)
