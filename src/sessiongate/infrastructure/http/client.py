"""
HTTP transport for the authenticated client.

``HttpClient`` binds a ``requests.Session`` to a base URL. The session's
cookie jar carries the backend's session cookie across every request,
including the CSRF fetch, so all traffic for one client shares one session.
The transport never retries and never raises on HTTP status; classifying
responses is the caller's job.
"""

import logging
from typing import Any, Dict, Optional
from urllib.parse import urljoin

import requests

from sessiongate.constants import DEFAULT_TIMEOUT_SECONDS, DEFAULT_USER_AGENT


class HttpClient:
    """Session-backed HTTP transport bound to a base URL."""

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        verify_ssl: bool = True,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        """Initialize HTTP client with configuration.

        Args:
            base_url: Base URL for all requests
            session: Optional existing session to use
            timeout: Request timeout in seconds
            verify_ssl: Verify TLS certificates
            user_agent: User-Agent header for new sessions
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        self.session = session or self._create_session(user_agent)

    def _create_session(self, user_agent: str) -> requests.Session:
        """Create a plain session; no retry adapter is mounted."""
        session = requests.Session()
        session.headers.update({
            'User-Agent': user_agent,
            'Accept': 'application/json',
        })
        return session

    def get(
        self,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs
    ) -> requests.Response:
        """Perform GET request.

        Args:
            endpoint: API endpoint (relative to base_url)
            params: Query parameters
            headers: Additional headers
            **kwargs: Additional arguments passed to requests

        Returns:
            Response object
        """
        url = self._build_url(endpoint)

        self.logger.debug(f"GET {url}")

        response = self.session.get(
            url,
            params=params,
            headers=headers,
            timeout=kwargs.pop('timeout', self.timeout),
            verify=kwargs.pop('verify', self.verify_ssl),
            **kwargs
        )

        self._log_response(response)
        return response

    def post(
        self,
        endpoint: str,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
        **kwargs
    ) -> requests.Response:
        """Perform POST request with a JSON body.

        Args:
            endpoint: API endpoint (relative to base_url)
            json: JSON-serializable body
            headers: Additional headers
            **kwargs: Additional arguments passed to requests

        Returns:
            Response object
        """
        url = self._build_url(endpoint)

        self.logger.debug(f"POST {url}")

        response = self.session.post(
            url,
            json=json,
            headers=headers,
            timeout=kwargs.pop('timeout', self.timeout),
            verify=kwargs.pop('verify', self.verify_ssl),
            **kwargs
        )

        self._log_response(response)
        return response

    def _build_url(self, endpoint: str) -> str:
        """Build full URL from endpoint."""
        if endpoint.startswith('http'):
            return endpoint
        return urljoin(self.base_url + '/', endpoint.lstrip('/'))

    def _log_response(self, response: requests.Response) -> None:
        """Log response details."""
        self.logger.debug(
            f"Response: {response.status_code} - "
            f"{len(response.content)} bytes"
        )

    def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            self.session.close()
