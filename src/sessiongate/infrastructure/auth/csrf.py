"""
CSRF token acquisition and caching.

The manager fetches the token from the backend at most once until it is
invalidated. The cached value is the only mutable state shared between
requests of a client; nothing else reads or writes it.
"""

import logging
import threading
from typing import Any, Iterable, Optional

from sessiongate.constants import CSRF_ENDPOINT, CSRF_TOKEN_FIELDS
from sessiongate.exceptions import CsrfMissingError
from sessiongate.infrastructure.http import HttpClient, parse_body, raise_for_non_success
from sessiongate.logging import LoggingConfiguration, LoggingContext

logger = logging.getLogger(__name__)


class CsrfTokenManager:
    """Fetches, caches and invalidates the backend's CSRF token."""

    def __init__(
        self,
        http_client: HttpClient,
        csrf_path: str = CSRF_ENDPOINT,
        token_fields: Iterable[str] = CSRF_TOKEN_FIELDS,
    ):
        self.http_client = http_client
        self.csrf_path = csrf_path
        self.token_fields = tuple(token_fields)
        self.fetch_count = 0
        self._token: Optional[str] = None
        self._fetch_lock = threading.Lock()

    @property
    def token(self) -> Optional[str]:
        return self._token

    def ensure_token(self) -> str:
        """Return the cached token, fetching it first if needed.

        Concurrent callers that find the cache empty queue on a lock; the
        first one fetches and the rest pick up its token.

        Raises:
            CsrfMissingError: the response was 2xx but held no usable token.
            requests.RequestException: the fetch itself failed.
        """
        token = self._token
        if token:
            return token

        with self._fetch_lock:
            if self._token:
                return self._token
            self._token = self._fetch()
            return self._token

    def invalidate(self) -> None:
        """Drop the cached token; the next ``ensure_token`` fetches again.

        Waits for an in-flight fetch so that its token cannot land in the
        cache after the invalidation.
        """
        with self._fetch_lock:
            if self._token is not None:
                logger.debug("CSRF token invalidated")
            self._token = None

    def _fetch(self) -> str:
        config = LoggingConfiguration(
            entry_msg=f"Fetching CSRF token from {self.csrf_path} ...",
            success_msg="CSRF token acquired.",
            failure_msg=f"Could not obtain CSRF token from {self.csrf_path}",
            logger=logger,
            success_level=logging.DEBUG,
            failure_level=logging.WARNING,
        )
        with LoggingContext(config):
            self.fetch_count += 1
            response = self.http_client.get(self.csrf_path)
            raise_for_non_success(response)

            data = parse_body(response)
            token = self._extract_token(data)
            if not token:
                raise CsrfMissingError(data, path=self.csrf_path, fields=self.token_fields)
            return token

    def _extract_token(self, data: Any) -> Optional[str]:
        """Return the first present token field; later fields are fallbacks only."""
        if not isinstance(data, dict):
            return None
        for field in self.token_fields:
            value = data.get(field)
            if value is not None:
                return value if isinstance(value, str) else None
        return None
