"""
Authenticated API client.

Every state-changing call goes through one pipeline: acquire the CSRF token,
attach it with the JSON content type, POST through the shared session and
normalize the outcome. Failures are turned into ``ApiErr`` values at this
single seam; public operations never raise transport errors.
"""

import logging
from typing import Any, Dict, Iterable, Optional

import requests

from sessiongate.constants import (
    CSRF_ENDPOINT,
    CSRF_HEADER,
    CSRF_TOKEN_FIELDS,
    JSON_CONTENT_TYPE,
    LOGIN_ENDPOINT,
    LOGOUT_ENDPOINT,
    PROCESS_ENDPOINT,
)
from sessiongate.core.config.models import ClientConfig
from sessiongate.core.security import SensitiveDataSanitizer, mask_credential
from sessiongate.exceptions import SessionGateError
from sessiongate.infrastructure.auth import CsrfTokenManager
from sessiongate.infrastructure.http import (
    HttpClient,
    normalize_error,
    normalize_response,
    raise_for_non_success,
)
from sessiongate.models import ApiErr, ApiResult, ProcessParams

logger = logging.getLogger(__name__)


class AuthenticatedApiClient:
    """Client for a session-cookie + CSRF-token backend.

    Each instance owns its own session and token cache; two clients never
    share a token unless they are built around the same ``CsrfTokenManager``.
    """

    def __init__(
        self,
        http_client: HttpClient,
        csrf_manager: Optional[CsrfTokenManager] = None,
        csrf_header: str = CSRF_HEADER,
        csrf_path: str = CSRF_ENDPOINT,
        token_fields: Iterable[str] = CSRF_TOKEN_FIELDS,
        csrf_reset_statuses: Iterable[int] = (),
    ):
        self.http_client = http_client
        self.csrf = csrf_manager or CsrfTokenManager(
            http_client, csrf_path=csrf_path, token_fields=token_fields
        )
        self.csrf_header = csrf_header
        self.csrf_reset_statuses = frozenset(csrf_reset_statuses)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "AuthenticatedApiClient":
        """Build a client and its transport from a ``ClientConfig``."""
        http_client = HttpClient(
            config.base_url,
            timeout=config.timeout,
            verify_ssl=config.verify_ssl,
            user_agent=config.user_agent,
        )
        return cls(
            http_client,
            csrf_header=config.csrf_header,
            csrf_path=config.csrf_path,
            token_fields=config.token_fields,
            csrf_reset_statuses=config.csrf_reset_statuses,
        )

    def __enter__(self) -> "AuthenticatedApiClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        self.http_client.close()

    def ensure_token(self) -> str:
        return self.csrf.ensure_token()

    def submit(self, path: str, body: Any) -> ApiResult:
        """POST ``body`` as JSON to ``path`` with the CSRF header attached."""
        try:
            token = self.csrf.ensure_token()
            headers = self._build_headers(token)
            logger.debug(
                f"POST {path} body={SensitiveDataSanitizer.sanitize_payload(body)} "
                f"headers={SensitiveDataSanitizer.sanitize_headers(headers)}"
            )
            response = self.http_client.post(path, json=body, headers=headers)
            raise_for_non_success(response)
        except (requests.RequestException, SessionGateError) as e:
            return self._failure(path, e)

        return normalize_response(response)

    def _build_headers(self, token: str) -> Dict[str, str]:
        return {
            'Content-Type': JSON_CONTENT_TYPE,
            self.csrf_header: token,
        }

    def _failure(self, path: str, exc: BaseException) -> ApiErr:
        error = normalize_error(exc)
        if isinstance(exc, SessionGateError):
            logger.debug(f"POST {path} aborted before sending: {exc.to_dict()}")
        response = getattr(exc, "response", None)
        status = response.status_code if response is not None else None

        if status in self.csrf_reset_statuses:
            logger.info(f"POST {path} rejected with {status}; CSRF token will be refetched")
            self.csrf.invalidate()

        logger.warning(
            f"POST {path} failed: {error.get('code')} ({status if status is not None else 'no response'})",
            extra={"method": "POST", "path": path, "status": status, "error_code": error.get("code")},
        )
        return ApiErr(error)

    # Public API

    def login(self, user: str, password: str) -> ApiResult:
        logger.info(f"Logging in as {mask_credential(user)}")
        return self.submit(LOGIN_ENDPOINT, {"username": user, "password": password})

    def logout(self) -> ApiResult:
        return self.submit(LOGOUT_ENDPOINT, {})

    def to_process(self, tx: int, params: ProcessParams = None) -> ApiResult:
        return self.submit(PROCESS_ENDPOINT, {"tx": tx, "params": params})

    def reset_csrf(self) -> None:
        """Forget the cached CSRF token, e.g. after cookies were cleared."""
        self.csrf.invalidate()
