"""
Response and error normalization.

Both functions are pure: they turn whatever the transport produced into the
uniform ``ApiResult`` vocabulary and never raise for transport failures.

Error classification order (first match wins):

1. The failure carries a response whose body is a structured (JSON object)
   error: the backend's own shape is returned verbatim.
2. The failure is an internal ``SessionGateError`` (e.g. ``CsrfMissingError``):
   its ``to_error_info()`` is returned unchanged.
3. Anything else becomes a synthesized ``NetworkOrUnknown`` error. Status 0
   means no response was ever received.
"""

from typing import Any, Optional

import requests

from sessiongate.constants import NETWORK_ERROR_STATUS
from sessiongate.exceptions import ErrorCodes, ErrorMessageTemplates, SessionGateError
from sessiongate.models import ApiOk, ErrorInfo


def parse_body(response: requests.Response) -> Any:
    """Parse a response payload: JSON when possible, text otherwise, None when empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def raise_for_non_success(response: requests.Response) -> None:
    """Raise ``requests.HTTPError`` for anything outside 2xx.

    ``Response.raise_for_status`` lets 1xx and unfollowed 3xx responses
    through; here only 2xx counts as success.
    """
    status = response.status_code
    if 200 <= status < 300:
        return
    reason = response.reason or "Non-2xx response"
    raise requests.HTTPError(f"{status} {reason} for url: {response.url}", response=response)


def normalize_response(response: requests.Response) -> ApiOk:
    """Wrap a 2xx response's payload; no shape validation is applied."""
    return ApiOk(parse_body(response))


def normalize_error(exc: BaseException) -> ErrorInfo:
    """Convert a pipeline failure into an ``ErrorInfo`` mapping."""
    response: Optional[requests.Response] = getattr(exc, "response", None)

    if response is not None:
        body = parse_body(response)
        if isinstance(body, dict) and body:
            return body

    if isinstance(exc, SessionGateError):
        return exc.to_error_info()

    status = response.status_code if response is not None else NETWORK_ERROR_STATUS
    url = _failure_url(exc, response)

    if status == NETWORK_ERROR_STATUS:
        return {
            "code": ErrorCodes.NETWORK_OR_UNKNOWN,
            "msg": ErrorMessageTemplates.NETWORK_ERROR,
            "status": status,
            "url": url,
            "details": {"type": type(exc).__name__, "reason": str(exc)},
        }

    return {
        "code": ErrorCodes.NETWORK_OR_UNKNOWN,
        "msg": str(exc) or ErrorMessageTemplates.REQUEST_FAILED,
        "status": status,
        "url": url,
        "details": None,
    }


def _failure_url(exc: BaseException, response: Optional[requests.Response]) -> Optional[str]:
    if response is not None and response.url:
        return response.url
    request = getattr(exc, "request", None)
    return getattr(request, "url", None)
