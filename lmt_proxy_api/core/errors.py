"""
Utility helpers for representing API errors as JSON‑serializable dictionaries.

This module centralizes the creation of error payloads returned by the
endpoints, together with the mapping of pipeline exceptions to HTTP status
codes and machine‑readable error identifiers.
"""

from typing import Dict, Any, Optional, Tuple

from lmt_proxy_lib.exceptions import (
    LMTProxyError,
    UpstreamError,
    AuthenticationError,
    RateLimitError,
    MalformedReplyError,
    EmptyResultError,
    EmptyTranslationError,
    NoTextAndNoPayloadError,
)

# Error code used when a request is missing one or more mandatory parameters.
ERROR_NO_REQUIRED_PARAMS = "No required parameters!"

ERROR_BAD_REQUEST = "bad_request"
ERROR_INTERNAL = "internal_error"

# Most specific classes first
_PIPELINE_ERROR_IDS = [
    (AuthenticationError, "upstream_authentication_error"),
    (RateLimitError, "upstream_rate_limit"),
    (UpstreamError, "upstream_error"),
    (MalformedReplyError, "malformed_reply"),
    (EmptyResultError, "empty_result"),
    (EmptyTranslationError, "empty_translation"),
    (NoTextAndNoPayloadError, ERROR_BAD_REQUEST),
]


def error_as_dict(
    error: str, error_msg: Optional[str] = None, code: Optional[int] = None
) -> Dict[str, Any]:
    """
    Convert an error identifier and optional message into a serialisable dictionary.

    Parameters
    ----------
    error : str
        A short, machine‑readable error code or identifier.
    error_msg : Optional[str], default ``None``
        A human‑readable description providing additional context.
        If omitted, only the ``error`` key is included in the result.
    code : Optional[int], default ``None``
        HTTP status code, added as ``"code"`` when given.

    Examples
    --------
    >>> error_as_dict("bad_request")
    {'error': 'bad_request'}

    >>> error_as_dict("upstream_error", "HTTP 500", code=502)
    {'code': 502, 'error': 'upstream_error', 'message': 'HTTP 500'}
    """
    body: Dict[str, Any] = {}
    if code is not None:
        body["code"] = code
    body["error"] = error
    if error_msg is not None:
        body["message"] = error_msg
    return body


def pipeline_error_status(exc: LMTProxyError) -> Tuple[str, int]:
    """
    Return ``(error_id, http_status)`` for a pipeline exception.
    """
    status_code = getattr(exc, "status_code", 500)
    for exc_cls, error_id in _PIPELINE_ERROR_IDS:
        if isinstance(exc, exc_cls):
            return error_id, status_code
    return ERROR_INTERNAL, status_code
