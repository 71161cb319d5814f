"""
Custom exception hierarchy for the LMT proxy library.

All public exceptions inherit from :class:`LMTProxyError`, allowing callers
to catch a single base class for any pipeline failure while still being
able to differentiate specific error conditions when needed.
"""


class LMTProxyError(Exception):
    """Base exception for all LMT‑proxy‑specific errors."""

    pass


class UpstreamError(LMTProxyError):
    """
    Raised when the translation engine cannot be reached, answers with a
    non‑2xx status, returns an undecodable body or a JSON‑RPC error object.
    """

    status_code = 502


class AuthenticationError(UpstreamError):
    """Raised when the engine returns HTTP 401/403 – invalid or missing session."""

    status_code = 401


class RateLimitError(UpstreamError):
    """Raised when the engine returns HTTP 429 – request rate limit exceeded."""

    status_code = 429


class MalformedReplyError(LMTProxyError):
    """Raised when the engine reply does not match the expected structure."""

    status_code = 502


class EmptyResultError(LMTProxyError):
    """Raised when the segmenter returns no chunk to translate."""

    status_code = 502


class EmptyTranslationError(LMTProxyError):
    """Raised when there is no translation (or no beam) to reduce."""

    status_code = 502


class NoTextAndNoPayloadError(LMTProxyError):
    """Raised when a client method receives neither a payload nor a text."""

    status_code = 400
