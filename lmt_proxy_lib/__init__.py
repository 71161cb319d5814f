from lmt_proxy_lib.client import LMTClient
from lmt_proxy_lib.data_models.config import UpstreamConfig
from lmt_proxy_lib.exceptions import (
    LMTProxyError,
    UpstreamError,
    AuthenticationError,
    RateLimitError,
    MalformedReplyError,
    EmptyResultError,
    EmptyTranslationError,
)

__all__ = [
    "LMTClient",
    "UpstreamConfig",
    "LMTProxyError",
    "UpstreamError",
    "AuthenticationError",
    "RateLimitError",
    "MalformedReplyError",
    "EmptyResultError",
    "EmptyTranslationError",
]
