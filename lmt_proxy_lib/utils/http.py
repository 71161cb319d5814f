"""
Thin wrapper around ``requests`` that adds logging and unified error handling.

The :class:`HttpRequester` class is used by the JSON‑RPC services to
communicate with the translation engine.  It centralises:

* the browser‑extension header set the engine expects (including the
  ``dl_session`` cookie built from the configured credential),
* a bounded per‑request timeout,
* conversion of transport failures and HTTP error codes into the
  library‑specific exception hierarchy (:class:`AuthenticationError`,
  :class:`RateLimitError`, :class:`UpstreamError`).

Requests are never retried: a failed call surfaces immediately so that rate
limiting or an expired session is not masked.
"""

import logging
from typing import Any, Dict, Optional

import requests

from lmt_proxy_lib.data_models.config import UpstreamConfig
from lmt_proxy_lib.exceptions import (
    AuthenticationError,
    RateLimitError,
    UpstreamError,
)


class HttpRequester:
    """
    Helper for posting JSON bodies to the engine with error translation.

    Parameters
    ----------
    config : UpstreamConfig
        Engine URL, session credential, timeout and client identification.
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module‑level logger is created.
    """

    def __init__(
        self,
        config: UpstreamConfig,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.url = config.url
        self.timeout = config.timeout
        self.session = requests.Session()
        self.session.headers.update(self._default_headers(config))

        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def _default_headers(config: UpstreamConfig) -> Dict[str, str]:
        return {
            "accept": "*/*",
            "accept-language": config.accept_language,
            "cache-control": "no-cache",
            "content-type": "application/json",
            "cookie": f"dl_session={config.session}; ",
            "dnt": "1",
            "origin": config.origin,
            "pragma": "no-cache",
            "priority": "u=1, i",
            "referer": config.referer,
            "user-agent": config.user_agent,
        }

    @staticmethod
    def _handle_response(resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes into library‑specific exceptions.

        * :class:`AuthenticationError` for ``401``/``403``.
        * :class:`RateLimitError` for ``429``.
        * :class:`UpstreamError` for any other 4xx/5xx status.

        A successful (2xx) response is returned unchanged.
        """
        if resp.status_code in (401, 403):
            raise AuthenticationError(
                f"HTTP {resp.status_code}: invalid or expired session"
            )
        if resp.status_code == 429:
            raise RateLimitError("HTTP 429: rate limit exceeded")
        if 400 <= resp.status_code < 600:
            raise UpstreamError(f"HTTP {resp.status_code}: {resp.text}")
        return resp

    def post(self, json: Optional[Dict[str, Any]] = None) -> requests.Response:
        """
        Perform a single ``POST`` of *json* to the engine endpoint.

        Returns
        -------
        requests.Response
            The validated response object.

        Raises
        ------
        UpstreamError
            When the request cannot be sent or the response is an error
            (see :meth:`_handle_response`).
        """
        self.logger.debug("POST %s | payload=%s", self.url, json)
        try:
            resp = self.session.post(self.url, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            raise UpstreamError(f"Request to {self.url} failed: {exc}") from exc
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("response: %s", resp.text)
        return self._handle_response(resp)

    def close(self) -> None:
        self.session.close()
