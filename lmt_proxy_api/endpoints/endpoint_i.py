"""
Endpoint abstraction layer for the lmt‑proxy REST service.

This module defines the abstract base class that represents a *single*
HTTP endpoint.  Concrete implementations inherit from it and provide the
actual request handling logic in ``prepare_payload``.

The class exposes a small public API:

* ``name`` – the URL path of the endpoint.
* ``method`` – the HTTP verb (GET or POST) the endpoint expects.
* ``add_api_prefix`` – whether ``DEFAULT_API_PREFIX`` is prepended.
* ``run_ep`` – the entry point called by the Flask registrar.
"""

import abc

from typing import Optional, Dict, Any, List, Tuple

from lmt_proxy_lib.utils.logger import prepare_logger
from lmt_proxy_lib.data_models.config import UpstreamConfig

from lmt_proxy_api.base.constants import REST_API_LOG_LEVEL


class EndpointI(abc.ABC):
    """
    Abstract representation of a single REST endpoint.

    Attributes
    ----------
    _ep_name: str
        Relative URL path of the endpoint (e.g. ``"translate"``).
    _ep_method: str
        HTTP method this endpoint expects – ``"GET"`` or ``"POST"``.
    logger: logging.Logger
        Logger configured with the supplied log file and level.
    _upstream_config: UpstreamConfig | None
        Settings of the translation engine, for endpoints calling it.
    _dont_add_api_prefix: bool
        When ``True`` the endpoint URL is registered without the global
        API prefix.
    direct_return: bool
        When ``True`` the result of ``prepare_payload`` is returned as is,
        otherwise it is wrapped by :meth:`return_response_ok`.
    """

    METHODS = ["GET", "POST"]
    """Supported HTTP methods for any endpoint."""

    REQUIRED_ARGS: List[str] = []
    """Names of parameters that **must** be supplied by the client."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        ep_name: str,
        method: str = "POST",
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        logger_file_name: Optional[str] = None,
        upstream_config: Optional[UpstreamConfig] = None,
        dont_add_api_prefix: bool = False,
        direct_return: bool = False,
    ):
        """
        Initialise an endpoint definition.

        Parameters
        ----------
        ep_name :
            URL fragment that identifies this endpoint (e.g. ``"ping"``).
        method :
            HTTP verb the endpoint will respond to; defaults to ``"POST"``.
            Must be one of :attr:`METHODS`.
        logger_level :
            Logging level name (``"INFO"``, ``"DEBUG"``, …).
        logger_file_name :
            Path to a file where log records will be written.  When
            ``None`` only the console handler is used.
        upstream_config :
            Translation engine settings handed down to the pipeline client.
        dont_add_api_prefix :
            If ``True`` the endpoint URL will be registered without the
            global ``DEFAULT_API_PREFIX`` prefix.
        direct_return :
            If ``True`` the payload is returned without the
            ``{"status", "body"}`` wrapper.

        Raises
        ------
        ValueError
            If ``method`` is not listed in :attr:`METHODS`.
        """
        self._check_method_is_allowed(method=method)

        self._ep_name = ep_name
        self._ep_method = method
        self.logger = prepare_logger(
            logger_name=__name__,
            logger_file_name=logger_file_name,
            log_level=logger_level,
        )

        self._upstream_config = upstream_config
        self._dont_add_api_prefix = dont_add_api_prefix
        self.direct_return = direct_return

    # ------------------------------------------------------------------
    # Public read‑only properties
    # ------------------------------------------------------------------
    @property
    def name(self):
        """
        Return the raw endpoint name as supplied to the constructor.

        The value is used by the Flask registrar to build the final route.
        """
        return self._ep_name

    @property
    def method(self):
        """
        Return the HTTP verb this endpoint expects (``"GET"`` or ``"POST"``).
        """
        return self._ep_method

    @property
    def add_api_prefix(self):
        """
        Indicate whether the global API prefix (``DEFAULT_API_PREFIX``) should
        be prepended to the endpoint's URL when it is registered.
        """
        return not self._dont_add_api_prefix

    @property
    def upstream_config(self) -> UpstreamConfig:
        return self._upstream_config or UpstreamConfig()

    # ------------------------------------------------------------------
    # Core workflow
    # ------------------------------------------------------------------
    def run_ep(
        self, params: Optional[Dict[str, Any]]
    ) -> Dict[str, Any] | Tuple[Dict[str, Any], int]:
        """
        Execute the endpoint for a given request payload.

        Parameters
        ----------
        params :
            Dictionary of request parameters extracted by the Flask
            registrar.  May be ``None`` for endpoints that do not expect
            any input.

        Returns
        -------
        dict | Tuple[dict, int]
            The JSON body (HTTP 200) or an ``(error_body, status_code)``
            tuple produced by :meth:`return_response_not_ok`.
        """
        result = self.prepare_payload(params or {})
        if isinstance(result, tuple) or self.direct_return:
            return result
        return self.return_response_ok(result)

    @abc.abstractmethod
    def prepare_payload(
        self, params: Optional[Dict[str, Any]]
    ) -> Optional[Dict[str, Any] | str | Tuple[Dict[str, Any], int]]:
        """
        Convert request parameters into the endpoint's response body.

        Sub‑classes implement the business logic that interprets the incoming
        parameters, validates them (or delegates to
        :meth:`_check_required_params`) and returns the response body or an
        error tuple.
        """
        raise NotImplementedError()

    # ------------------------------------------------------------------
    # Helper utilities for standardised JSON responses
    # ------------------------------------------------------------------
    @staticmethod
    def return_response_ok(body: Any) -> Dict[str, Any]:
        """
        Build a successful response payload.

        The wrapper follows the convention used throughout the project:
        ``{"status": True, "body": <user‑data>}``.
        """
        return {"status": True, "body": body}

    @staticmethod
    def return_response_not_ok(
        body: Dict[str, Any], status_code: int = 500
    ) -> Tuple[Dict[str, Any], int]:
        """
        Pair an error body (built with
        :func:`lmt_proxy_api.core.errors.error_as_dict`) with its HTTP status.

        Flask interprets the returned tuple as ``(Response, Status)``.
        """
        return body, status_code

    # ------------------------------------------------------------------
    # Parameter validation
    # ------------------------------------------------------------------
    def _check_required_params(self, params: Optional[Dict[str, Any]]) -> None:
        """
        Verify that all keys listed in :attr:`REQUIRED_ARGS` are present.

        Raises
        ------
        ValueError
            If any required key is missing from *params*.
        """
        if (
            params is None
            or self.REQUIRED_ARGS is None
            or not len(self.REQUIRED_ARGS)
        ):
            return

        missing = [arg for arg in self.REQUIRED_ARGS if arg not in params]
        if missing:
            raise ValueError(
                f"Missing required argument(s) {missing} "
                f"for endpoint {self._ep_name}"
            )

    def _check_method_is_allowed(self, method: str) -> None:
        """
        Ensure that *method* is one of the supported HTTP verbs.

        Raises
        ------
        ValueError
            If *method* is not present in :attr:`METHODS`.
        """
        if method not in self.METHODS:
            _m_str = ", ".join(self.METHODS)
            raise ValueError(
                f"Unknown method {method}. Method must be one of {_m_str}"
            )
