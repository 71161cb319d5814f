"""
Route registration of ``EndpointI`` instances.

Each endpoint becomes one Flask view.  The view only extracts the request
parameters, hands them to ``endpoint.run_ep`` and serialises what comes
back; business validation stays in the endpoints.  Failures that escape an
endpoint are answered here: a ``ValueError`` with ``400 bad_request``,
anything else with ``500 internal_error``.
"""

from __future__ import annotations

import logging

from flask import Flask, request, jsonify
from typing import Callable, Iterable, Any, Dict, Set, Tuple, Optional

from lmt_proxy_lib.utils.logger import prepare_logger

from lmt_proxy_api.endpoints.endpoint_i import EndpointI
from lmt_proxy_api.base.constants import DEFAULT_API_PREFIX
from lmt_proxy_api.core.errors import (
    error_as_dict,
    ERROR_BAD_REQUEST,
    ERROR_INTERNAL,
)


class FlaskEndpointRegistrar:
    """
    Register ``EndpointI`` instances as routes of a Flask application.

    Parameters
    ----------
    app : Flask
        Application receiving the routes.
    url_prefix : str, optional
        Prefix of every endpoint that does not opt out of it; a leading
        slash is added and a trailing one removed.
    logger : logging.Logger, optional
        Defaults to a module logger prepared with :func:`prepare_logger`.
    """

    def __init__(
        self,
        app: Flask,
        url_prefix: str = DEFAULT_API_PREFIX,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._app = app
        self._prefix = self._normalize_prefix(url_prefix)
        self._logger = logger or prepare_logger(__name__)
        self._registered_rules: Set[Tuple[str, str]] = set()

    @staticmethod
    def _normalize_prefix(url_prefix: Optional[str]) -> str:
        if not url_prefix:
            return ""
        return ("/" + url_prefix.lstrip("/")).rstrip("/")

    def rule_for(self, endpoint: EndpointI) -> str:
        rule = "/" + endpoint.name.lstrip("/")
        if endpoint.add_api_prefix:
            return self._prefix + rule
        return rule

    def register_endpoints(self, endpoints: Iterable[EndpointI]) -> None:
        for ep in endpoints:
            self.register_endpoint(ep)

    def register_endpoint(self, endpoint: EndpointI) -> None:
        """
        Add *endpoint* as a view of the application.

        Raises
        ------
        RuntimeError
            When the same rule and method pair was already registered.
        """
        rule = self.rule_for(endpoint)
        method = endpoint.method.upper()
        ep_cls_name = endpoint.__class__.__name__

        if (rule, method) in self._registered_rules:
            raise RuntimeError(f"Duplicate route: {method} {rule}")
        self._registered_rules.add((rule, method))

        self._app.add_url_rule(
            rule,
            endpoint=f"{ep_cls_name}:{method}:{rule}",
            view_func=self._make_view(endpoint),
            methods=[method],
        )
        self._logger.info(f"Registered endpoint {method} {rule} ({ep_cls_name})")

    def _make_view(self, endpoint: EndpointI) -> Callable[[], Any]:
        def handler():
            try:
                result = endpoint.run_ep(self._extract_params(endpoint.method))
            except ValueError as exc:
                return self._error(ERROR_BAD_REQUEST, exc, 400)
            except Exception as exc:
                self._logger.exception(
                    f"Unhandled exception in endpoint {endpoint.__class__.__name__}"
                )
                return self._error(ERROR_INTERNAL, exc, 500)
            return self._as_response(result)

        return handler

    @staticmethod
    def _error(error_id: str, exc: Exception, status_code: int):
        return jsonify(error_as_dict(error_id, str(exc), code=status_code)), status_code

    @staticmethod
    def _as_response(result: Any):
        if isinstance(result, tuple):
            body, status_code = result
            return jsonify(body), status_code
        return jsonify(result if result is not None else {}), 200

    @staticmethod
    def _extract_params(method: str) -> Dict[str, Any]:
        """
        Query string for ``GET``; for ``POST`` the JSON object body, or the
        form fields when the request is not JSON.

        Raises
        ------
        ValueError
            If a JSON body cannot be decoded or is not an object.
        """
        if method.upper() == "GET":
            return dict(request.args)
        if not request.is_json:
            return dict(request.form)

        params = request.get_json(silent=True)
        if params is None:
            raise ValueError("Request body is not valid JSON")
        if not isinstance(params, dict):
            raise ValueError("Request body must be a JSON object")
        return params
