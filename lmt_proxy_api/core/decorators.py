"""
lmt_proxy_api.core.decorators
=============================

Utility decorators used by the REST‑endpoint classes.

Two cross‑cutting concerns are expressed as decorators that wrap the
endpoint's ``prepare_payload`` method:

* **Parameter validation** – every endpoint can declare a list of required
  arguments (`EndpointI.REQUIRED_ARGS`).  Before the business logic runs we
  verify that those arguments are present and, if not, return a consistent
  error payload.

* **Execution‑time measurement** – the elapsed time of every call is logged
  through the endpoint's logger.

The decorators are defined as static methods of the ``EP`` namespace class so
they can be used with the ``@EP.require_params`` / ``@EP.response_time``
syntax without having to instantiate anything.
"""

import time
from typing import Callable, Any, Dict, Optional

from lmt_proxy_api.core.errors import error_as_dict, ERROR_NO_REQUIRED_PARAMS


class EP:
    """
    Namespace container for endpoint‑related decorators.

    >>> from lmt_proxy_api.core.decorators import EP
    >>> @EP.require_params
    ... def prepare_payload(self, params): ...
    """

    @staticmethod
    def require_params(
        func: Callable[[Any, Optional[Dict[str, Any]]], Any],
    ) -> Callable:
        """
        Validate required endpoint arguments before executing the wrapped method.

        The wrapped function must have the signature
        ``(self, params: Optional[dict])``.  When the endpoint's
        ``_check_required_params`` raises a :class:`ValueError` the call is
        short‑circuited with a ``400`` error payload built by
        :meth:`EndpointI.return_response_not_ok`.
        """

        def wrapper(self, params: Optional[Dict[str, Any]] = None):
            try:
                # ``params`` may be ``None`` – treat it as an empty dict
                self._check_required_params(params or {})
            except ValueError as exc:
                return self.return_response_not_ok(
                    error_as_dict(
                        error=ERROR_NO_REQUIRED_PARAMS,
                        error_msg=str(exc),
                        code=400,
                    ),
                    status_code=400,
                )
            return func(self, params)

        return wrapper

    @staticmethod
    def response_time(
        func: Callable[[Any, Optional[Dict[str, Any]]], Any],
    ) -> Callable:
        """
        Log how long the wrapped endpoint method takes to execute.

        The result of *func* is returned unchanged; the elapsed time in
        seconds is written at ``INFO`` level, also when *func* raises.
        """

        def wrapper(self, params: Optional[Dict[str, Any]] = None):
            start = time.time()
            try:
                return func(self, params)
            finally:
                self.logger.info(
                    "%s %s costs %.3fs", self.method, self.name, time.time() - start
                )

        return wrapper
