"""
Base class of the JSON‑RPC service wrappers.

A concrete service binds the ``method`` name of one engine operation.  The
shared :meth:`BaseJsonRpcServiceInterface.call` wraps the params into a
JSON‑RPC request with a fresh correlation id, posts it through a
``HttpRequester`` and validates the reply envelope.
"""

import abc
import logging

from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from lmt_proxy_lib.utils.http import HttpRequester
from lmt_proxy_lib.core.envelope import CorrelationIdGenerator
from lmt_proxy_lib.data_models.lmt import JsonRpcRequest, JsonRpcResponse
from lmt_proxy_lib.exceptions import MalformedReplyError, UpstreamError

ResultT = TypeVar("ResultT", bound=BaseModel)


class BaseJsonRpcServiceInterface(abc.ABC):
    """
    Abstract base class for engine‑operation wrappers.

    Sub‑classes must set the ``method`` attribute (the JSON‑RPC method
    name).  Each :meth:`call` draws its own id from ``ids`` so that every
    upstream call is correlated independently.
    """

    # JSON-RPC method name of the operation
    method: str = ""

    def __init__(
        self,
        http: HttpRequester,
        ids: Optional[CorrelationIdGenerator] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Parameters
        ----------
        http : HttpRequester
            Helper object that knows how to reach the engine.
        ids : Optional[CorrelationIdGenerator]
            Source of JSON‑RPC ids.
        logger : logging.Logger
            Logger instance used for debugging and error reporting.
        """
        self.http = http
        self.ids = ids or CorrelationIdGenerator()
        self.logger = logger or logging.getLogger(__name__)

    def call(self, params: Dict[str, Any]) -> JsonRpcResponse:
        """
        Send one JSON‑RPC request and return the validated reply envelope.

        Raises
        ------
        UpstreamError
            If the transport fails, the body is not JSON or the engine
            answers with a JSON‑RPC ``error`` object.
        MalformedReplyError
            If the body is JSON but not a ``{id, result}`` envelope.
        """
        request = JsonRpcRequest(method=self.method, params=params, id=self.ids.next_id())
        resp = self.http.post(json=request.model_dump())
        try:
            body = resp.json()
        except ValueError as exc:
            raise UpstreamError(f"Invalid response format: {exc}") from exc

        if isinstance(body, dict) and body.get("error") is not None:
            raise UpstreamError(f"{self.method} failed: {body['error']}")

        try:
            return JsonRpcResponse.model_validate(body)
        except ValidationError as exc:
            raise MalformedReplyError(
                f"{self.method} reply is not a JSON-RPC result: {exc}"
            ) from exc

    def _parse_result(self, reply: JsonRpcResponse, model_cls: Type[ResultT]) -> ResultT:
        try:
            return model_cls.model_validate(reply.result)
        except ValidationError as exc:
            raise MalformedReplyError(
                f"Unexpected {self.method} result structure: {exc}"
            ) from exc
