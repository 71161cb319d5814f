"""
The ``/translate`` endpoint.

The request is validated with :class:`TranslateTextModel`, translated by a
fresh :class:`LMTClient` (one per request, so no connection state is shared
between concurrent requests) and returned as the flat
:class:`TranslateResponseModel` JSON.  Pipeline failures are turned into
non‑2xx error payloads instead of propagating to the WSGI server.
"""

from typing import Optional, Dict, Any

from pydantic import ValidationError

from lmt_proxy_lib.client import LMTClient
from lmt_proxy_lib.exceptions import LMTProxyError
from lmt_proxy_lib.data_models.config import UpstreamConfig
from lmt_proxy_lib.data_models.translate import (
    TranslateTextModel,
    TRANSLATE_TEXT_REQ,
)

from lmt_proxy_api.core.decorators import EP
from lmt_proxy_api.base.constants import REST_API_LOG_LEVEL
from lmt_proxy_api.endpoints.endpoint_i import EndpointI
from lmt_proxy_api.core.errors import (
    ERROR_BAD_REQUEST,
    error_as_dict,
    pipeline_error_status,
)


class Translate(EndpointI):
    REQUIRED_ARGS = TRANSLATE_TEXT_REQ

    def __init__(
        self,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        upstream_config: Optional[UpstreamConfig] = None,
        ep_name: str = "translate",
    ):
        super().__init__(
            ep_name=ep_name,
            method="POST",
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            upstream_config=upstream_config,
            dont_add_api_prefix=True,
            direct_return=True,
        )

    def _new_client(self) -> LMTClient:
        return LMTClient(config=self.upstream_config, logger=self.logger)

    @EP.response_time
    @EP.require_params
    def prepare_payload(self, params: Optional[Dict[str, Any]]):
        try:
            payload = TranslateTextModel(**params)
        except ValidationError as exc:
            return self.return_response_not_ok(
                error_as_dict(ERROR_BAD_REQUEST, str(exc), code=400),
                status_code=400,
            )

        try:
            with self._new_client() as client:
                response = client.translate(payload=payload)
        except LMTProxyError as exc:
            error_id, status_code = pipeline_error_status(exc)
            self.logger.error("Translation failed (%s): %s", error_id, exc)
            return self.return_response_not_ok(
                error_as_dict(error_id, str(exc), code=status_code),
                status_code=status_code,
            )

        return response.model_dump()
