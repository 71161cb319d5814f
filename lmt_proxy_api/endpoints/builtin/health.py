import os

from typing import Optional, Dict, Any

from lmt_proxy_lib.data_models.config import UpstreamConfig

from lmt_proxy_api.core.decorators import EP
from lmt_proxy_api.base.constants import REST_API_LOG_LEVEL
from lmt_proxy_api.endpoints.endpoint_i import EndpointI


class Ping(EndpointI):
    """
    Health‑check endpoint that returns a simple *pong* response.

    Registered under the name ``ping`` with the HTTP ``GET`` method.  It does
    not require any request parameters and never contacts the engine.
    """

    def __init__(
        self,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        upstream_config: Optional[UpstreamConfig] = None,
        ep_name: str = "ping",
    ):
        super().__init__(
            method="GET",
            ep_name=ep_name,
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            upstream_config=upstream_config,
        )

    @EP.response_time
    def prepare_payload(self, params: Optional[Dict[str, Any]]) -> str:
        return "pong"


class ApiVersion(EndpointI):
    VERSION_FILE = ".version"

    def __init__(
        self,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        upstream_config: Optional[UpstreamConfig] = None,
        ep_name: str = "version",
    ):
        """
        Create an endpoint that returns the service version read from
        ``.version`` (``0.0.1`` when the file is missing).
        """
        super().__init__(
            method="GET",
            ep_name=ep_name,
            logger_file_name=logger_file_name,
            logger_level=logger_level,
            upstream_config=upstream_config,
            direct_return=True,
        )

        self.version = "0.0.1"
        if os.path.exists(self.VERSION_FILE):
            with open(self.VERSION_FILE) as f:
                self.version = f.read().strip()

        self.logger.info(f"  -> Running lmt-proxy version: {self.version}")

    @EP.response_time
    def prepare_payload(self, params: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        return {"version": self.version}
