"""
lmt_proxy_api.core.engine
=========================

This module provides the :class:`FlaskEngine` class, which builds and
configures a Flask application for the lmt‑proxy REST API.  The engine
automatically discovers concrete implementations of
:class:`~lmt_proxy_api.endpoints.endpoint_i.EndpointI`, instantiates them
with the engine settings and registers the resulting endpoint instances
(under :data:`~lmt_proxy_api.base.constants.DEFAULT_API_PREFIX` unless an
endpoint opts out of the prefix).

Typical usage
-------------
>>> engine = FlaskEngine(upstream_config=UpstreamConfig(session="..."))
>>> app = engine.prepare_flask_app()
>>> app.run()
"""

from flask import Flask
from typing import List, Type, Optional

from lmt_proxy_lib.data_models.config import UpstreamConfig

from lmt_proxy_api.endpoints.endpoint_i import EndpointI
from lmt_proxy_api.register.auto_loader import EndpointAutoLoader
from lmt_proxy_api.register.register import FlaskEndpointRegistrar
from lmt_proxy_api.base.constants import DEFAULT_API_PREFIX, REST_API_LOG_LEVEL


class FlaskEngine:
    """
    Engine responsible for creating a Flask application that automatically
    discovers, loads, and registers lmt‑proxy REST endpoints.

    Parameters
    ----------
    upstream_config : Optional[UpstreamConfig]
        Translation engine settings handed to every endpoint.
    logger_file_name : Optional[str], optional
        File name for the endpoints' logger output.
    logger_level : Optional[str], optional
        Logging level; defaults to
        :data:`~lmt_proxy_api.base.constants.REST_API_LOG_LEVEL`.
    api_prefix : str, optional
        Prefix of the endpoints that do not opt out of it.

    Notes
    -----
    The engine does not start the Flask server; it only prepares the
    application instance.  The caller is responsible for running the app
    (e.g., via ``app.run()`` or a WSGI server such as Gunicorn).
    """

    def __init__(
        self,
        upstream_config: Optional[UpstreamConfig] = None,
        logger_file_name: Optional[str] = None,
        logger_level: Optional[str] = REST_API_LOG_LEVEL,
        api_prefix: str = DEFAULT_API_PREFIX,
    ) -> None:
        self.upstream_config = upstream_config or UpstreamConfig()
        self.logger_level = logger_level
        self.logger_file_name = logger_file_name
        self.api_prefix = api_prefix

    def prepare_flask_app(self) -> Flask:
        """
        Create and configure the Flask application.

        Raises
        ------
        RuntimeError
            If endpoint registration fails for any reason.
        """
        flask_app = Flask(__name__)
        try:
            self.__register_instances(
                application=flask_app,
                instances=self.__auto_load_endpoints(base_class=EndpointI),
            )
        except RuntimeError as e:
            raise RuntimeError(f"Failed to register endpoints: {e}")

        return flask_app

    def __auto_load_endpoints(self, base_class: Type[EndpointI]) -> List[EndpointI]:
        """
        Discover and instantiate all concrete ``EndpointI`` subclasses
        found in the ``lmt_proxy_api.endpoints`` package.

        Raises
        ------
        RuntimeError
            If no endpoint classes are discovered or instantiated.
        """
        _auto_loader = EndpointAutoLoader(
            base_class=base_class,
            upstream_config=self.upstream_config,
            logger_file_name=self.logger_file_name,
            logger_level=self.logger_level,
        )

        classes = _auto_loader.discover_classes_in_package("lmt_proxy_api.endpoints")

        instances = _auto_loader.instantiate_with_defaults(classes=classes)
        if instances is None or not len(instances):
            raise RuntimeError("No endpoints found!")

        return instances

    def __register_instances(self, application: Flask, instances: List[EndpointI]):
        registrar = FlaskEndpointRegistrar(app=application, url_prefix=self.api_prefix)
        registrar.register_endpoints(endpoints=instances)
