"""
Utility functions to launch the lmt‑proxy REST API with various WSGI servers.

The module provides three convenience helpers:

* :func:`run_flask_server` – starts the API with Flask’s built‑in development
  server (threaded, useful for local testing).
* :func:`run_gunicorn_server` – runs the API with Gunicorn, offering
  production‑grade performance.
* :func:`run_waitress_server` – runs the API with Waitress, a pure‑Python
  server that works well on Windows.

These helpers are used by ``rest_api.py`` to select the appropriate server
based on command‑line flags or the ``SERVER_TYPE`` configuration constant.
"""

from typing import Optional

from flask import Flask

from lmt_proxy_lib.data_models.config import UpstreamConfig

from lmt_proxy_api.core.engine import FlaskEngine
from lmt_proxy_api.base.constants import (
    UPSTREAM_URL,
    UPSTREAM_SESSION,
    UPSTREAM_TIMEOUT,
    REST_API_LOG_FILE_NAME,
    REST_API_LOG_LEVEL,
)


def bind_address(host: str, port: int) -> str:
    """
    ``host:port`` as gunicorn expects it; IPv6 hosts are bracketed.
    """
    if ":" in host and not host.startswith("["):
        host = f"[{host}]"
    return f"{host}:{port}"


def upstream_config_from_env() -> UpstreamConfig:
    return UpstreamConfig(
        url=UPSTREAM_URL,
        session=UPSTREAM_SESSION,
        timeout=UPSTREAM_TIMEOUT,
    )


def prepare_app(logger_level: str = REST_API_LOG_LEVEL) -> Flask:
    return FlaskEngine(
        upstream_config=upstream_config_from_env(),
        logger_file_name=REST_API_LOG_FILE_NAME,
        logger_level=logger_level,
    ).prepare_flask_app()


def run_flask_server(host: str, port: int, debug: bool = False):
    """
    Run the Flask development server for the lmt‑proxy REST API.

    Parameters
    ----------
    host : str,
        Interface address to bind the server to.
    port : int,
        TCP port on which the server will listen to.
    debug : bool, optional
        Enable Flask debug mode. Useful during development. Defaults to ``False``.
    """
    logger_level = "DEBUG" if debug else REST_API_LOG_LEVEL

    try:
        prepare_app(logger_level=logger_level).run(
            host=host, port=port, debug=debug, threaded=True
        )
    except RuntimeError as e:
        raise RuntimeError(f"Failed to run flask server: {e}")


def run_gunicorn_server(
    host: str,
    port: int,
    workers: int = 2,
    threads: int = 8,
    timeout: int = 0,
    log_level: str = "info",
    worker_class: Optional[str] = None,
):
    """
    Run the Flask app with Gunicorn (production-ready WSGI server).
    """
    try:
        from gunicorn.app.base import BaseApplication
    except ImportError:
        raise ImportError(
            "Gunicorn is not installed. Install it with: pip install gunicorn"
        )

    class StandaloneApplication(BaseApplication):
        """
        Gunicorn ``BaseApplication`` wrapper for a Flask app.

        This subclass configures Gunicorn programmatically using the
        ``options`` dictionary supplied at initialization.
        """

        def __init__(self, app, options=None):
            self.options = options or {}
            self.application = app
            super().__init__()

        def load_config(self):
            for key, value in self.options.items():
                if key in self.cfg.settings and value is not None:
                    self.cfg.set(key.lower(), value)

        def load(self):
            return self.application

    logger_level_app = "DEBUG" if log_level.lower() == "debug" else REST_API_LOG_LEVEL

    options = {
        "bind": bind_address(host, port),
        "workers": workers,
        "threads": threads,
        "timeout": timeout,
        "loglevel": log_level,
        "accesslog": "-",
        "errorlog": "-",
        "keepalive": 75,
    }

    if worker_class and len(worker_class.strip()):
        options["worker_class"] = worker_class

    StandaloneApplication(prepare_app(logger_level=logger_level_app), options).run()


def run_waitress_server(host: str, port: int, threads: int = 4):
    """
    Run the Flask app with Waitress
    (pure-Python production server, Windows-friendly).

    Notes
    -----
    Requires Waitress installed: pip install waitress
    """
    try:
        from waitress import serve
    except ImportError:
        raise ImportError(
            "Waitress is not installed. Install it with: pip install waitress"
        )

    serve(prepare_app(), host=host, port=port, threads=threads, channel_timeout=300)
