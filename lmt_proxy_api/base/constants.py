"""
Constants and configuration for the lmt‑proxy service.

All values are loaded from environment variables, allowing the deployment
environment to control behaviour without code changes.  The module groups the
settings by purpose (upstream engine, server, logging) and validates the
configuration at import time via the ``_StartAppVerificator`` class.
"""

from lmt_proxy_lib.data_models.constants import DEFAULT_ENGINE_URL

from lmt_proxy_api.base.constants_base import (
    _DontChangeMe,
    bool_env_value,
    env_value,
    ServerTypes,
    POSSIBLE_SERVER_TYPES,
)

# =============================================================================
# UPSTREAM ENGINE
# =============================================================================
# Session credential sent as the ``dl_session`` cookie
UPSTREAM_SESSION = env_value("SESSION", "", "DL_SESSION")

# JSON-RPC endpoint of the translation engine
UPSTREAM_URL = env_value("UPSTREAM_URL", DEFAULT_ENGINE_URL)

# Timeout (seconds) of a single upstream call
UPSTREAM_TIMEOUT = float(env_value("UPSTREAM_TIMEOUT", "30"))

# =============================================================================
# LOGGING
# =============================================================================
# Default name of a logging file
REST_API_LOG_FILE_NAME = env_value("LOG_FILENAME", "lmt-proxy.log")

# Default logging level
REST_API_LOG_LEVEL = env_value("LOG_LEVEL", "INFO").upper()

# Default prefix for each endpoint which does not opt out of it
DEFAULT_API_PREFIX = env_value("EP_PREFIX", "/api")

# =============================================================================
# SERVER CONFIGURATION
# =============================================================================
# Type of server, default is flask {flask, gunicorn, waitress}
SERVER_TYPE = env_value("SERVER_TYPE", ServerTypes.FLASK).lower()

# Server port, default is 59000
SERVER_PORT = int(env_value("SERVER_PORT", "59000", "PRIMARY_PORT"))

# Number of workers (if server supports multiple workers), default: 2
SERVER_WORKERS_COUNT = int(env_value("SERVER_WORKERS_COUNT", "2"))

# Number of threads (if the server supports multithreading), default: 8
SERVER_THREADS_COUNT = int(env_value("SERVER_THREADS_COUNT", "8"))

# In some servers like gunicorn is able to set worker class (f.e. gevent)
SERVER_WORKERS_CLASS = env_value("SERVER_WORKER_CLASS", "")
if not len(SERVER_WORKERS_CLASS):
    SERVER_WORKERS_CLASS = None

# Server host, default is :: (all IPv6 and, on dual-stack hosts, IPv4 addresses)
SERVER_HOST = env_value("SERVER_HOST", "::")

# Run server in debug mode
RUN_IN_DEBUG_MODE = bool_env_value(f"{_DontChangeMe.MAIN_ENV_PREFIX}IN_DEBUG")
if RUN_IN_DEBUG_MODE:
    REST_API_LOG_LEVEL = "DEBUG"


# =============================================================================
# STARTUP VALIDATION
# =============================================================================


class _StartAppVerificator:
    """
    Validate configuration at import time.

        The ``dont_run_if_something_is_wrong`` method raises informative
        exceptions when environment variables contain invalid values.
    """

    @staticmethod
    def __verify_server_type():
        if SERVER_TYPE not in POSSIBLE_SERVER_TYPES:
            raise Exception(
                f"{SERVER_TYPE} is not a valid server type.\n"
                f"Available server types: {POSSIBLE_SERVER_TYPES}\n\n"
            )

    @staticmethod
    def __verify_server_port():
        if not 0 < SERVER_PORT < 65536:
            raise Exception(
                f"{_DontChangeMe.MAIN_ENV_PREFIX}SERVER_PORT must be in "
                f"range 1-65535, got {SERVER_PORT}\n\n"
            )

    @staticmethod
    def __verify_upstream_timeout():
        if UPSTREAM_TIMEOUT <= 0:
            raise Exception(
                f"{_DontChangeMe.MAIN_ENV_PREFIX}UPSTREAM_TIMEOUT must be a "
                f"positive number of seconds, got {UPSTREAM_TIMEOUT}\n\n"
            )

    def dont_run_if_something_is_wrong(self):
        self.__verify_server_type()
        self.__verify_server_port()
        self.__verify_upstream_timeout()


_StartAppVerificator().dont_run_if_something_is_wrong()
