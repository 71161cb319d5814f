"""
Command line entry point of the lmt‑proxy REST service (``lmt-proxy-api``).

The WSGI server is chosen by ``--gunicorn`` / ``--waitress`` or, without a
flag, by ``LMT_PROXY_SERVER_TYPE``.  The remaining defaults (host, port,
workers, threads) come from :mod:`lmt_proxy_api.base.constants`; by default
the service listens on ``[::]:59000``.

>>> lmt-proxy-api --gunicorn --workers 4
>>> python -m lmt_proxy_api.rest_api --port 8080
"""

import logging
import argparse

from lmt_proxy_api.core.server import (
    run_flask_server,
    run_gunicorn_server,
    run_waitress_server,
)
from lmt_proxy_api.base.constants import (
    SERVER_TYPE,
    SERVER_PORT,
    SERVER_HOST,
    SERVER_WORKERS_COUNT,
    SERVER_THREADS_COUNT,
    SERVER_WORKERS_CLASS,
    UPSTREAM_TIMEOUT,
)
from lmt_proxy_api.base.constants_base import ServerTypes

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lmt-proxy-api", description="Run the lmt-proxy translation API"
    )
    server = parser.add_mutually_exclusive_group()
    server.add_argument(
        "--gunicorn",
        dest="server_type",
        action="store_const",
        const=ServerTypes.GUNICORN,
        help="serve with gunicorn",
    )
    server.add_argument(
        "--waitress",
        dest="server_type",
        action="store_const",
        const=ServerTypes.WAITRESS,
        help="serve with waitress",
    )
    parser.set_defaults(server_type=SERVER_TYPE)

    parser.add_argument("--host", default=SERVER_HOST, help="bind address")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help="bind port")
    parser.add_argument(
        "--workers",
        type=int,
        default=SERVER_WORKERS_COUNT,
        help="gunicorn worker processes (default: %(default)s)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=SERVER_THREADS_COUNT,
        help="threads per worker, gunicorn and waitress (default: %(default)s)",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    if args.server_type == ServerTypes.GUNICORN:
        # A request makes two sequential upstream calls
        run_gunicorn_server(
            host=args.host,
            port=args.port,
            workers=args.workers,
            threads=args.threads,
            timeout=int(2 * UPSTREAM_TIMEOUT) + 5,
            worker_class=SERVER_WORKERS_CLASS,
        )
    elif args.server_type == ServerTypes.WAITRESS:
        run_waitress_server(host=args.host, port=args.port, threads=args.threads)
    else:
        run_flask_server(host=args.host, port=args.port)


def main() -> None:
    args = build_arg_parser().parse_args()
    logger.info(
        "Starting lmt-proxy API with %s on %s port %s",
        args.server_type,
        args.host,
        args.port,
    )
    try:
        run(args)
    except Exception:
        logger.exception("Failed to start the server")
        raise


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    main()
