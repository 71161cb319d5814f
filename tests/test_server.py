import os

import pytest

from lmt_proxy_api import rest_api
from lmt_proxy_api.core.server import bind_address
from lmt_proxy_api.base.constants import SERVER_HOST, SERVER_PORT
from lmt_proxy_api.base.constants_base import ServerTypes


@pytest.mark.parametrize(
    "host, expected",
    [
        ("::", "[::]:59000"),
        ("::1", "[::1]:59000"),
        ("[::1]", "[::1]:59000"),
        ("0.0.0.0", "0.0.0.0:59000"),
        ("localhost", "localhost:59000"),
    ],
)
def test_bind_address(host, expected):
    assert bind_address(host, 59000) == expected


@pytest.mark.skipif(
    "LMT_PROXY_SERVER_HOST" in os.environ, reason="host set in the environment"
)
def test_default_host_is_dual_stack():
    assert SERVER_HOST == "::"
    assert rest_api.build_arg_parser().parse_args([]).host == "::"


class TestCommandLine:
    def test_server_flags(self):
        parser = rest_api.build_arg_parser()
        assert parser.parse_args(["--gunicorn"]).server_type == ServerTypes.GUNICORN
        assert parser.parse_args(["--waitress"]).server_type == ServerTypes.WAITRESS

    def test_server_flags_are_exclusive(self):
        with pytest.raises(SystemExit):
            rest_api.build_arg_parser().parse_args(["--gunicorn", "--waitress"])

    def test_dispatch(self, monkeypatch):
        calls = []
        monkeypatch.setattr(
            rest_api, "run_waitress_server", lambda **kw: calls.append(("waitress", kw))
        )
        monkeypatch.setattr(
            rest_api, "run_flask_server", lambda **kw: calls.append(("flask", kw))
        )
        parser = rest_api.build_arg_parser()

        rest_api.run(parser.parse_args(["--waitress", "--host", "::1", "--threads", "3"]))
        flask_args = parser.parse_args(["--port", "8080"])
        flask_args.server_type = ServerTypes.FLASK
        rest_api.run(flask_args)

        assert calls == [
            ("waitress", {"host": "::1", "port": SERVER_PORT, "threads": 3}),
            ("flask", {"host": flask_args.host, "port": 8080}),
        ]
