import logging
from unittest.mock import PropertyMock, patch

import pytest
import requests

from lmt_proxy_lib.utils.http import HttpRequester
from lmt_proxy_lib.exceptions import (
    AuthenticationError,
    RateLimitError,
    UpstreamError,
)

from conftest import make_response


class TestHttpRequester:
    def test_headers_carry_session_cookie(self, upstream_config):
        http = HttpRequester(config=upstream_config)
        assert http.session.headers["cookie"] == "dl_session=abc; "
        assert http.session.headers["content-type"] == "application/json"
        assert http.session.headers["origin"] == "https://www.deepl.com"

    def test_post_uses_url_and_timeout(self, upstream_config):
        http = HttpRequester(config=upstream_config)
        with patch.object(
            http.session, "post", return_value=make_response({"ok": True})
        ) as post:
            resp = http.post(json={"a": 1})

        post.assert_called_once_with(
            "https://engine.test/jsonrpc", json={"a": 1}, timeout=5
        )
        assert resp.json() == {"ok": True}

    @pytest.mark.parametrize(
        "status_code, exc_cls",
        [
            (401, AuthenticationError),
            (403, AuthenticationError),
            (429, RateLimitError),
            (400, UpstreamError),
            (500, UpstreamError),
            (503, UpstreamError),
        ],
    )
    def test_error_status_codes(self, upstream_config, status_code, exc_cls):
        http = HttpRequester(config=upstream_config)
        with patch.object(
            http.session, "post", return_value=make_response({}, status_code)
        ):
            with pytest.raises(exc_cls):
                http.post(json={})

    def test_transport_failure_is_upstream_error(self, upstream_config):
        http = HttpRequester(config=upstream_config)
        with patch.object(
            http.session, "post", side_effect=requests.ConnectionError("refused")
        ):
            with pytest.raises(UpstreamError, match="refused"):
                http.post(json={})

    def test_timeout_is_upstream_error(self, upstream_config):
        http = HttpRequester(config=upstream_config)
        with patch.object(http.session, "post", side_effect=requests.Timeout()):
            with pytest.raises(UpstreamError):
                http.post(json={})

    def test_auth_and_rate_limit_are_upstream_errors(self):
        assert issubclass(AuthenticationError, UpstreamError)
        assert issubclass(RateLimitError, UpstreamError)

    @pytest.mark.parametrize("level, reads", [(logging.INFO, 0), (logging.DEBUG, 1)])
    def test_response_body_decoded_only_for_debug(self, upstream_config, level, reads):
        logger = logging.getLogger("lmt_proxy.tests.http_body")
        logger.setLevel(level)
        http = HttpRequester(config=upstream_config, logger=logger)

        resp = make_response({"ok": True})
        text = PropertyMock(return_value='{"ok": true}')
        type(resp).text = text
        with patch.object(http.session, "post", return_value=resp):
            http.post(json={})

        assert text.call_count == reads
