"""
Shared fixtures: canned engine replies and a fake engine that answers
posted JSON-RPC requests by method name.
"""

import json
import random

from typing import Any, Dict, List, Optional
from unittest.mock import MagicMock

import pytest

from lmt_proxy_lib.utils.http import HttpRequester
from lmt_proxy_lib.data_models.config import UpstreamConfig
from lmt_proxy_lib.data_models.constants import METHOD_HANDLE_JOBS, METHOD_SPLIT_TEXT

FIXED_NOW_MS = 1_700_000_000_123


def make_response(body: Any, status_code: int = 200) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = body
    resp.text = json.dumps(body)
    return resp


def split_reply(
    chunks: List[List[str]],
    detected: Optional[str] = "EN",
    reply_id: int = 70000001,
) -> Dict[str, Any]:
    lang = {"detected": detected, "isConfident": True} if detected else {}
    return {
        "jsonrpc": "2.0",
        "id": reply_id,
        "result": {
            "lang": lang,
            "texts": [
                {
                    "chunks": [
                        {"sentences": [{"text": t, "prefix": " "} for t in sentences]}
                        for sentences in chunks
                    ]
                }
            ],
        },
    }


def handle_jobs_reply(
    beams_per_job: List[List[str]],
    reply_id: int = 70000002,
    source_lang: Optional[str] = "EN",
    target_lang: Optional[str] = "ZH",
) -> Dict[str, Any]:
    result: Dict[str, Any] = {
        "translations": [
            {
                "beams": [
                    {"sentences": [{"text": text, "ids": [idx + 1]}], "num_symbols": 4}
                    for text in beams
                ],
                "quality": "normal",
            }
            for idx, beams in enumerate(beams_per_job)
        ],
    }
    if source_lang:
        result["source_lang"] = source_lang
    if target_lang:
        result["target_lang"] = target_lang
    return {"jsonrpc": "2.0", "id": reply_id, "result": result}


class FakeEngine:
    """
    Stand-in for the translation engine behind ``HttpRequester.post``.

    ``replies`` maps a JSON-RPC method to the body to return, or to an
    exception to raise.  Every posted request is recorded.
    """

    def __init__(self):
        self.replies: Dict[str, Any] = {}
        self.requests: List[Dict[str, Any]] = []

    def post(self, json: Optional[Dict[str, Any]] = None):
        self.requests.append(json)
        reply = self.replies[json["method"]]
        if isinstance(reply, Exception):
            raise reply
        return make_response(reply)

    def requests_for(self, method: str) -> List[Dict[str, Any]]:
        return [r for r in self.requests if r["method"] == method]

    @property
    def split_requests(self):
        return self.requests_for(METHOD_SPLIT_TEXT)

    @property
    def handle_jobs_requests(self):
        return self.requests_for(METHOD_HANDLE_JOBS)


@pytest.fixture
def fake_engine(monkeypatch) -> FakeEngine:
    engine = FakeEngine()
    monkeypatch.setattr(
        HttpRequester, "post", lambda self, json=None: engine.post(json=json)
    )
    return engine


@pytest.fixture
def upstream_config() -> UpstreamConfig:
    return UpstreamConfig(url="https://engine.test/jsonrpc", session="abc", timeout=5)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW_MS
