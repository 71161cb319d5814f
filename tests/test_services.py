import random

import pytest

from lmt_proxy_lib.utils.http import HttpRequester
from lmt_proxy_lib.core.envelope import CorrelationIdGenerator
from lmt_proxy_lib.data_models.lmt import HandleJobsParams, Job, Sentence
from lmt_proxy_lib.services.split_text import SplitTextService
from lmt_proxy_lib.services.handle_jobs import HandleJobsService
from lmt_proxy_lib.exceptions import (
    EmptyResultError,
    MalformedReplyError,
    UpstreamError,
)

from conftest import handle_jobs_reply, split_reply


@pytest.fixture
def http(upstream_config):
    return HttpRequester(config=upstream_config)


@pytest.fixture
def ids():
    return CorrelationIdGenerator(rng=random.Random(99))


def _params(n_jobs, target_lang="ZH", source_lang="auto"):
    params = HandleJobsParams(
        jobs=[Job(sentences=[Sentence(text=f"S{i}", id=i + 1)]) for i in range(n_jobs)],
        timestamp=1,
    )
    params.lang.target_lang = target_lang
    params.lang.source_lang_computed = source_lang
    return params


class TestSplitTextService:
    def test_request_shape(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = split_reply([["Hello."]])
        SplitTextService(http, ids).split("Hello.")

        request = fake_engine.split_requests[0]
        assert request["jsonrpc"] == "2.0"
        assert request["method"] == "LMT_split_text"
        assert 60000000 <= request["id"] <= 80000000
        assert request["params"] == {
            "texts": ["Hello."],
            "commonJobParams": {"mode": "translate", "textType": "plaintext"},
            "lang": {"lang_user_selected": "auto"},
        }

    def test_chunks_and_language_hint(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = split_reply(
            [["Hello."], ["How are you?"]], detected="EN"
        )
        outcome = SplitTextService(http, ids).split("Hello. How are you?")
        assert [c.sentences[0].text for c in outcome.chunks] == [
            "Hello.",
            "How are you?",
        ]
        assert outcome.lang["detected"] == "EN"

    @pytest.mark.parametrize("lang_hint", [None, "EN", []])
    def test_any_language_hint_is_accepted(self, fake_engine, http, ids, lang_hint):
        reply = split_reply([["Hello."]])
        reply["result"]["lang"] = lang_hint
        fake_engine.replies["LMT_split_text"] = reply

        outcome = SplitTextService(http, ids).split("Hello.")
        assert outcome.lang == lang_hint
        assert len(outcome.chunks) == 1

    def test_no_texts(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = {
            "id": 1,
            "result": {"lang": {}, "texts": []},
        }
        with pytest.raises(EmptyResultError):
            SplitTextService(http, ids).split("x")

    def test_no_chunks(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = split_reply([])
        with pytest.raises(EmptyResultError):
            SplitTextService(http, ids).split("")

    def test_malformed_result(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = {"id": 1, "result": {"lang": {}}}
        with pytest.raises(MalformedReplyError):
            SplitTextService(http, ids).split("x")

    def test_missing_result(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = {"jsonrpc": "2.0", "id": 1}
        with pytest.raises(MalformedReplyError):
            SplitTextService(http, ids).split("x")

    def test_json_rpc_error(self, fake_engine, http, ids):
        fake_engine.replies["LMT_split_text"] = {
            "jsonrpc": "2.0",
            "id": 1,
            "error": {"code": 1042912, "message": "Too many requests"},
        }
        with pytest.raises(UpstreamError, match="Too many requests"):
            SplitTextService(http, ids).split("x")

    def test_undecodable_body(self, monkeypatch, http, ids):
        from conftest import make_response

        resp = make_response(None)
        resp.json.side_effect = ValueError("Expecting value")
        monkeypatch.setattr(HttpRequester, "post", lambda self, json=None: resp)
        with pytest.raises(UpstreamError, match="Invalid response format"):
            SplitTextService(http, ids).split("x")


class TestHandleJobsService:
    def test_request_carries_envelope(self, fake_engine, http, ids):
        fake_engine.replies["LMT_handle_jobs"] = handle_jobs_reply([["A"], ["B"]])
        params = _params(2)
        HandleJobsService(http, ids).translate(params)

        request = fake_engine.handle_jobs_requests[0]
        assert request["method"] == "LMT_handle_jobs"
        assert request["params"] == params.model_dump(by_alias=True)
        assert "commonJobParams" in request["params"]

    def test_outcome(self, fake_engine, http, ids):
        fake_engine.replies["LMT_handle_jobs"] = handle_jobs_reply(
            [["A1", "A2"], ["B1"]], reply_id=71234567, source_lang="EN", target_lang="DE"
        )
        outcome = HandleJobsService(http, ids).translate(_params(2))
        assert len(outcome.translations) == 2
        assert outcome.id == 71234567
        assert outcome.source_lang == "EN"
        assert outcome.target_lang == "DE"

    def test_missing_languages_fall_back_to_envelope(self, fake_engine, http, ids):
        fake_engine.replies["LMT_handle_jobs"] = handle_jobs_reply(
            [["A"]], source_lang=None, target_lang=None
        )
        outcome = HandleJobsService(http, ids).translate(
            _params(1, target_lang="JA", source_lang="EN")
        )
        assert outcome.source_lang == "EN"
        assert outcome.target_lang == "JA"

    @pytest.mark.parametrize("n_translations", [1, 3])
    def test_translation_count_mismatch(self, fake_engine, http, ids, n_translations):
        fake_engine.replies["LMT_handle_jobs"] = handle_jobs_reply(
            [["X"]] * n_translations
        )
        with pytest.raises(MalformedReplyError, match="for 2 job"):
            HandleJobsService(http, ids).translate(_params(2))

    def test_malformed_translations(self, fake_engine, http, ids):
        fake_engine.replies["LMT_handle_jobs"] = {
            "id": 1,
            "result": {"translations": [{"beams": "nope"}]},
        }
        with pytest.raises(MalformedReplyError):
            HandleJobsService(http, ids).translate(_params(1))

    def test_each_call_draws_a_new_id(self, fake_engine, http, ids):
        fake_engine.replies["LMT_handle_jobs"] = handle_jobs_reply([["A"]])
        service = HandleJobsService(http, ids)
        service.translate(_params(1))
        service.translate(_params(1))

        expected = CorrelationIdGenerator(rng=random.Random(99))
        assert [r["id"] for r in fake_engine.handle_jobs_requests] == [
            expected.next_id(),
            expected.next_id(),
        ]
