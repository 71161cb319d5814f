"""
Assembly of the ``LMT_handle_jobs`` envelope.

Besides wrapping the jobs with language and job settings, the assembler
derives two values the engine checks:

* the request ``timestamp``: the current time in milliseconds, rounded down
  to a multiple of the number of ``i`` characters in the text and shifted
  up by that number,
* the text type (``richtext`` when the text looks like markup).

Correlation ids for the JSON‑RPC calls come from
:class:`CorrelationIdGenerator`.  Both the clock and the random source are
injectable so the envelope can be reproduced in tests.
"""

import random
import time

from typing import Any, Callable, List, Mapping, Optional

from lmt_proxy_lib.data_models.lmt import (
    CommonJobParams,
    HandleJobsParams,
    Job,
    Lang,
)
from lmt_proxy_lib.data_models.translate import TranslateTextModel
from lmt_proxy_lib.data_models.constants import (
    AUTO_LANG,
    CORRELATION_ID_MAX,
    CORRELATION_ID_MIN,
    DETECTED_LANG_KEY,
    TEXT_TYPE_PLAIN,
    TEXT_TYPE_RICH,
)


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def count_i(text: str) -> int:
    return text.count("i")


def compute_timestamp(text: str, current_ms: int) -> int:
    """
    Derive the request timestamp from *text* and the current time.

    With ``k`` occurrences of ``i`` in the text the result is
    ``current_ms - current_ms % k + k``; without any ``i`` it is
    ``current_ms`` itself.
    """
    i_count = count_i(text)
    if not i_count:
        return current_ms
    return current_ms - current_ms % i_count + i_count


def is_rich_text(text: str) -> bool:
    """
    Return ``True`` when a ``<`` is followed somewhere later by a ``>``.

    This is a loose markup heuristic, not HTML validation.
    """
    open_idx = text.find("<")
    if open_idx < 0:
        return False
    return ">" in text[open_idx + 1 :]


def resolve_source_lang(
    configured: str,
    detection: Any,
    hint: Optional[str],
) -> str:
    """
    Resolve the source language sent to the engine.

    Only an ``"auto"`` setting is resolved: first from the segmenter's
    detected language (when *detection* is a mapping whose ``detected`` is a
    string), then from the caller's hint.  A supplied hint is forwarded as
    is, even when empty.
    """
    if configured != AUTO_LANG:
        return configured

    if isinstance(detection, Mapping):
        detected = detection.get(DETECTED_LANG_KEY)
        if isinstance(detected, str):
            return detected
    if hint is not None:
        return hint
    return AUTO_LANG


class CorrelationIdGenerator:
    """
    Draw JSON‑RPC ids uniformly from ``[60000000, 80000000]``.

    Parameters
    ----------
    rng : Optional[random.Random]
        Random source; a fresh, OS‑seeded ``random.Random`` when omitted.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def next_id(self) -> int:
        return self._rng.randint(CORRELATION_ID_MIN, CORRELATION_ID_MAX)


class EnvelopeAssembler:
    """
    Wrap jobs and request metadata into :class:`HandleJobsParams`.

    Parameters
    ----------
    clock : Optional[Callable[[], int]]
        Returns the current Unix time in milliseconds; defaults to
        :func:`now_ms`.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or now_ms

    def assemble(
        self,
        source: TranslateTextModel,
        jobs: List[Job],
        detection: Any = None,
    ) -> HandleJobsParams:
        """
        Build the envelope for *source* translated as *jobs*.

        Parameters
        ----------
        source : TranslateTextModel
            Original request (text and optional language hints).
        jobs : List[Job]
            Jobs produced by :func:`lmt_proxy_lib.core.jobs.build_jobs`.
        detection : Any
            ``lang`` member of the split reply; values other than a mapping
            carry no detected language.
        """
        params = HandleJobsParams(
            jobs=jobs,
            lang=Lang(),
            common_job_params=CommonJobParams(),
            timestamp=compute_timestamp(source.text, self._clock()),
        )

        params.lang.source_lang_computed = resolve_source_lang(
            configured=params.lang.source_lang_computed,
            detection=detection,
            hint=source.source_lang,
        )
        if source.target_lang is not None:
            params.lang.target_lang = source.target_lang

        params.common_job_params.advanced_mode = True
        params.common_job_params.text_type = (
            TEXT_TYPE_RICH if is_rich_text(source.text) else TEXT_TYPE_PLAIN
        )
        return params
