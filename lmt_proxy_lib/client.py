import time
import random
import logging

from typing import Any, Callable, Dict, Optional, Union

from lmt_proxy_lib.core.jobs import build_jobs
from lmt_proxy_lib.utils.http import HttpRequester
from lmt_proxy_lib.core.reducer import reduce_translations
from lmt_proxy_lib.data_models.config import UpstreamConfig
from lmt_proxy_lib.exceptions import NoTextAndNoPayloadError
from lmt_proxy_lib.services.split_text import SplitTextService
from lmt_proxy_lib.services.handle_jobs import HandleJobsService
from lmt_proxy_lib.core.envelope import CorrelationIdGenerator, EnvelopeAssembler
from lmt_proxy_lib.data_models.translate import (
    TranslateResponseModel,
    TranslateTextModel,
)


class LMTClient:
    """
    Runs the whole translation pipeline against the engine:
    split → build jobs → assemble envelope → handle jobs → reduce.

    The two upstream calls are strictly sequential; a failure in any stage
    aborts the translation with an :class:`~lmt_proxy_lib.exceptions.LMTProxyError`.
    """

    def __init__(
        self,
        config: Optional[UpstreamConfig] = None,
        rng: Optional[random.Random] = None,
        clock: Optional[Callable[[], int]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.config = config or UpstreamConfig()
        self.logger = logger or logging.getLogger(__name__)

        self.ids = CorrelationIdGenerator(rng=rng)
        self.assembler = EnvelopeAssembler(clock=clock)
        self.http = HttpRequester(config=self.config, logger=self.logger)

    # ------------------------------------------------------------------ #
    def translate(
        self,
        payload: Optional[Union[Dict[str, Any], TranslateTextModel]] = None,
        text: Optional[str] = None,
        source_lang: Optional[str] = None,
        target_lang: Optional[str] = None,
    ) -> TranslateResponseModel:
        if isinstance(payload, dict):
            payload = TranslateTextModel(**payload)
        elif payload is None:
            if text is None:
                raise NoTextAndNoPayloadError("No payload and no text were passed!")
            payload = TranslateTextModel(
                text=text, source_lang=source_lang, target_lang=target_lang
            )

        start_time = time.time()

        split = SplitTextService(self.http, self.ids, self.logger).split(payload.text)
        jobs = build_jobs(split.chunks)
        params = self.assembler.assemble(
            source=payload, jobs=jobs, detection=split.lang
        )
        outcome = HandleJobsService(self.http, self.ids, self.logger).translate(params)
        reduced = reduce_translations(outcome.translations)

        self.logger.info(
            "Translated %d job(s) %s -> %s, costs %.2fs",
            len(jobs),
            outcome.source_lang,
            outcome.target_lang,
            time.time() - start_time,
        )

        return TranslateResponseModel(
            alternatives=reduced.alternatives,
            data=reduced.data,
            id=outcome.id,
            source_lang=outcome.source_lang,
            target_lang=outcome.target_lang,
        )

    def close(self) -> None:
        self.http.close()

    def __enter__(self) -> "LMTClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.close()
        return False
