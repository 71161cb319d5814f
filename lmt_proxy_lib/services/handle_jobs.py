"""
Translation client: the ``LMT_handle_jobs`` operation.
"""

from dataclasses import dataclass
from typing import List

from lmt_proxy_lib.exceptions import MalformedReplyError
from lmt_proxy_lib.data_models.constants import METHOD_HANDLE_JOBS
from lmt_proxy_lib.data_models.lmt import (
    HandleJobsParams,
    HandleJobsResult,
    Translation,
)
from lmt_proxy_lib.services.service_interface import BaseJsonRpcServiceInterface


@dataclass
class TranslationOutcome:
    translations: List[Translation]
    id: int
    source_lang: str
    target_lang: str


class HandleJobsService(BaseJsonRpcServiceInterface):
    """
    Sends the whole envelope and returns one translation per job.
    """

    method = METHOD_HANDLE_JOBS

    def translate(self, params: HandleJobsParams) -> TranslationOutcome:
        """
        Translate all jobs of *params*.

        Languages missing from the reply fall back to the values that were
        sent in the envelope.

        Raises
        ------
        MalformedReplyError
            If the number of translations differs from the number of jobs.
        """
        reply = self.call(params.model_dump(by_alias=True))
        result = self._parse_result(reply, HandleJobsResult)

        if len(result.translations) != len(params.jobs):
            raise MalformedReplyError(
                f"{self.method} returned {len(result.translations)} "
                f"translation(s) for {len(params.jobs)} job(s)"
            )

        return TranslationOutcome(
            translations=result.translations,
            id=reply.id,
            source_lang=result.source_lang or params.lang.source_lang_computed,
            target_lang=result.target_lang or params.lang.target_lang,
        )
