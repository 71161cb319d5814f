"""
Segmenter client: the ``LMT_split_text`` operation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from lmt_proxy_lib.data_models.lmt import Chunk, SplitTextResult
from lmt_proxy_lib.exceptions import EmptyResultError
from lmt_proxy_lib.data_models.constants import (
    AUTO_LANG,
    METHOD_SPLIT_TEXT,
    TEXT_TYPE_PLAIN,
)
from lmt_proxy_lib.services.service_interface import BaseJsonRpcServiceInterface


@dataclass
class SplitOutcome:
    chunks: List[Chunk]
    lang: Any = field(default_factory=dict)


class SplitTextService(BaseJsonRpcServiceInterface):
    """
    Splits a text into sentence chunks and detects its language.

    Only the first text of the reply is used, since exactly one text is
    sent per call.
    """

    method = METHOD_SPLIT_TEXT

    @staticmethod
    def prepare_params(text: str) -> Dict[str, Any]:
        return {
            "texts": [text],
            "commonJobParams": {
                "mode": "translate",
                "textType": TEXT_TYPE_PLAIN,
            },
            "lang": {"lang_user_selected": AUTO_LANG},
        }

    def split(self, text: str) -> SplitOutcome:
        """
        Segment *text*.

        Raises
        ------
        EmptyResultError
            If the engine returns no text entry or zero chunks.
        """
        reply = self.call(self.prepare_params(text))
        result = self._parse_result(reply, SplitTextResult)

        if not len(result.texts):
            raise EmptyResultError(f"{self.method} returned no texts")
        chunks = result.texts[0].chunks
        if not len(chunks):
            raise EmptyResultError(f"{self.method} returned no chunks")

        self.logger.debug(
            "Split into %d chunk(s), language hint: %s", len(chunks), result.lang
        )
        return SplitOutcome(chunks=chunks, lang=result.lang)
