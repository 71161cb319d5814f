"""
Request/response models of the public ``/translate`` endpoint.

``TRANSLATE_TEXT_REQ`` lists the argument names the REST endpoint checks
before the payload is validated.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from lmt_proxy_lib.data_models.constants import (
    RESPONSE_CODE_OK,
    RESPONSE_METHOD,
    TEXT_PARAM,
)


class TranslateTextModel(BaseModel):
    """
    Payload for the “translate” endpoint.

    Attributes
    ----------
    text : str
        Text to translate; it is segmented into sentences by the engine.
    source_lang : Optional[str]
        Source language hint, used only when the engine does not detect one.
    target_lang : Optional[str]
        Target language; the engine default (``"ZH"``) when omitted.
    """

    text: str
    source_lang: Optional[str] = None
    target_lang: Optional[str] = None


# Required arguments for ``TranslateTextModel``.
TRANSLATE_TEXT_REQ = [TEXT_PARAM]


class TranslateResponseModel(BaseModel):
    """
    Simplified reply returned to the caller.

    Attributes
    ----------
    alternatives : List[str]
        One full‑text alternative per secondary beam index.
    code : int
        Status code, ``200`` on success.
    data : str
        Primary translation.
    id : int
        Correlation id echoed by the engine.
    method : str
        Access method tag.
    source_lang, target_lang : str
        Languages resolved by the engine.
    """

    alternatives: List[str] = Field(default_factory=list)
    code: int = RESPONSE_CODE_OK
    data: str
    id: int
    method: str = RESPONSE_METHOD
    source_lang: str
    target_lang: str
