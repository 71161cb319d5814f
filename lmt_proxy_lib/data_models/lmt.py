"""
Pydantic models of the LMT JSON‑RPC protocol.

The first group describes what the engine sends back (split results and
beam‑search translations), the second group the ``LMT_handle_jobs``
envelope this library sends.  Reply models ignore keys they do not know, so
the engine may add fields without breaking validation.  Request models are
dumped with ``by_alias=True``: the engine expects ``commonJobParams`` (and
its members) in camelCase while jobs and language settings stay snake_case.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from lmt_proxy_lib.data_models.constants import (
    AUTO_LANG,
    DEFAULT_TARGET_LANG,
    JOB_KIND_DEFAULT,
    JSONRPC_VERSION,
    PREFERRED_NUM_BEAMS,
    TEXT_TYPE_PLAIN,
)


class _ReplyModel(BaseModel):
    model_config = ConfigDict(extra="ignore")


# -------------------------------------------------------------------
# Shared
# -------------------------------------------------------------------
class Sentence(_ReplyModel):
    """
    A single sentence as produced by the segmenter or a beam.

    Attributes
    ----------
    text : str
        Sentence text.
    id : Optional[int]
        Numeric identifier; re‑numbered (1‑based) when a job is built.
    prefix : Optional[str]
        Leading whitespace/punctuation kept for faithful reconstruction.
    """

    text: str
    id: Optional[int] = None
    prefix: Optional[str] = None


# -------------------------------------------------------------------
# JSON-RPC envelopes
# -------------------------------------------------------------------
class JsonRpcRequest(BaseModel):
    jsonrpc: str = JSONRPC_VERSION
    method: str
    params: Dict[str, Any]
    id: int


class JsonRpcResponse(_ReplyModel):
    id: int
    result: Dict[str, Any]


# -------------------------------------------------------------------
# LMT_split_text
# -------------------------------------------------------------------
class Chunk(_ReplyModel):
    sentences: List[Sentence]


class SplitText(_ReplyModel):
    chunks: List[Chunk]


class SplitTextResult(_ReplyModel):
    """
    ``result`` member of an ``LMT_split_text`` reply.

    ``lang`` is the language detection hint.  It is kept untyped: usually a
    mapping carrying a ``detected`` language code, but any other value is
    accepted and simply yields no hint.
    """

    lang: Any = Field(default_factory=dict)
    texts: List[SplitText]


# -------------------------------------------------------------------
# LMT_handle_jobs
# -------------------------------------------------------------------
class Job(BaseModel):
    """
    One unit of translation work: a sentence plus its neighbouring context.
    """

    kind: str = JOB_KIND_DEFAULT
    sentences: List[Sentence]
    raw_en_context_before: List[str] = Field(default_factory=list)
    raw_en_context_after: List[str] = Field(default_factory=list)
    preferred_num_beams: int = PREFERRED_NUM_BEAMS


class Preference(BaseModel):
    # Upstream-defined shape, passed through untouched
    weight: Dict[str, Any] = Field(default_factory=dict)
    default: str = "default"


class Lang(BaseModel):
    target_lang: str = DEFAULT_TARGET_LANG
    preference: Preference = Field(default_factory=Preference)
    source_lang_computed: str = AUTO_LANG


class CommonJobParams(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quality: str = "normal"
    regional_variant: str = "zh-Hans"
    mode: str = "translate"
    browser_type: int = 1
    text_type: str = TEXT_TYPE_PLAIN
    advanced_mode: bool = False


class HandleJobsParams(BaseModel):
    """
    The translation envelope: all jobs plus the shared translation settings.
    """

    model_config = ConfigDict(populate_by_name=True)

    jobs: List[Job]
    lang: Lang = Field(default_factory=Lang)
    priority: int = 1
    common_job_params: CommonJobParams = Field(
        default_factory=CommonJobParams, alias="commonJobParams"
    )
    timestamp: int


class Beam(_ReplyModel):
    sentences: List[Sentence]


class Translation(_ReplyModel):
    beams: List[Beam]


class HandleJobsResult(_ReplyModel):
    """
    ``result`` member of an ``LMT_handle_jobs`` reply.
    """

    translations: List[Translation]
    target_lang: Optional[str] = None
    source_lang: Optional[str] = None
