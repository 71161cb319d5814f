"""
Reassembly of beam-search translations into the final text.

The primary text joins beam 0 of every job with a single space, while each
alternative concatenates one secondary beam index across jobs without any
separator.  Both rules follow the engine's own output formatting.
"""

from dataclasses import dataclass, field
from typing import List, Sequence

from lmt_proxy_lib.data_models.lmt import Beam, Translation
from lmt_proxy_lib.exceptions import EmptyTranslationError, MalformedReplyError


@dataclass
class ReducedText:
    data: str
    alternatives: List[str] = field(default_factory=list)


def _beam_text(beam: Beam, translation_idx: int, beam_idx: int) -> str:
    if not len(beam.sentences):
        raise MalformedReplyError(
            f"Beam {beam_idx} of translation {translation_idx} has no sentences"
        )
    return beam.sentences[0].text


def reduce_translations(translations: Sequence[Translation]) -> ReducedText:
    """
    Merge per-job translations into the primary text and the alternatives.

    Parameters
    ----------
    translations : Sequence[Translation]
        One translation per job, in job order.

    Returns
    -------
    ReducedText
        ``data`` is the space‑joined primary text; ``alternatives`` holds one
        string for every beam index ``1..M-1`` where ``M`` is the largest beam
        count.  Jobs lacking a given beam are skipped for that alternative.

    Raises
    ------
    EmptyTranslationError
        If there is no translation or a translation has no beam.
    MalformedReplyError
        If a beam used for the output has no sentence.
    """
    if not len(translations):
        raise EmptyTranslationError("No translations to reduce")

    for idx, translation in enumerate(translations):
        if not len(translation.beams):
            raise EmptyTranslationError(f"Translation {idx} has no beams")

    data = " ".join(
        _beam_text(translation.beams[0], idx, 0)
        for idx, translation in enumerate(translations)
    )

    num_beams = max(len(translation.beams) for translation in translations)
    alternatives = []
    for beam_idx in range(1, num_beams):
        alternatives.append(
            "".join(
                _beam_text(translation.beams[beam_idx], idx, beam_idx)
                for idx, translation in enumerate(translations)
                if beam_idx < len(translation.beams)
            )
        )

    return ReducedText(data=data, alternatives=alternatives)
