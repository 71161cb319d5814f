"""
Conversion of segmenter chunks into translation jobs.

Each chunk becomes exactly one job carrying the chunk's first sentence and,
as context, the last sentence of the previous chunk and the first sentence
of the next one.
"""

from typing import List, Sequence

from lmt_proxy_lib.exceptions import MalformedReplyError
from lmt_proxy_lib.data_models.lmt import Chunk, Job, Sentence
from lmt_proxy_lib.data_models.constants import JOB_KIND_DEFAULT, PREFERRED_NUM_BEAMS


def check_chunks(chunks: Sequence[Chunk]) -> None:
    """
    Verify that every chunk carries at least one sentence.

    Raises
    ------
    MalformedReplyError
        Naming the index of the first empty chunk.
    """
    for idx, chunk in enumerate(chunks):
        if not len(chunk.sentences):
            raise MalformedReplyError(f"Chunk {idx} has no sentences")


def build_jobs(chunks: Sequence[Chunk]) -> List[Job]:
    """
    Build one job per chunk, in chunk order.

    Parameters
    ----------
    chunks : Sequence[Chunk]
        Chunks of the first text returned by ``LMT_split_text``.

    Returns
    -------
    List[Job]
        ``len(chunks)`` jobs; job ``i`` holds sentence id ``i + 1``.
    """
    check_chunks(chunks)

    jobs = []
    last_idx = len(chunks) - 1
    for idx, chunk in enumerate(chunks):
        first = chunk.sentences[0]

        context_before = []
        if idx > 0:
            context_before.append(chunks[idx - 1].sentences[-1].text)

        context_after = []
        if idx < last_idx:
            context_after.append(chunks[idx + 1].sentences[0].text)

        jobs.append(
            Job(
                kind=JOB_KIND_DEFAULT,
                sentences=[Sentence(text=first.text, id=idx + 1, prefix=first.prefix)],
                raw_en_context_before=context_before,
                raw_en_context_after=context_after,
                preferred_num_beams=PREFERRED_NUM_BEAMS,
            )
        )
    return jobs
