from __future__ import annotations

import re
from typing import List

from .constants import SENTENCE_TERMINATORS
from .models import Sentence

_TERMINATORS = re.escape(SENTENCE_TERMINATORS)
SENTENCE_RUN_RE = re.compile(f"[^{_TERMINATORS}]+[{_TERMINATORS}]*")
TERMINATOR_RUN_RE = re.compile(f"[{_TERMINATORS}]+")

# Position of a text block's first character relative to the block itself.
BLOCK_CONTENT_OFFSET = 1


def segment_block(
    text: str, block_pos: int, content_offset: int = BLOCK_CONTENT_OFFSET
) -> List[Sentence]:
    """
    Split a text block into sentences with absolute document offsets.

    A sentence is a run of non-terminator characters followed by any
    terminators. Runs that are only whitespace produce no sentence. A span
    starts where its raw run starts and is as long as the trimmed sentence.
    """
    sentences: List[Sentence] = []
    for match in SENTENCE_RUN_RE.finditer(text):
        raw = match.group()
        trimmed = raw.strip()
        if not trimmed:
            continue
        # Match start, not a running sum: unmatched leading terminators are skipped.
        start = match.start()
        from_ = block_pos + content_offset + start
        sentences.append(
            Sentence(
                raw_text=raw,
                trimmed_text=trimmed,
                start=start,
                from_=from_,
                to=from_ + len(trimmed),
            )
        )
    return sentences


def split_sentences(text: str) -> List[str]:
    """Split text on terminator runs for counting, dropping empty pieces."""
    if not text:
        return []
    return [piece for piece in TERMINATOR_RUN_RE.split(text) if piece]
