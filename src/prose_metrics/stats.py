from __future__ import annotations

import logging
import re
from typing import Dict, List

from .constants import (
    GRADE_UNAVAILABLE,
    KEYWORD_LIMIT,
    READING_WPM,
    SPEAKING_WPM,
)
from .document import Node
from .formatting import format_time, ordinal, round_half_up
from .lexical import (
    count_syllables,
    is_stop_word,
    normalize_for_frequency,
    tokenize_words,
)
from .models import KeywordDensity, Selection, StatisticsSnapshot
from .segmentation import split_sentences

logger = logging.getLogger(__name__)

WHITESPACE_RE = re.compile(r"\s")


def compute_statistics(
    active_text: str,
    document: Node | None = None,
    selection: Selection | None = None,
) -> StatisticsSnapshot:
    """
    Compute counts, timings, reading grade and keyword density.

    ``active_text`` is what the counts are taken from: the selected text when
    there is a selection, otherwise the full document text. The document
    and selection are only used to count paragraphs.
    """
    trimmed = active_text.strip()
    words = tokenize_words(trimmed)
    sentences = split_sentences(trimmed)
    syllables = sum(count_syllables(word) for word in words)

    snapshot = StatisticsSnapshot(
        words=len(words),
        characters=len(WHITESPACE_RE.sub("", trimmed)),
        characters_with_formatting=len(trimmed),
        sentences=len(sentences),
        paragraphs=count_paragraphs(document, selection),
        reading_time=format_time(len(words), READING_WPM),
        speaking_time=format_time(len(words), SPEAKING_WPM),
        reading_grade=reading_grade(len(words), len(sentences), syllables),
        keywords=keyword_density(words),
    )
    logger.debug(
        "Computed statistics: %d words, %d sentences, grade %s",
        snapshot.words,
        snapshot.sentences,
        snapshot.reading_grade,
    )
    return snapshot


def reading_grade(words: int, sentences: int, syllables: int) -> str:
    """Flesch-Kincaid grade level rendered as an ordinal."""
    if not words or not sentences:
        return GRADE_UNAVAILABLE
    grade = 0.39 * (words / sentences) + 11.8 * (syllables / words) - 15.59
    if grade <= 0:
        return GRADE_UNAVAILABLE
    return ordinal(max(1, round_half_up(grade)))


def count_paragraphs(document: Node | None, selection: Selection | None) -> int:
    """Count top-level blocks, or every block touched by a non-empty selection."""
    if document is None:
        return 0
    if selection is None or selection.empty:
        return document.child_count
    return sum(
        1
        for node, _ in document.nodes_between(selection.from_, selection.to)
        if node.is_block
    )


def keyword_density(
    words: List[str], limit: int = KEYWORD_LIMIT
) -> List[KeywordDensity]:
    """Rank the most frequent non-stop-words; ties keep first-seen order."""
    if not words:
        return []
    frequencies: Dict[str, int] = {}
    for word in words:
        key = normalize_for_frequency(word)
        if not key or is_stop_word(key):
            continue
        frequencies[key] = frequencies.get(key, 0) + 1

    ranked = sorted(frequencies.items(), key=lambda item: item[1], reverse=True)
    total = len(words)
    return [
        KeywordDensity(word=word, frequency=count, density=count / total * 100)
        for word, count in ranked[:limit]
    ]
