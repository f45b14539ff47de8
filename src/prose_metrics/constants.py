from __future__ import annotations

from typing import Final, FrozenSet

READING_WPM: Final = 238
SPEAKING_WPM: Final = 158

WARN_THRESHOLD: Final = 25.0
DANGER_THRESHOLD: Final = 35.0

KEYWORD_LIMIT: Final = 10

# Shown in place of a reading grade when the text is too short to score.
GRADE_UNAVAILABLE: Final = "—"

VOWELS: Final = "aeiouy"
SENTENCE_TERMINATORS: Final = ".!?"
RISK_PUNCTUATION: Final[FrozenSet[str]] = frozenset(",;:—–")

STOP_WORDS: Final[FrozenSet[str]] = frozenset(
    {
        "the",
        "and",
        "a",
        "to",
        "of",
        "in",
        "is",
        "it",
        "that",
        "on",
        "for",
        "with",
        "as",
        "at",
        "this",
        "by",
        "an",
        "be",
        "are",
        "from",
        "or",
        "was",
        "were",
        "but",
        "not",
    }
)
