from __future__ import annotations

import re
from typing import List

from .constants import RISK_PUNCTUATION, STOP_WORDS, VOWELS

WHITESPACE_RE = re.compile(r"\s+")
NON_ALPHA_RE = re.compile(r"[^a-z]")
NON_ALNUM_RE = re.compile(r"[^a-z0-9]")
VOWEL_RUN_RE = re.compile(f"[{VOWELS}]{{1,2}}")


def count_syllables(word: str) -> int:
    """
    Estimate the number of syllables in a word.

    The estimate counts runs of one or two vowels, drops a trailing silent
    "e" and restores the syllable for a trailing "-le". It is a heuristic,
    not a dictionary lookup, and is wrong for plenty of English words.
    """
    cleaned = NON_ALPHA_RE.sub("", word.lower())
    if not cleaned:
        return 0
    if len(cleaned) <= 3:
        return 1
    count = len(VOWEL_RUN_RE.findall(cleaned))
    if cleaned.endswith("e"):
        count -= 1
    if cleaned.endswith("le"):
        count += 1
    return max(1, count)


def tokenize_words(text: str) -> List[str]:
    """Split text into whitespace-delimited tokens."""
    stripped = text.strip()
    if not stripped:
        return []
    return WHITESPACE_RE.split(stripped)


def is_stop_word(token: str) -> bool:
    return token.lower() in STOP_WORDS


def normalize_for_frequency(word: str) -> str:
    """Lower-case a token and keep only ASCII letters and digits."""
    return NON_ALNUM_RE.sub("", word.lower())


def count_risk_punctuation(text: str) -> int:
    """Count clause-level punctuation (commas, semicolons, colons, dashes)."""
    return sum(1 for ch in text if ch in RISK_PUNCTUATION)
