from __future__ import annotations

from .constants import DANGER_THRESHOLD, WARN_THRESHOLD
from .lexical import count_risk_punctuation, count_syllables, tokenize_words
from .models import Severity

WORD_WEIGHT = 0.5
SYLLABLE_WEIGHT = 10.0
PUNCTUATION_WEIGHT = 2.0


def sentence_score(sentence: str) -> float:
    """
    Score how hard a sentence is to read.

    Long sentences, long words and clause punctuation all push the score up.
    """
    words = tokenize_words(sentence)
    word_count = len(words)
    syllables = sum(count_syllables(word) for word in words)
    avg_syllables = syllables / max(word_count, 1)
    punctuation = count_risk_punctuation(sentence)
    return (
        word_count * WORD_WEIGHT
        + avg_syllables * SYLLABLE_WEIGHT
        + punctuation * PUNCTUATION_WEIGHT
    )


def classify_sentence(sentence: str) -> Severity | None:
    """Return the severity tier for a sentence, or None when it reads fine."""
    score = sentence_score(sentence)
    if score >= DANGER_THRESHOLD:
        return Severity.DANGER
    if score >= WARN_THRESHOLD:
        return Severity.WARN
    return None
