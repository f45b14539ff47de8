from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .constants import GRADE_UNAVAILABLE


class Severity(str, Enum):
    """How strongly a sentence should be flagged."""

    WARN = "warn"
    DANGER = "danger"


@dataclass(frozen=True, slots=True)
class Selection:
    """A range of absolute document positions; equal ends mean no selection."""

    from_: int
    to: int

    @property
    def empty(self) -> bool:
        return self.from_ == self.to


@dataclass(frozen=True, slots=True)
class Sentence:
    """A sentence-like run of a text block with its absolute offsets."""

    raw_text: str
    trimmed_text: str
    start: int
    from_: int
    to: int

    @property
    def length(self) -> int:
        return len(self.trimmed_text)


@dataclass(frozen=True, slots=True)
class RiskSpan:
    """A half-open range of document positions flagged as hard to read."""

    from_: int
    to: int
    severity: Severity

    def to_dict(self) -> Dict[str, Any]:
        return {"from": self.from_, "to": self.to, "severity": self.severity.value}


@dataclass(frozen=True, slots=True)
class KeywordDensity:
    """Frequency of a keyword relative to the total word count."""

    word: str
    frequency: int
    density: float

    @property
    def density_percent(self) -> str:
        return f"{self.density:.1f}"


@dataclass(slots=True)
class StatisticsSnapshot:
    """Counts, timings, grade and keywords for the active text."""

    words: int = 0
    characters: int = 0
    characters_with_formatting: int = 0
    sentences: int = 0
    paragraphs: int = 0
    reading_time: str = "0 min"
    speaking_time: str = "0 min"
    reading_grade: str = GRADE_UNAVAILABLE
    keywords: List[KeywordDensity] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable mapping of the snapshot."""
        return {
            "words": self.words,
            "characters": self.characters,
            "characters_with_formatting": self.characters_with_formatting,
            "sentences": self.sentences,
            "paragraphs": self.paragraphs,
            "reading_time": self.reading_time,
            "speaking_time": self.speaking_time,
            "reading_grade": self.reading_grade,
            "keywords": [
                {"word": k.word, "density": k.density_percent} for k in self.keywords
            ],
        }


@dataclass(slots=True)
class DocumentAnalysis:
    """Results of one analysis pass over a document snapshot."""

    statistics: StatisticsSnapshot
    heatmap: List[RiskSpan]
