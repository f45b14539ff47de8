from __future__ import annotations

from pathlib import Path

SHORT_SENTENCE = "This is a short sentence."
LONG_SENTENCE = (
    "But here is a much longer and more syntactically complicated sentence, "
    "containing several clauses, semicolons; and extra punctuation: to push "
    "its score past the danger threshold."
)
MIXED_PARAGRAPH = f"{SHORT_SENTENCE} {LONG_SENTENCE}"
WARN_SENTENCE = (
    "The quick brown fox, the lazy dog, and the cat ran over the river bank: today."
)


def write_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus containing a .txt and an .html source."""
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    (corpus_dir / "draft.txt").write_text(
        f"# Notes\n\n{MIXED_PARAGRAPH}\n\nSailors watched the winds.",
        encoding="utf-8",
    )
    (corpus_dir / "page.html").write_text(
        f"<h1>Report</h1><p>{LONG_SENTENCE}</p><ul><li>One item.</li></ul>",
        encoding="utf-8",
    )
    (corpus_dir / "ignored.csv").write_text("a,b\n", encoding="utf-8")
    return corpus_dir
