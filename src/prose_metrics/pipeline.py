from __future__ import annotations

from typing import Dict, Mapping

from .config import AnalyzerConfig
from .document import Node
from .heatmap import compute_heatmap
from .models import DocumentAnalysis, Selection
from .stats import compute_statistics


def analyze_document(
    document: Node,
    selection: Selection | None = None,
    config: AnalyzerConfig | None = None,
) -> DocumentAnalysis:
    """Run the statistics and heatmap passes over one document snapshot."""
    cfg = config or AnalyzerConfig()
    if selection is not None:
        validate_selection(document, selection)
    active_text = resolve_active_text(document, selection, cfg)
    return DocumentAnalysis(
        statistics=compute_statistics(active_text, document, selection),
        heatmap=compute_heatmap(document, cfg.content_offset),
    )


def analyze_corpus(
    documents: Mapping[str, Node],
    selection: Selection | None = None,
    config: AnalyzerConfig | None = None,
) -> Dict[str, DocumentAnalysis]:
    """Analyze every document and return the results keyed by document id."""
    results: Dict[str, DocumentAnalysis] = {}
    for doc_id, document in documents.items():
        results[doc_id] = analyze_document(document, selection, config)
    return results


def resolve_active_text(
    document: Node, selection: Selection | None, config: AnalyzerConfig
) -> str:
    """Return the selected text, falling back to the full text when it is empty."""
    if selection is not None:
        selected = document.slice_text(selection, config.selection_separator)
        if selected:
            return selected
    return document.get_text(config.block_separator)


def validate_selection(document: Node, selection: Selection) -> None:
    size = document.content_size
    if selection.from_ > selection.to:
        raise ValueError(
            f"Selection start {selection.from_} is after its end {selection.to}."
        )
    if selection.from_ < 0 or selection.to > size:
        raise ValueError(
            f"Selection [{selection.from_}, {selection.to}] outside document "
            f"range [0, {size}]."
        )
