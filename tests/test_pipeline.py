import pytest

from prose_metrics.config import AnalyzerConfig
from prose_metrics.constants import GRADE_UNAVAILABLE
from prose_metrics.document import doc, paragraph
from prose_metrics.models import Selection, Severity
from prose_metrics.pipeline import analyze_corpus, analyze_document
from tests.utils import LONG_SENTENCE, MIXED_PARAGRAPH


def test_analyze_document_without_selection_uses_full_text():
    """Statistics cover the whole document and the heatmap flags the long sentence."""
    analysis = analyze_document(doc(paragraph(MIXED_PARAGRAPH), paragraph("Done.")))

    assert analysis.statistics.words == 32
    assert analysis.statistics.paragraphs == 2
    assert analysis.statistics.sentences == 3
    assert [span.severity for span in analysis.heatmap] == [Severity.DANGER]


def test_analyze_document_with_selection_counts_selected_text():
    """Selection narrows the statistics but never the heatmap."""
    document = doc(paragraph("Alpha beta."), paragraph(LONG_SENTENCE))
    analysis = analyze_document(document, Selection(1, 12))

    assert analysis.statistics.words == 2
    assert analysis.statistics.paragraphs == 1
    assert [k.word for k in analysis.statistics.keywords] == ["alpha", "beta"]
    assert len(analysis.heatmap) == 1


def test_empty_selection_text_falls_back_to_full_text():
    document = doc(paragraph(), paragraph("Hello there."))
    analysis = analyze_document(document, Selection(0, 2))

    assert analysis.statistics.words == 2
    assert analysis.statistics.paragraphs == 1


def test_empty_document_analysis():
    analysis = analyze_document(doc())

    assert analysis.statistics.words == 0
    assert analysis.statistics.reading_grade == GRADE_UNAVAILABLE
    assert analysis.statistics.keywords == []
    assert analysis.heatmap == []


def test_invalid_selection_is_rejected():
    document = doc(paragraph("Hello"))
    with pytest.raises(ValueError):
        analyze_document(document, Selection(5, 2))
    with pytest.raises(ValueError):
        analyze_document(document, Selection(0, 99))


def test_analyze_corpus_uses_config_offset():
    config = AnalyzerConfig(content_offset=0)
    documents = {"a": doc(paragraph(LONG_SENTENCE)), "b": doc()}
    results = analyze_corpus(documents, config=config)

    assert set(results) == {"a", "b"}
    assert results["a"].heatmap[0].from_ == 0
    assert results["b"].heatmap == []
