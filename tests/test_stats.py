from prose_metrics.constants import GRADE_UNAVAILABLE
from prose_metrics.document import bullet_list, doc, list_item, paragraph
from prose_metrics.models import Selection
from prose_metrics.stats import compute_statistics, count_paragraphs, keyword_density
from tests.utils import LONG_SENTENCE


def test_empty_text_yields_zero_counts():
    stats = compute_statistics("   ", doc())

    assert stats.words == 0
    assert stats.characters == 0
    assert stats.characters_with_formatting == 0
    assert stats.sentences == 0
    assert stats.paragraphs == 0
    assert stats.reading_time == "0 min"
    assert stats.speaking_time == "0 min"
    assert stats.reading_grade == GRADE_UNAVAILABLE
    assert stats.keywords == []


def test_counts_for_simple_text():
    stats = compute_statistics(" The cat sat. The dog ran! ")

    assert stats.words == 6
    assert stats.sentences == 2
    assert stats.characters == 20
    assert stats.characters_with_formatting == 25
    assert stats.paragraphs == 0
    assert stats.reading_time == "2 sec"
    assert stats.speaking_time == "2 sec"
    # Negative grade for very easy text falls back to the sentinel.
    assert stats.reading_grade == GRADE_UNAVAILABLE
    assert [k.word for k in stats.keywords] == ["cat", "sat", "dog", "ran"]
    assert stats.keywords[0].density_percent == "16.7"


def test_reading_grade_for_complex_sentence():
    stats = compute_statistics(LONG_SENTENCE)
    assert stats.words == 26
    assert stats.sentences == 1
    assert stats.reading_grade == "16th"


def test_keyword_density_ranks_by_frequency_then_first_seen():
    keywords = keyword_density("beta alpha beta alpha gamma the and".split())

    assert [(k.word, k.frequency) for k in keywords] == [
        ("beta", 2),
        ("alpha", 2),
        ("gamma", 1),
    ]
    assert keywords[0].density_percent == "28.6"


def test_keyword_density_limits_and_excludes_stop_words():
    words = [f"word{i}" for i in range(15) for _ in range(i + 1)] + ["the"] * 50
    keywords = keyword_density(words)

    assert len(keywords) == 10
    assert keywords[0].word == "word14"
    assert all(k.word != "the" for k in keywords)
    assert sum(k.density for k in keywords) <= 100


def test_keyword_density_skips_empty_normalizations():
    keywords = keyword_density(["—", "!!", "Data,", "data"])
    assert [(k.word, k.frequency) for k in keywords] == [("data", 2)]
    assert keywords[0].density_percent == "50.0"


def test_paragraphs_without_selection_count_top_level_blocks():
    document = doc(paragraph("a"), paragraph("b"), bullet_list(list_item("c")))
    assert count_paragraphs(document, None) == 3
    assert count_paragraphs(document, Selection(4, 4)) == 3


def test_paragraphs_with_selection_count_every_block_in_range():
    document = doc(paragraph("a"), paragraph("b"), bullet_list(list_item("c")))
    assert count_paragraphs(document, Selection(1, 5)) == 2
    assert count_paragraphs(document, Selection(1, 10)) == 5


def test_statistics_to_dict_is_json_ready():
    payload = compute_statistics("Data drives data decisions.").to_dict()
    assert payload["words"] == 4
    assert payload["keywords"][0] == {"word": "data", "density": "50.0"}
