import pytest

from prose_metrics.document import (
    Node,
    blockquote,
    bullet_list,
    doc,
    heading,
    list_item,
    paragraph,
    text,
)
from prose_metrics.models import Selection


def test_descendants_yield_positions_before_each_node():
    document = doc(paragraph("Hello"), heading("World"))
    visited = [(node.type, pos) for node, pos in document.descendants()]

    assert visited == [("paragraph", 0), ("text", 1), ("heading", 7), ("text", 8)]
    assert document.content_size == 14
    assert document.child_count == 2


def test_node_flags():
    para = paragraph("Hi")
    assert para.is_block and para.is_textblock and not para.is_text
    quote = blockquote(para)
    assert quote.is_block and not quote.is_textblock
    assert para.content[0].is_text and para.content[0].is_leaf


def test_text_between_inserts_separator_between_text_blocks():
    document = doc(paragraph("Hello"), heading("World"))
    assert document.text_between(1, 11, " ") == "Hello Wor"
    assert document.text_between(2, 4) == "el"


def test_get_text_separates_blocks():
    document = doc(paragraph("One."), paragraph("Two."))
    assert document.get_text() == "One.\n\nTwo."
    assert document.get_text(" ") == "One. Two."


def test_text_content_flattens_nested_blocks():
    document = doc(
        blockquote(paragraph("a", "b")), bullet_list(list_item("c"), list_item("d"))
    )
    assert document.text_content == "abcd"


def test_nodes_between_visits_overlapping_nodes():
    document = doc(paragraph("ab"), paragraph("cd"), paragraph("ef"))
    types = [(node.type, pos) for node, pos in document.nodes_between(5, 6)]
    assert types == [("paragraph", 4), ("text", 5)]


def test_slice_text_of_empty_selection_is_empty():
    document = doc(paragraph("Hello"))
    assert document.slice_text(Selection(3, 3)) == ""
    assert document.slice_text(Selection(1, 6)) == "Hello"


def test_invalid_trees_are_rejected():
    with pytest.raises(ValueError):
        Node("table")
    with pytest.raises(ValueError):
        Node("text")
    with pytest.raises(ValueError):
        Node("paragraph", (paragraph("nested"),))
    with pytest.raises(ValueError):
        Node("doc", (text("loose"),))


def test_nodes_are_value_objects():
    assert doc(paragraph("a")) == doc("a")
    assert hash(doc("a")) == hash(doc(paragraph("a")))
