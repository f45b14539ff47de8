"""
Immutable document tree used as the analysis input.

Positions follow the host editor convention: a text node occupies one
position per character and every other node adds an opening and a closing
token around its content. Positions inside the root start at 0, so the
first character of a top-level paragraph sits at position 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from .models import Selection

TEXT = "text"
TEXTBLOCK_TYPES = frozenset({"paragraph", "heading"})
CONTAINER_TYPES = frozenset(
    {"doc", "blockquote", "bullet_list", "ordered_list", "list_item"}
)
NODE_TYPES = TEXTBLOCK_TYPES | CONTAINER_TYPES | {TEXT}


@dataclass(frozen=True, slots=True)
class Node:
    """A node of the document tree; only ``text`` nodes carry ``text``."""

    type: str
    content: Tuple["Node", ...] = ()
    text: str = ""

    def __post_init__(self) -> None:
        if self.type not in NODE_TYPES:
            raise ValueError(f"Unknown node type '{self.type}'.")
        if self.type == TEXT:
            if not self.text:
                raise ValueError("Text nodes must not be empty.")
            if self.content:
                raise ValueError("Text nodes cannot have content.")
            return
        if self.text:
            raise ValueError(f"Only text nodes carry text, not '{self.type}'.")
        for child in self.content:
            if self.type in TEXTBLOCK_TYPES and not child.is_text:
                raise ValueError(f"'{self.type}' may only contain text nodes.")
            if self.type in CONTAINER_TYPES and child.is_text:
                raise ValueError(f"'{self.type}' may only contain block nodes.")

    @property
    def is_text(self) -> bool:
        return self.type == TEXT

    @property
    def is_block(self) -> bool:
        return not self.is_text

    @property
    def is_textblock(self) -> bool:
        return self.type in TEXTBLOCK_TYPES

    @property
    def is_leaf(self) -> bool:
        return self.is_text

    @property
    def child_count(self) -> int:
        return len(self.content)

    @property
    def content_size(self) -> int:
        return sum(child.node_size for child in self.content)

    @property
    def node_size(self) -> int:
        if self.is_text:
            return len(self.text)
        return self.content_size + 2

    @property
    def text_content(self) -> str:
        if self.is_text:
            return self.text
        return "".join(child.text_content for child in self.content)

    def descendants(self) -> Iterator[Tuple["Node", int]]:
        """Yield every node below this one with the position before it."""
        yield from self._walk(0)

    def _walk(self, start: int) -> Iterator[Tuple["Node", int]]:
        pos = start
        for child in self.content:
            yield child, pos
            if child.content:
                yield from child._walk(pos + 1)
            pos += child.node_size

    def nodes_between(self, from_: int, to: int) -> Iterator[Tuple["Node", int]]:
        """Yield every node overlapping ``[from_, to)``, depth-first."""
        yield from self._between(from_, to, 0)

    def _between(
        self, from_: int, to: int, start: int
    ) -> Iterator[Tuple["Node", int]]:
        pos = 0
        for child in self.content:
            if pos >= to:
                break
            end = pos + child.node_size
            if end > from_:
                yield child, start + pos
                if child.content:
                    inner = pos + 1
                    yield from child._between(
                        max(0, from_ - inner),
                        min(child.content_size, to - inner),
                        start + inner,
                    )
            pos = end

    def text_between(self, from_: int, to: int, block_separator: str = "") -> str:
        """
        Return the text between two positions.

        ``block_separator`` is inserted between consecutive text blocks the
        range touches.
        """
        parts: list[str] = []
        first = True
        for node, pos in self.nodes_between(from_, to):
            if node.is_textblock and block_separator:
                if first:
                    first = False
                else:
                    parts.append(block_separator)
            if node.is_text:
                parts.append(node.text[max(from_, pos) - pos : to - pos])
        return "".join(parts)

    def get_text(self, block_separator: str = "\n\n") -> str:
        """Return the full plain text with a separator before every nested block."""
        parts: list[str] = []
        for node, pos in self.descendants():
            if node.is_block and pos > 0:
                parts.append(block_separator)
            if node.is_text:
                parts.append(node.text)
        return "".join(parts)

    def slice_text(self, selection: Selection, separator: str = " ") -> str:
        if selection.empty:
            return ""
        return self.text_between(selection.from_, selection.to, separator)


Inline = Union[str, Node]
Block = Union[str, Node]


def text(value: str) -> Node:
    return Node(TEXT, text=value)


def _inline(parts: Tuple[Inline, ...]) -> Tuple[Node, ...]:
    return tuple(text(p) if isinstance(p, str) else p for p in parts if p)


def _blocks(parts: Tuple[Block, ...]) -> Tuple[Node, ...]:
    return tuple(paragraph(p) if isinstance(p, str) else p for p in parts)


def doc(*blocks: Block) -> Node:
    return Node("doc", _blocks(blocks))


def paragraph(*parts: Inline) -> Node:
    return Node("paragraph", _inline(parts))


def heading(*parts: Inline) -> Node:
    return Node("heading", _inline(parts))


def blockquote(*blocks: Block) -> Node:
    return Node("blockquote", _blocks(blocks))


def list_item(*blocks: Block) -> Node:
    return Node("list_item", _blocks(blocks))


def bullet_list(*items: Node) -> Node:
    return Node("bullet_list", tuple(items))


def ordered_list(*items: Node) -> Node:
    return Node("ordered_list", tuple(items))
