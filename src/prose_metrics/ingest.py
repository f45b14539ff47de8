from __future__ import annotations

import logging
import re
from html.parser import HTMLParser
from pathlib import Path
from typing import List

from .document import CONTAINER_TYPES, Node, doc, heading, paragraph, text

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = {".txt", ".md", ".html", ".htm"}

HEADING_RE = re.compile(r"^#{1,3}\s+")
WHITESPACE_RE = re.compile(r"\s+")


class DocumentLoadError(RuntimeError):
    """Raised when an input file cannot be turned into a document."""


def load_document(path: Path) -> Node:
    """Read a supported file from disk and build its document tree."""
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DocumentLoadError(f"Unsupported input type '{suffix}': {path}")
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Unable to read {path}: {exc}") from exc
    if suffix in {".html", ".htm"}:
        document = document_from_html(raw)
    else:
        document = document_from_text(raw)
    logger.info("Loaded %s with %d top-level blocks", path, document.child_count)
    return document


def document_from_text(value: str) -> Node:
    """
    Build a document from plain text.

    Blank lines separate paragraphs, single newlines fold into spaces and a
    paragraph starting with one to three ``#`` marks becomes a heading.
    """
    blocks: List[Node] = []
    for chunk in re.split(r"\n\s*\n", value.replace("\r\n", "\n")):
        collapsed = WHITESPACE_RE.sub(" ", chunk).strip()
        if not collapsed:
            continue
        if HEADING_RE.match(collapsed):
            blocks.append(heading(HEADING_RE.sub("", collapsed)))
        else:
            blocks.append(paragraph(collapsed))
    return doc(*blocks)


_BLOCK_TAGS = {
    "p": "paragraph",
    "h1": "heading",
    "h2": "heading",
    "h3": "heading",
    "h4": "heading",
    "h5": "heading",
    "h6": "heading",
    "blockquote": "blockquote",
    "ul": "bullet_list",
    "ol": "ordered_list",
    "li": "list_item",
}
_IGNORED_TAGS = {"script", "style", "head", "title"}
_LIST_TYPES = {"bullet_list", "ordered_list"}


class _Frame:
    __slots__ = ("type", "children", "chunks", "implicit")

    def __init__(self, node_type: str, implicit: bool = False) -> None:
        self.type = node_type
        self.implicit = implicit
        self.children: List[Node] = []
        self.chunks: List[str] = []


class _TreeBuilder(HTMLParser):
    """Collects block structure from HTML, flattening inline markup."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self._stack: List[_Frame] = [_Frame("doc")]
        self._skip_depth = 0

    @property
    def _top(self) -> _Frame:
        return self._stack[-1]

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _IGNORED_TAGS:
            self._skip_depth += 1
            return
        if tag == "br":
            self.handle_data(" ")
            return
        node_type = _BLOCK_TAGS.get(tag)
        if node_type is None:
            return
        if self._top.implicit and node_type != "list_item":
            self._close_top()
        if self._top.type not in CONTAINER_TYPES:
            # A block cannot live inside a text block; close the text block first.
            self._close_top()
        else:
            self._flush_loose_text()
        if node_type == "list_item" and self._top.type not in _LIST_TYPES:
            self._stack.append(_Frame("bullet_list", implicit=True))
        self._stack.append(_Frame(node_type))

    def handle_endtag(self, tag: str) -> None:
        if tag in _IGNORED_TAGS:
            self._skip_depth = max(0, self._skip_depth - 1)
            return
        node_type = _BLOCK_TAGS.get(tag)
        if node_type is None:
            return
        if not any(frame.type == node_type for frame in self._stack[1:]):
            return
        while self._top.type != node_type:
            self._close_top()
        self._close_top()

    def handle_data(self, data: str) -> None:
        if self._skip_depth:
            return
        if self._top.implicit and data.strip():
            # Text after a stray <li> ends the list that was opened for it.
            self._close_top()
        self._top.chunks.append(data)

    def close(self) -> None:
        super().close()
        while len(self._stack) > 1:
            self._close_top()
        self._flush_loose_text()

    def document(self) -> Node:
        return Node("doc", tuple(self._stack[0].children))

    def _flush_loose_text(self) -> None:
        self._flush_frame_text(self._top)

    def _close_top(self) -> None:
        frame = self._stack.pop()
        if frame.type in CONTAINER_TYPES:
            self._flush_frame_text(frame)
            if frame.type in _LIST_TYPES and not frame.children:
                return
            node = Node(frame.type, tuple(frame.children))
        else:
            body = _collapse("".join(frame.chunks))
            node = Node(frame.type, (text(body),) if body else ())
        self._top.children.append(node)

    @staticmethod
    def _flush_frame_text(frame: _Frame) -> None:
        loose = _collapse("".join(frame.chunks))
        frame.chunks = []
        if not loose:
            return
        if frame.type in _LIST_TYPES:
            frame.children.append(Node("list_item", (paragraph(loose),)))
        else:
            frame.children.append(paragraph(loose))


def _collapse(value: str) -> str:
    return WHITESPACE_RE.sub(" ", value).strip()


def document_from_html(html: str) -> Node:
    """Build a document tree from an HTML fragment or page."""
    builder = _TreeBuilder()
    builder.feed(html)
    builder.close()
    return builder.document()
