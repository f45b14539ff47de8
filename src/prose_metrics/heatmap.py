from __future__ import annotations

import logging
from typing import Any, Dict, List

from .document import Node
from .models import RiskSpan, Severity
from .scoring import classify_sentence
from .segmentation import BLOCK_CONTENT_OFFSET, segment_block

logger = logging.getLogger(__name__)

DECORATION_CLASSES = {
    Severity.WARN: "heatmap-orange",
    Severity.DANGER: "heatmap-red",
}


def compute_heatmap(
    document: Node, content_offset: int = BLOCK_CONTENT_OFFSET
) -> List[RiskSpan]:
    """
    Flag every hard-to-read sentence in the document.

    Text blocks are visited depth-first and spans come out in document
    order. The whole document is rescored on every call.
    """
    spans: List[RiskSpan] = []
    blocks = 0
    for node, pos in document.descendants():
        if not node.is_textblock:
            continue
        block_text = node.text_content
        if not block_text:
            continue
        blocks += 1
        for sentence in segment_block(block_text, pos, content_offset):
            severity = classify_sentence(sentence.trimmed_text)
            if severity is None:
                continue
            spans.append(
                RiskSpan(from_=sentence.from_, to=sentence.to, severity=severity)
            )
    logger.debug("Scored %d text blocks, flagged %d sentences", blocks, len(spans))
    return spans


def decoration_class(
    severity: Severity, classes: Dict[Severity, str] | None = None
) -> str:
    """Return the CSS class the rendering surface uses for a severity."""
    return (classes or DECORATION_CLASSES)[severity]


def span_payload(
    span: RiskSpan, classes: Dict[Severity, str] | None = None
) -> Dict[str, Any]:
    """Serialize a span together with its decoration class."""
    payload = span.to_dict()
    payload["class"] = decoration_class(span.severity, classes)
    return payload
