"""
prose_metrics package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import AnalyzerConfig, config_from_dict, config_from_yaml, load_config
from .document import Node
from .heatmap import compute_heatmap
from .ingest import document_from_html, document_from_text, load_document
from .models import RiskSpan, Selection, Severity, StatisticsSnapshot
from .pipeline import analyze_corpus, analyze_document
from .stats import compute_statistics

__all__ = [
    "AnalyzerConfig",
    "config_from_dict",
    "config_from_yaml",
    "load_config",
    "Node",
    "compute_heatmap",
    "compute_statistics",
    "document_from_html",
    "document_from_text",
    "load_document",
    "RiskSpan",
    "Selection",
    "Severity",
    "StatisticsSnapshot",
    "analyze_document",
    "analyze_corpus",
]

__version__ = "0.1.0"
