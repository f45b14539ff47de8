from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import AnalyzerConfig, load_config
from .document import Node
from .heatmap import compute_heatmap, span_payload
from .ingest import SUPPORTED_SUFFIXES, DocumentLoadError, load_document
from .models import DocumentAnalysis, Selection
from .pipeline import analyze_corpus

app = typer.Typer(help="Prose metrics CLI.", no_args_is_help=True)


class DocumentSummary(TypedDict):
    doc_id: str
    statistics: Dict[str, Any]
    heatmap: List[Dict[str, Any]]


class HeatmapSummary(TypedDict):
    doc_id: str
    heatmap: List[Dict[str, Any]]


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    select_from: int | None = typer.Option(
        None, "--select-from", help="Start position of the active selection."
    ),
    select_to: int | None = typer.Option(
        None, "--select-to", help="End position of the active selection."
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level (e.g., INFO or DEBUG)."
    ),
) -> None:
    """Analyze documents and emit statistics plus heatmap spans as JSON."""
    cfg = _load_config(config)
    _configure_logging(cfg, log_level)
    selection = _build_selection(select_from, select_to)
    documents = _load_documents(input_path)
    try:
        results = analyze_corpus(documents, selection, cfg)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    typer.echo(json.dumps({"documents": _build_summary(results, cfg)}, indent=2))


@app.command()
def heatmap(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    log_level: str | None = typer.Option(None, "--log-level"),
) -> None:
    """Emit only the risky sentence spans with their decoration classes."""
    cfg = _load_config(config)
    _configure_logging(cfg, log_level)
    classes = cfg.decoration_classes()
    summary: List[HeatmapSummary] = []
    for doc_id, document in sorted(_load_documents(input_path).items()):
        spans = compute_heatmap(document, cfg.content_offset)
        summary.append(
            {
                "doc_id": doc_id,
                "heatmap": [span_payload(span, classes) for span in spans],
            }
        )
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = AnalyzerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False, allow_unicode=True))


def main() -> None:
    app()


def _load_config(path: Path | None) -> AnalyzerConfig:
    """Load the config file, reporting bad files as CLI usage errors."""
    try:
        return load_config(path)
    except (ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(f"Invalid config {path}: {exc}") from exc


def _configure_logging(config: AnalyzerConfig, override: str | None) -> None:
    level_name = (override or config.log_level).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{level_name}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("prose_metrics").setLevel(level)


def _build_selection(
    select_from: int | None, select_to: int | None
) -> Selection | None:
    """Both ends are needed to describe a selection."""
    if select_from is None and select_to is None:
        return None
    if select_from is None or select_to is None:
        raise typer.BadParameter(
            "--select-from and --select-to must be used together."
        )
    return Selection(from_=select_from, to=select_to)


def _load_documents(input_path: Path) -> Dict[str, Node]:
    """Expand the input path into documents keyed by their relative path."""
    if input_path.is_file():
        return {input_path.name: _document_from_file(input_path)}

    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_SUFFIXES
    )
    documents: Dict[str, Node] = {}
    for file in files:
        documents[file.relative_to(input_path).as_posix()] = _document_from_file(file)
    return documents


def _document_from_file(path: Path) -> Node:
    try:
        return load_document(path)
    except DocumentLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _build_summary(
    results: Dict[str, DocumentAnalysis], config: AnalyzerConfig
) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each analyzed document."""
    classes = config.decoration_classes()
    summary: List[DocumentSummary] = []
    for doc_id, analysis in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "statistics": analysis.statistics.to_dict(),
                "heatmap": [span_payload(span, classes) for span in analysis.heatmap],
            }
        )
    return summary


if __name__ == "__main__":
    main()
