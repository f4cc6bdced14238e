from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, TypedDict

import typer
import yaml

from .config import WritingMetricsConfig, load_config
from .engine import analyze_corpus, analyze_document
from .ingest import DocumentLoadError, document_from_file, load_documents
from .models import Document
from .report import build_report, write_report
from .suggestions import generate_smart_suggestions

app = typer.Typer(help="Writing Metrics CLI.", no_args_is_help=True)


class DocumentSummary(TypedDict):
    doc_id: str
    analysis: Dict[str, Any]


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Analyze writing quality of plain text, markdown, HTML and EPUB files."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    parallel_workers: int | None = typer.Option(
        None,
        "--parallel-workers",
        "-w",
        help="Run analyzers on this many threads (1 = sequential).",
    ),
) -> None:
    """Analyze the input documents and emit a JSON summary."""
    cfg = _load_cli_config(config)
    if parallel_workers is not None:
        cfg.parallel_workers = parallel_workers
    documents = _load_documents(input_path)
    results = analyze_corpus(documents, cfg)
    summary: List[DocumentSummary] = [
        {"doc_id": doc_id, "analysis": analysis.to_dict()}
        for doc_id, analysis in sorted(results.items())
    ]
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command()
def suggest(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=False, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    smart: bool = typer.Option(
        False, "--smart", help="Emit context-aware markdown templates instead."
    ),
) -> None:
    """Print writing suggestions for a single document."""
    cfg = _load_cli_config(config)
    document = _load_single_document(input_path)
    analysis = analyze_document(document.text, cfg)
    if smart:
        typer.echo(generate_smart_suggestions(analysis, cfg.suggestions))
        return
    if not analysis.suggestions:
        typer.echo("No suggestions; the document meets every check.")
        return
    for suggestion in analysis.suggestions:
        typer.echo(f"[{suggestion.icon}] {suggestion.title}: {suggestion.content}")


@app.command()
def report(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    output: Path = typer.Option(..., "--output", "-o", dir_okay=False),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Write a CSV or parquet table of headline metrics per document."""
    if output.suffix.lower() not in {".csv", ".parquet"}:
        raise typer.BadParameter("Report output must end with .csv or .parquet.")
    cfg = _load_cli_config(config)
    frame = build_report(_load_documents(input_path), cfg)
    written = write_report(frame, output)
    typer.echo(f"Wrote {len(frame)} report rows to {written}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = WritingMetricsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> WritingMetricsConfig:
    try:
        return load_config(path)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_documents(input_path: Path) -> List[Document]:
    try:
        return load_documents(input_path)
    except DocumentLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc


def _load_single_document(input_path: Path) -> Document:
    try:
        return document_from_file(input_path, input_path.name)
    except DocumentLoadError as exc:
        raise typer.BadParameter(str(exc)) from exc


if __name__ == "__main__":
    main()
