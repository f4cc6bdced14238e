from __future__ import annotations

import json
from pathlib import Path

import click

from .config import load_config
from .engine import analyze_document
from .ingest import DocumentLoadError, document_from_file
from .structure import extract_outline, top_keywords


@click.group(name="inspect")
def inspect_group() -> None:
    """Human-readable writing metric summaries."""


@inspect_group.command("text")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--json-output", type=click.Path(), default=None)
@click.option("--config", "config_path", type=click.Path(exists=True), default=None)
def inspect_text(input_file: str, json_output: str | None, config_path: str | None) -> None:
    """Analyze a document and print its headline metrics."""
    path = Path(input_file)
    try:
        cfg = load_config(config_path)
        document = document_from_file(path, path.name)
    except (DocumentLoadError, ValueError) as exc:
        raise click.ClickException(str(exc)) from exc
    analysis = analyze_document(document.text, cfg)
    stats = analysis.statistics
    readability = analysis.readability

    click.echo(f"File: {input_file}")
    click.echo(
        f"Words: {stats.word_count}  Sentences: {stats.sentence_count}  "
        f"Paragraphs: {stats.paragraph_count}"
    )
    click.echo(
        f"Readability: {readability.score:.1f} ({readability.level.value}), "
        f"grade {readability.grade:.1f}"
    )
    click.echo(f"Overall score: {analysis.overall_score}")
    click.echo(
        f"Sentiment: {analysis.sentiment.label.value} "
        f"({analysis.sentiment.normalized_score:.1f})"
    )
    click.echo(f"Tone: {analysis.style.tone.value}")
    click.echo(
        f"Document type: {analysis.context.primary_type.value} "
        f"({analysis.context.purpose.value})"
    )
    click.echo(f"Lexical density: {analysis.lexical_density.density:.2f}%")
    click.echo(f"Sentence variety: {analysis.sentence_variety.composite}")
    argument = analysis.argument
    click.echo(
        f"Argument: evidence {argument.evidence}, logic {argument.logic}, "
        f"support {argument.support}, impact {argument.impact}"
    )
    keyword_list = top_keywords(document.text, limit=cfg.keyword_limit)
    if keyword_list:
        click.echo(
            "Keywords: " + ", ".join(f"{kw.word} ({kw.count})" for kw in keyword_list)
        )
    outline = extract_outline(document.text)
    for entry in outline:
        click.echo(f"{'  ' * (entry.level - 1)}- {entry.title}")
    for suggestion in analysis.suggestions:
        click.echo(f"Suggestion: {suggestion.title}")
    for fault in analysis.faults:
        click.echo(f"[warn] {fault.analyzer} failed: {fault.message}", err=True)

    if json_output is not None:
        payload = {
            "file": str(path),
            "analysis": analysis.to_dict(),
            "keywords": [{"word": kw.word, "count": kw.count} for kw in keyword_list],
            "outline": [
                {"level": entry.level, "title": entry.title}
                for entry in outline
            ],
        }
        json_path = Path(json_output)
        json_path.parent.mkdir(parents=True, exist_ok=True)
        json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        click.echo(f"Wrote detailed JSON to {json_output}")
