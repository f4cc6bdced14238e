from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pytest import LogCaptureFixture

from writing_metrics.ingest import (
    DocumentLoadError,
    EPUBParseError,
    document_from_file,
    extract_text_from_epub,
    html_to_text,
    load_documents,
)
from tests.utils import chapter_xhtml, write_epub_fixture, write_sample_corpus


def test_html_to_text_keeps_innermost_blocks():
    html = (
        "<html><head><script>track()</script></head><body>"
        "<h2>Guide</h2><p>Step   one\nhere.</p>"
        "<ul><li><p>Nested</p></li></ul></body></html>"
    )
    assert html_to_text(html) == "## Guide\n\nStep one here.\n\nNested"


def test_html_to_text_without_blocks_returns_plain_text():
    assert html_to_text("<div>Just  words</div>") == "Just words"


def test_extract_text_from_epub_reads_spine(tmp_path: Path):
    """extract_text_from_epub concatenates XHTML chapters following the spine order."""
    epub_path = write_epub_fixture(
        tmp_path / "book.epub",
        [chapter_xhtml(["Hello crew."]), chapter_xhtml(["Second chapter."])],
    )
    assert extract_text_from_epub(epub_path) == "Hello crew.\n\nSecond chapter."


def test_extract_text_from_epub_falls_back_without_spine(tmp_path: Path):
    """extract_text_from_epub still returns text when the OPF lacks a spine section."""
    epub_path = write_epub_fixture(
        tmp_path / "fallback.epub",
        [chapter_xhtml(["Fallback only."])],
        include_spine=False,
    )
    assert extract_text_from_epub(epub_path) == "Fallback only."


def test_invalid_epub_raises(tmp_path: Path):
    epub_path = tmp_path / "broken.epub"
    epub_path.write_bytes(b"not a zip archive")
    with pytest.raises(EPUBParseError):
        extract_text_from_epub(epub_path)
    with pytest.raises(DocumentLoadError):
        document_from_file(epub_path, "broken.epub")


def test_document_from_file_rejects_unsupported_suffix(tmp_path: Path):
    path = tmp_path / "paper.pdf"
    path.write_bytes(b"%PDF")
    with pytest.raises(DocumentLoadError):
        document_from_file(path, "paper.pdf")


def test_load_documents_walks_directory(tmp_path: Path, caplog: LogCaptureFixture):
    corpus = write_sample_corpus(tmp_path)
    with caplog.at_level(logging.WARNING, logger="writing_metrics.ingest"):
        documents = load_documents(corpus)

    assert [doc.doc_id for doc in documents] == [
        "essay.txt",
        "notes/draft.md",
        "novella.epub",
        "page.html",
    ]
    by_id = {doc.doc_id: doc.text for doc in documents}
    assert by_id["novella.epub"] == "# Chapter One\n\nThe story opens in a quiet town."
    assert by_id["page.html"] == "## Guide\n\nFollow each step of the process."
    assert "Skipping unsupported file" in caplog.text


def test_load_documents_single_file(tmp_path: Path):
    path = tmp_path / "note.md"
    path.write_text("Short note.", encoding="utf-8")
    documents = load_documents(path)
    assert [(doc.doc_id, doc.text) for doc in documents] == [("note.md", "Short note.")]


def test_load_documents_missing_path(tmp_path: Path):
    with pytest.raises(DocumentLoadError):
        load_documents(tmp_path / "missing")
