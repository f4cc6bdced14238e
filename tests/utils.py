from __future__ import annotations

import zipfile
from pathlib import Path

CONTAINER_XML = """<?xml version="1.0"?>
<container version="1.0" xmlns="urn:oasis:names:tc:opendocument:xmlns:container">
  <rootfiles>
    <rootfile full-path="OEBPS/content.opf" media-type="application/oebps-package+xml"/>
  </rootfiles>
</container>
"""

SAMPLE_ESSAY = (
    "# Remote Work\n\n"
    "In this article we examine how remote work changes team habits. "
    "The research shows clear benefits for focus.\n\n"
    "However, teams must plan communication carefully. "
    "Meetings should be short because attention fades quickly.\n\n"
    "In conclusion, remote work is a great option when teams support each other."
)


def chapter_xhtml(paragraphs: list[str], heading: str | None = None) -> str:
    """Wrap paragraphs in a minimal XHTML chapter body."""
    body = f"<h1>{heading}</h1>" if heading else ""
    body += "".join(f"<p>{paragraph}</p>" for paragraph in paragraphs)
    return (
        '<html xmlns="http://www.w3.org/1999/xhtml"><head><title>Chapter</title>'
        f"<style>p {{ margin: 0; }}</style></head><body>{body}</body></html>"
    )


def write_epub_fixture(
    path: Path, chapters: list[str], include_spine: bool = True
) -> Path:
    """Write an EPUB archive whose spine lists the given XHTML chapters in order."""
    manifest = []
    spine = []
    for idx, _ in enumerate(chapters, start=1):
        manifest.append(
            f'<item id="c{idx}" href="text/c{idx}.xhtml" media-type="application/xhtml+xml"/>'
        )
        spine.append(f'<itemref idref="c{idx}"/>')
    spine_block = f"<spine>{''.join(spine)}</spine>" if include_spine else "<spine/>"
    opf = (
        '<?xml version="1.0" encoding="utf-8"?>'
        '<package version="3.0" xmlns="http://www.idpf.org/2007/opf">'
        f"<manifest>{''.join(manifest)}</manifest>{spine_block}</package>"
    )
    with zipfile.ZipFile(path, "w") as zf:
        zf.writestr("mimetype", "application/epub+zip", compress_type=zipfile.ZIP_STORED)
        zf.writestr("META-INF/container.xml", CONTAINER_XML)
        zf.writestr("OEBPS/content.opf", opf)
        for idx, chapter in enumerate(chapters, start=1):
            zf.writestr(f"OEBPS/text/c{idx}.xhtml", chapter)
    return path


def write_sample_corpus(root: Path) -> Path:
    """Create a directory holding one document of each supported type."""
    corpus = root / "corpus"
    (corpus / "notes").mkdir(parents=True)
    (corpus / "essay.txt").write_text(SAMPLE_ESSAY, encoding="utf-8")
    (corpus / "notes" / "draft.md").write_text(
        "## Draft\n\nThe cat sat. The cat ran.", encoding="utf-8"
    )
    (corpus / "page.html").write_text(
        "<html><body><h2>Guide</h2><p>Follow each step of the process.</p></body></html>",
        encoding="utf-8",
    )
    (corpus / "ignored.bin").write_bytes(b"\x00\x01")
    write_epub_fixture(
        corpus / "novella.epub",
        [chapter_xhtml(["The story opens in a quiet town."], heading="Chapter One")],
    )
    return corpus
