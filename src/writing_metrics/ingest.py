from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
import zipfile
from pathlib import Path, PurePosixPath
from typing import List

from bs4 import BeautifulSoup

from .models import Document

LOGGER = logging.getLogger(__name__)

# File types that can be expanded into Document instances.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".html", ".htm", ".epub"}

BLOCK_TAGS = ["p", "li", "blockquote", "pre", "h1", "h2", "h3", "h4", "h5", "h6"]
WHITESPACE_RE = re.compile(r"\s+")


class DocumentLoadError(RuntimeError):
    """Raised when an input file cannot be turned into a document."""


class EPUBParseError(DocumentLoadError):
    """Raised when an EPUB archive cannot be parsed."""


def html_to_text(html: str) -> str:
    """
    Flatten HTML into blank-line separated paragraphs.

    Innermost block elements become paragraphs and headings are rendered as
    markdown headings so the structure analyzers still see them.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    chunks: List[str] = []
    for element in soup.find_all(BLOCK_TAGS):
        if element.find(BLOCK_TAGS) is not None:
            continue
        text = WHITESPACE_RE.sub(" ", element.get_text(" ")).strip()
        if not text:
            continue
        if element.name.startswith("h") and element.name[1:].isdigit():
            text = f"{'#' * int(element.name[1:])} {text}"
        chunks.append(text)
    if not chunks:
        return WHITESPACE_RE.sub(" ", soup.get_text(" ")).strip()
    return "\n\n".join(chunks)


def extract_text_from_epub(epub_path: Path) -> str:
    """Return the text of all readable spine chapters separated by blank lines."""
    if not epub_path.exists():
        raise EPUBParseError(f"EPUB file not found: {epub_path}")

    try:
        with zipfile.ZipFile(epub_path, "r") as zf:
            opf_path = _locate_opf(zf)
            chapter_paths = _spine_chapters(zf, opf_path) or _markup_members(zf)
            chapters: List[str] = []
            for member in chapter_paths:
                try:
                    markup = zf.read(member).decode("utf-8", errors="ignore")
                except KeyError:
                    LOGGER.warning("EPUB %s lists missing chapter %s", epub_path, member)
                    continue
                text = html_to_text(markup)
                if text:
                    chapters.append(text)
            return "\n\n".join(chapters).strip()
    except zipfile.BadZipFile as exc:
        raise EPUBParseError(f"Invalid EPUB archive: {epub_path}") from exc


def _locate_opf(zf: zipfile.ZipFile) -> str:
    try:
        root = ET.fromstring(zf.read("META-INF/container.xml"))
    except KeyError as exc:
        raise EPUBParseError("EPUB missing META-INF/container.xml") from exc
    except ET.ParseError as exc:
        raise EPUBParseError("Unable to parse container.xml") from exc
    rootfile = root.find(".//{*}rootfile")
    opf_path = rootfile.attrib.get("full-path") if rootfile is not None else None
    if not opf_path:
        raise EPUBParseError("container.xml does not name a package document")
    return opf_path


def _spine_chapters(zf: zipfile.ZipFile, opf_path: str) -> List[str]:
    try:
        root = ET.fromstring(zf.read(opf_path))
    except (KeyError, ET.ParseError):
        return []

    hrefs: dict[str, str] = {}
    for item in root.iterfind(".//{*}manifest/{*}item"):
        media_type = item.attrib.get("media-type", "").lower()
        if item.attrib.get("id") and item.attrib.get("href") and _is_markup(media_type):
            hrefs[item.attrib["id"]] = item.attrib["href"]

    base = PurePosixPath(opf_path).parent
    chapters: List[str] = []
    for itemref in root.iterfind(".//{*}spine/{*}itemref"):
        href = hrefs.get(itemref.attrib.get("idref", ""))
        if href is None:
            continue
        chapters.append((base / href).as_posix() if str(base) != "." else href)
    return chapters


def _markup_members(zf: zipfile.ZipFile) -> List[str]:
    return [
        name
        for name in zf.namelist()
        if PurePosixPath(name).suffix.lower() in {".xhtml", ".html", ".htm"}
    ]


def _is_markup(media_type: str) -> bool:
    return media_type.startswith(("application/xhtml", "text/html"))


def document_from_file(path: Path, doc_id: str) -> Document:
    """Read a supported file from disk and wrap it in a Document."""
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_INPUT_EXTENSIONS:
        raise DocumentLoadError(f"Unsupported input type '{suffix}': {path}")
    if suffix == ".epub":
        return Document(doc_id=doc_id, text=extract_text_from_epub(path))
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(f"Unable to read {path}: {exc}") from exc
    if suffix in {".html", ".htm"}:
        raw = html_to_text(raw)
    return Document(doc_id=doc_id, text=raw)


def load_documents(input_path: Path) -> List[Document]:
    """Expand a file or directory into documents keyed by relative path."""
    if input_path.is_file():
        return [document_from_file(input_path, input_path.name)]
    if not input_path.is_dir():
        raise DocumentLoadError(f"Input path does not exist: {input_path}")

    documents: List[Document] = []
    for file in sorted(p for p in input_path.rglob("*") if p.is_file()):
        if file.suffix.lower() not in SUPPORTED_INPUT_EXTENSIONS:
            LOGGER.warning("Skipping unsupported file %s", file)
            continue
        documents.append(document_from_file(file, file.relative_to(input_path).as_posix()))
    return documents
