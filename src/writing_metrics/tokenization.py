from __future__ import annotations

import re
from typing import List

WORD_PATTERN = re.compile(r"\w+", re.ASCII)
SENTENCE_SPLIT_PATTERN = re.compile(r"[.!?]+")
PARAGRAPH_SPLIT_PATTERN = re.compile(r"\n\s*\n")


def words(text: str) -> List[str]:
    """Return lowercase word-character runs in document order."""
    return WORD_PATTERN.findall(text.lower())


def sentences(text: str) -> List[str]:
    """Split text on runs of sentence terminators, dropping blank fragments."""
    return _non_blank(SENTENCE_SPLIT_PATTERN.split(text))


def paragraphs(text: str) -> List[str]:
    """Split text on blank lines, dropping blank fragments."""
    return _non_blank(PARAGRAPH_SPLIT_PATTERN.split(text))


def split_whitespace(fragment: str) -> List[str]:
    """Whitespace-delimited tokens of a sentence or paragraph."""
    return fragment.split()


def _non_blank(fragments: List[str]) -> List[str]:
    return [fragment.strip() for fragment in fragments if fragment.strip()]
