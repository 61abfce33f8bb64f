"""HTML text extraction and encoding-safe file reading.

Heading text is what a reader sees: the concatenated text of every descendant
string, whitespace collapsed, zero-width characters removed. Comments,
scripts and styles inside a heading do not contribute.

Encoding-safe file reading handles hand-edited documents with mixed encodings
(UTF-8 -> CP1252 -> replace fallback).
"""
from __future__ import annotations

import re
from pathlib import Path

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, Tag

# ---------------------------------------------------------------------------
# Heading tags
# ---------------------------------------------------------------------------

HEADING_TAGS: tuple[str, ...] = ("h1", "h2", "h3", "h4", "h5", "h6")

_SKIPPED_TEXT_PARENTS = frozenset({"script", "style", "template"})


def heading_depth(tag: Tag) -> int:
    """Return the depth (1-6) encoded in a heading tag name, 0 otherwise."""
    name = (tag.name or "").lower()
    if name in HEADING_TAGS:
        return int(name[1:])
    return 0


# ---------------------------------------------------------------------------
# Text extraction
# ---------------------------------------------------------------------------


def element_text(tag: Tag) -> str:
    """Extract the rendered text of an element.

    Args:
        tag: Element to read.

    Returns:
        Text with horizontal and vertical whitespace collapsed to single
        spaces and stripped. Empty string if the element has no text.
    """
    parts: list[str] = []
    for node in tag.descendants:
        if not isinstance(node, NavigableString) or isinstance(node, Comment):
            continue
        parent = node.parent
        if parent is not None and parent.name in _SKIPPED_TEXT_PARENTS:
            continue
        parts.append(str(node))
    text = re.sub(r"\s+", " ", "".join(parts)).strip()
    return strip_zero_width(text)


def parse_html(raw_html: str) -> BeautifulSoup:
    """Parse a document or fragment with the stdlib-backed parser.

    ``html.parser`` keeps the input as written: no ``<html>``/``<body>``
    wrappers are synthesized around fragments.
    """
    return BeautifulSoup(raw_html or "", "html.parser")


# ---------------------------------------------------------------------------
# Encoding-safe file reading
# ---------------------------------------------------------------------------


def read_file(fpath: Path, *, min_size: int = 0) -> str:
    """Read a text file with encoding fallback: UTF-8 -> CP1252 -> replace.

    Args:
        fpath: Path to the file.
        min_size: Minimum file size in bytes. Returns empty string if smaller.

    Returns:
        File contents as a string. Empty string on failure or below min_size.
    """
    try:
        if min_size > 0 and fpath.stat().st_size < min_size:
            return ""
        try:
            return fpath.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            try:
                return fpath.read_text(encoding="cp1252")
            except UnicodeDecodeError:
                with open(fpath, errors="replace") as f:
                    return f.read()
    except OSError:
        return ""


# ---------------------------------------------------------------------------
# Zero-width character stripping
# ---------------------------------------------------------------------------

# U+200B (ZWSP), U+200C (ZWNJ), U+FEFF (BOM): invisible characters from
# word-processor exports that end up inside heading slugs.
_ZERO_WIDTH_RE = re.compile("[\u200b\u200c\ufeff]")


def strip_zero_width(text: str) -> str:
    """Remove zero-width Unicode characters."""
    return _ZERO_WIDTH_RE.sub("", text)
