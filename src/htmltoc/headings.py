"""Heading collection: parsed document -> ordered HeadingRecords.

Every ``h1``..``h6`` element is visited in document order. Headings keep an
author-written ``id``; the rest get a fresh slug. The fresh identifiers are
returned as an explicit mapping rather than written straight into the tree,
so the caller decides when the document is mutated.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from bs4 import BeautifulSoup
from bs4.element import Tag

from htmltoc.html_utils import HEADING_TAGS, element_text, heading_depth
from htmltoc.outline import HeadingRecord
from htmltoc.slugger import Slugger


@dataclass(frozen=True, slots=True)
class HeadingScan:
    """Result of one collection pass over a document."""

    records: tuple[HeadingRecord, ...]
    elements: tuple[Tag, ...]
    # position -> generated identifier, only for headings without an id
    assigned: dict[int, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.records)


def _existing_id(tag: Tag) -> str | None:
    value = tag.get("id")
    if isinstance(value, list):
        value = " ".join(value)
    return str(value) if value else None


def collect_headings(
    soup: BeautifulSoup | Tag,
    slugger: Slugger | None = None,
) -> HeadingScan:
    """Collect every heading under *soup* in document order.

    Args:
        soup: Parsed document (or any subtree).
        slugger: Slug generator for the document scope. A fresh one is used
            when omitted, so repeated scans of an unchanged document yield
            the same identifiers.

    Returns:
        HeadingScan with records, matching elements and the identifiers that
        still have to be written back.
    """
    slugger = slugger or Slugger()
    records: list[HeadingRecord] = []
    elements: list[Tag] = []
    assigned: dict[int, str] = {}

    for position, tag in enumerate(soup.find_all(list(HEADING_TAGS))):
        text = element_text(tag)
        existing = _existing_id(tag)
        identifier = slugger.resolve(existing, text)
        if existing is None:
            assigned[position] = identifier
        records.append(HeadingRecord(
            depth=heading_depth(tag),
            identifier=identifier,
            text=text,
            position=position,
        ))
        elements.append(tag)

    return HeadingScan(
        records=tuple(records),
        elements=tuple(elements),
        assigned=assigned,
    )


def apply_identifiers(scan: HeadingScan) -> int:
    """Write generated identifiers onto their heading elements.

    Returns:
        Number of elements updated.
    """
    for position, identifier in scan.assigned.items():
        scan.elements[position]["id"] = identifier
    return len(scan.assigned)
