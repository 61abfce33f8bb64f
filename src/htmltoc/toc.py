"""Table-of-contents pipeline over a parsed HTML document.

Stages:
  headings.py: collect headings, resolve identifiers
  outline.py: nest headings into an OutlineList
  render.py: list markup, template, parse back to nodes
  placement.py: splice at the ``<!-- toc -->`` marker or prepend
"""
from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from bs4 import BeautifulSoup
from bs4.element import PageElement

from htmltoc.headings import apply_identifiers, collect_headings
from htmltoc.html_utils import parse_html
from htmltoc.outline import MAX_DEPTH, MIN_DEPTH, OutlineList, build_outline
from htmltoc.placement import Placement, place_nodes
from htmltoc.render import TocTemplate, default_template, render_outline, to_nodes

log = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TocOptions:
    """Caller-supplied settings; every field has a default."""

    max_depth: int = 3
    ordered: bool = False
    template: TocTemplate = default_template

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {self.max_depth!r}")
        if not MIN_DEPTH <= self.max_depth <= MAX_DEPTH:
            raise ValueError(
                f"max_depth must be between {MIN_DEPTH} and {MAX_DEPTH}, "
                f"got {self.max_depth}"
            )
        if not callable(self.template):
            raise ValueError("template must be callable")

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any] | None = None) -> TocOptions:
        """Defaults with *overrides* applied; unknown keys are rejected."""
        overrides = dict(overrides or {})
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown toc option(s): {', '.join(unknown)}")
        return replace(cls(), **overrides)


def build_document_outline(
    soup: BeautifulSoup,
    options: TocOptions | None = None,
) -> OutlineList:
    """Collect headings, write back generated ids and return the outline."""
    options = options or TocOptions()
    scan = collect_headings(soup)
    written = apply_identifiers(scan)
    log.debug("Collected %d headings, assigned %d ids", len(scan), written)
    return build_outline(scan.records, options.max_depth, options.ordered)


def render_toc(
    outline: OutlineList,
    options: TocOptions | None = None,
) -> list[PageElement]:
    """Render *outline* through the template into detached nodes; [] when empty."""
    options = options or TocOptions()
    if outline.is_empty:
        return []
    return to_nodes(options.template(render_outline(outline)))


def generate_toc(
    soup: BeautifulSoup,
    options: TocOptions | None = None,
) -> list[PageElement]:
    """Build the table of contents for *soup* as detached nodes.

    Returns an empty list when no heading is within ``max_depth``; the
    template is not applied in that case.
    """
    options = options or TocOptions()
    return render_toc(build_document_outline(soup, options), options)


def insert_toc(
    soup: BeautifulSoup,
    options: TocOptions | None = None,
) -> Placement:
    """Generate the table of contents and splice it into *soup* in place."""
    nodes = generate_toc(soup, options)
    return place_nodes(soup, nodes)


def add_toc(html: str, options: TocOptions | None = None) -> str:
    """Convenience wrapper: markup in, markup with table of contents out."""
    soup = parse_html(html)
    insert_toc(soup, options)
    return str(soup)
