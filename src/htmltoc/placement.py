"""Marker lookup and splicing of the generated table of contents.

The host document marks the insertion point with a ``<!-- toc -->`` comment
(trimmed, case-insensitive). When the marker is the only content of its
element, typically ``<p><!-- toc --></p>`` from a Markdown renderer, the
whole element is replaced. Otherwise only the comment is. Without a marker
the nodes go to the very start of the document.

Only the first marker is used; later markers stay in place as comments.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Literal, TypeAlias

from bs4 import BeautifulSoup
from bs4.element import Comment, NavigableString, PageElement, Tag

log = logging.getLogger(__name__)

MARKER_TEXT = "toc"

Placement: TypeAlias = Literal["container", "marker", "prepend"]

# Never replaced wholesale, even when the marker is their only child.
_STRUCTURAL_TAGS = frozenset({"html", "head", "body"})


def is_marker(node: PageElement) -> bool:
    """True for a comment whose trimmed text is ``toc`` in any case."""
    return isinstance(node, Comment) and str(node).strip().lower() == MARKER_TEXT


def find_markers(soup: BeautifulSoup | Tag) -> list[Comment]:
    """All marker comments under *soup*, in document order."""
    return [
        node
        for node in soup.find_all(string=lambda s: isinstance(s, Comment))
        if is_marker(node)
    ]


def _is_sole_content(marker: Comment, parent: Tag) -> bool:
    for child in parent.contents:
        if child is marker:
            continue
        if isinstance(child, NavigableString) and not isinstance(child, Comment):
            if not str(child).strip():
                continue
        return False
    return True


def _replaceable_container(marker: Comment) -> Tag | None:
    parent = marker.parent
    if parent is None or isinstance(parent, BeautifulSoup):
        return None
    if (parent.name or "").lower() in _STRUCTURAL_TAGS:
        return None
    if not _is_sole_content(marker, parent):
        return None
    return parent


def _replace(target: PageElement, nodes: Sequence[PageElement]) -> None:
    if nodes:
        target.replace_with(*nodes)
    else:
        target.extract()


def place_nodes(
    soup: BeautifulSoup,
    nodes: Sequence[PageElement],
) -> Placement:
    """Splice *nodes* into *soup* following the marker protocol.

    Args:
        soup: Host document, mutated in place.
        nodes: Nodes to insert; an empty sequence removes the marker.

    Returns:
        ``"container"`` if the marker's element was replaced, ``"marker"`` if
        only the comment was, ``"prepend"`` if no marker exists.
    """
    markers = find_markers(soup)
    if not markers:
        for index, node in enumerate(nodes):
            soup.insert(index, node)
        log.debug("No toc marker found; prepended %d nodes", len(nodes))
        return "prepend"

    if len(markers) > 1:
        log.debug("Found %d toc markers; using the first", len(markers))

    marker = markers[0]
    container = _replaceable_container(marker)
    if container is not None:
        log.debug("Replacing <%s> holding the toc marker", container.name)
        _replace(container, nodes)
        return "container"

    log.debug("Replacing toc marker in place")
    _replace(marker, nodes)
    return "marker"
