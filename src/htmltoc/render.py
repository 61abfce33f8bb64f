"""Outline rendering: OutlineList -> list markup -> template -> nodes."""
from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from bs4 import BeautifulSoup
from bs4.element import PageElement, Tag

from htmltoc.html_utils import parse_html
from htmltoc.outline import OutlineList

TocTemplate: TypeAlias = Callable[[str], str]


def default_template(html: str) -> str:
    """Wrap the list markup in the standard ``aside.toc`` container."""
    return f"""
<aside class="toc">
    <h2>Contents</h2>
    <nav>
        {html}
    </nav>
</aside>""".strip()


def identity_template(html: str) -> str:
    return html


def _list_tag(factory: BeautifulSoup, outline: OutlineList) -> Tag:
    list_tag = factory.new_tag("ol" if outline.ordered else "ul")
    for node in outline.items:
        item = factory.new_tag("li")
        link = factory.new_tag("a", href=node.href)
        link.string = node.text
        item.append(link)
        if node.children is not None and not node.children.is_empty:
            item.append(_list_tag(factory, node.children))
        list_tag.append(item)
    return list_tag


def render_outline(outline: OutlineList) -> str:
    """Serialize *outline* to compact ``<ul>``/``<ol>`` markup.

    Nested lists sit inside the ``<li>`` they belong to. Link text is escaped
    by the serializer.
    """
    factory = BeautifulSoup("", "html.parser")
    return str(_list_tag(factory, outline))


def to_nodes(markup: str) -> list[PageElement]:
    """Parse a markup fragment and return its top-level nodes, detached."""
    fragment = parse_html(markup)
    return [node.extract() for node in list(fragment.contents)]
