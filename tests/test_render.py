"""Tests for htmltoc.render."""
from __future__ import annotations

from bs4.element import Tag

from htmltoc.outline import HeadingRecord, OutlineList, build_outline
from htmltoc.render import default_template, identity_template, render_outline, to_nodes


def _outline(ordered: bool = False) -> OutlineList:
    headings = [
        HeadingRecord(depth=1, identifier="a", text="A", position=0),
        HeadingRecord(depth=2, identifier="b", text="B", position=1),
        HeadingRecord(depth=1, identifier="c", text="C", position=2),
    ]
    return build_outline(headings, max_depth=3, ordered=ordered)


class TestRenderOutline:
    def test_nested_list_inside_item(self) -> None:
        assert render_outline(_outline()) == (
            '<ul><li><a href="#a">A</a>'
            '<ul><li><a href="#b">B</a></li></ul></li>'
            '<li><a href="#c">C</a></li></ul>'
        )

    def test_ordered(self) -> None:
        html = render_outline(_outline(ordered=True))
        assert html.startswith("<ol>")
        assert "<ul>" not in html
        assert html.count("<ol>") == 2

    def test_text_is_escaped(self) -> None:
        outline = build_outline(
            [HeadingRecord(depth=1, identifier="qa", text="Q&A <tips>")]
        )
        assert render_outline(outline) == (
            '<ul><li><a href="#qa">Q&amp;A &lt;tips&gt;</a></li></ul>'
        )

    def test_empty_outline(self) -> None:
        assert render_outline(build_outline([])) == "<ul></ul>"


class TestTemplates:
    def test_default_template_wraps(self) -> None:
        html = default_template("<ul></ul>")
        assert html.startswith('<aside class="toc">')
        assert "<h2>Contents</h2>" in html
        assert "<nav>\n        <ul></ul>\n    </nav>" in html
        assert html.endswith("</aside>")

    def test_identity_template(self) -> None:
        assert identity_template("<ul></ul>") == "<ul></ul>"


class TestToNodes:
    def test_detached_top_level_nodes(self) -> None:
        nodes = to_nodes(default_template(render_outline(_outline())))
        tags = [n for n in nodes if isinstance(n, Tag)]
        assert [t.name for t in tags] == ["aside"]
        assert all(n.parent is None for n in nodes)
        assert tags[0].nav is not None
        assert [a["href"] for a in tags[0].find_all("a")] == ["#a", "#b", "#c"]

    def test_multiple_roots(self) -> None:
        nodes = to_nodes("<hr><ul></ul>")
        assert [n.name for n in nodes] == ["hr", "ul"]

    def test_empty_markup(self) -> None:
        assert to_nodes("") == []
