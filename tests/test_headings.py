"""Tests for htmltoc.headings: collection and identifier write-back."""
from __future__ import annotations

from htmltoc.headings import apply_identifiers, collect_headings
from htmltoc.html_utils import parse_html
from htmltoc.slugger import Slugger

DOC = (
    "<h1>Hello World</h1>"
    "<p>text</p>"
    '<h2 id="custom">Sub <code>part</code></h2>'
    "<section><h2>Hello World</h2><h5>Deep</h5></section>"
)


class TestCollectHeadings:
    def test_records_in_document_order(self) -> None:
        scan = collect_headings(parse_html(DOC))
        assert [(r.depth, r.text) for r in scan.records] == [
            (1, "Hello World"),
            (2, "Sub part"),
            (2, "Hello World"),
            (5, "Deep"),
        ]
        assert [r.position for r in scan.records] == [0, 1, 2, 3]
        assert len(scan) == 4

    def test_identifiers_unique_and_existing_kept(self) -> None:
        scan = collect_headings(parse_html(DOC))
        assert [r.identifier for r in scan.records] == [
            "hello-world",
            "custom",
            "hello-world-1",
            "deep",
        ]

    def test_assigned_only_for_missing_ids(self) -> None:
        scan = collect_headings(parse_html(DOC))
        assert scan.assigned == {0: "hello-world", 2: "hello-world-1", 3: "deep"}

    def test_scan_does_not_mutate_tree(self) -> None:
        soup = parse_html(DOC)
        collect_headings(soup)
        assert soup.h1.get("id") is None

    def test_empty_id_attribute_is_replaced(self) -> None:
        scan = collect_headings(parse_html('<h2 id="">Title</h2>'))
        assert scan.records[0].identifier == "title"
        assert scan.assigned == {0: "title"}

    def test_identifiers_stable_across_scans(self) -> None:
        soup = parse_html(DOC)
        first = [r.identifier for r in collect_headings(soup).records]
        second = [r.identifier for r in collect_headings(soup).records]
        assert first == second

    def test_shared_slugger_continues_numbering(self) -> None:
        slugger = Slugger()
        collect_headings(parse_html("<h1>Intro</h1>"), slugger)
        scan = collect_headings(parse_html("<h1>Intro</h1>"), slugger)
        assert scan.records[0].identifier == "intro-1"

    def test_no_headings(self) -> None:
        scan = collect_headings(parse_html("<p>nothing here</p>"))
        assert scan.records == ()
        assert scan.assigned == {}


class TestApplyIdentifiers:
    def test_writes_generated_ids(self) -> None:
        soup = parse_html(DOC)
        scan = collect_headings(soup)
        assert apply_identifiers(scan) == 3
        assert [h.get("id") for h in soup.find_all(["h1", "h2", "h5"])] == [
            "hello-world",
            "custom",
            "hello-world-1",
            "deep",
        ]

    def test_rescan_after_write_back_is_identical(self) -> None:
        soup = parse_html(DOC)
        before = collect_headings(soup)
        apply_identifiers(before)
        after = collect_headings(soup)
        assert after.records == before.records
        assert after.assigned == {}
