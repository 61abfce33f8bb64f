#!/usr/bin/env python3
"""Insert a table of contents into an HTML file.

Headings without an ``id`` get a GitHub-style slug. The outline replaces the
first ``<!-- toc -->`` comment (or the paragraph holding only that comment),
or is prepended when the document has no marker.

Usage::

    python3 scripts/insert_toc.py page.html -o page.toc.html --max-depth 2
    python3 scripts/insert_toc.py page.html --bare --outline-json outline.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import orjson

from htmltoc.html_utils import parse_html, read_file
from htmltoc.outline import InvariantViolation
from htmltoc.placement import place_nodes
from htmltoc.render import default_template, identity_template
from htmltoc.toc import TocOptions, build_document_outline, render_toc

log = logging.getLogger("insert_toc")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Insert a table of contents into an HTML document.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("input", type=Path, help="HTML file to process")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Write the result here (default: stdout)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=3,
        help="Deepest heading level listed (default: 3)",
    )
    parser.add_argument(
        "--ordered",
        action="store_true",
        help="Use <ol> instead of <ul>",
    )
    parser.add_argument(
        "--bare",
        action="store_true",
        help="Insert the list without the <aside> container",
    )
    parser.add_argument(
        "--outline-json",
        type=Path,
        default=None,
        help="Also write the flattened outline as JSON",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output to stderr",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    if not args.input.exists():
        log.error("Input file not found: %s", args.input)
        return 1

    try:
        options = TocOptions(
            max_depth=args.max_depth,
            ordered=args.ordered,
            template=identity_template if args.bare else default_template,
        )
    except ValueError as exc:
        log.error("%s", exc)
        return 1

    soup = parse_html(read_file(args.input))
    try:
        outline = build_document_outline(soup, options)
    except InvariantViolation as exc:
        log.error("Could not build outline for %s: %s", args.input, exc)
        return 2

    placement = place_nodes(soup, render_toc(outline, options))
    log.info(
        "%s: %d outline entries, placement=%s",
        args.input,
        len(outline.as_records()),
        placement,
    )

    if args.outline_json is not None:
        args.outline_json.parent.mkdir(parents=True, exist_ok=True)
        args.outline_json.write_bytes(
            orjson.dumps(outline.as_records(), option=orjson.OPT_INDENT_2)
        )
        log.debug("Wrote outline JSON to %s", args.outline_json)

    result = str(soup)
    if args.output is None:
        sys.stdout.write(result)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(result, encoding="utf-8")
        log.info("Wrote %s", args.output)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
