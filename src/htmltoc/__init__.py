"""Table of contents generation for HTML documents."""

from htmltoc.headings import HeadingScan, apply_identifiers, collect_headings
from htmltoc.outline import (
    BuildState,
    HeadingRecord,
    InvariantViolation,
    OutlineList,
    OutlineNode,
    build_outline,
)
from htmltoc.placement import find_markers, place_nodes
from htmltoc.render import (
    default_template,
    identity_template,
    render_outline,
    to_nodes,
)
from htmltoc.slugger import Slugger, slugify
from htmltoc.toc import (
    TocOptions,
    add_toc,
    build_document_outline,
    generate_toc,
    insert_toc,
    render_toc,
)

__all__ = [
    "BuildState",
    "HeadingRecord",
    "HeadingScan",
    "InvariantViolation",
    "OutlineList",
    "OutlineNode",
    "Slugger",
    "TocOptions",
    "add_toc",
    "apply_identifiers",
    "build_document_outline",
    "build_outline",
    "collect_headings",
    "default_template",
    "find_markers",
    "generate_toc",
    "identity_template",
    "insert_toc",
    "place_nodes",
    "render_outline",
    "render_toc",
    "slugify",
    "to_nodes",
]
