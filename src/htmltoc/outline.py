"""Outline builder: flat heading sequence -> nested list tree.

Headings arrive in document order with depths 1-6 that need not increase by
one at a time. The builder walks them with an explicit stack of open lists
(frames), each tagged with the heading depth it holds:

  equal depth   -> sibling in the top frame
  deeper        -> new nested list under the last item of the top frame
  shallower     -> pop frames back to the heading's level, then sibling

A jump from depth 1 to depth 4 opens a single nested list, mirroring how the
document looks rather than which tag numbers were used.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

MIN_DEPTH = 1
MAX_DEPTH = 6

__all__ = [
    "BuildState",
    "HeadingRecord",
    "InvariantViolation",
    "OutlineList",
    "OutlineNode",
    "build_outline",
]


class InvariantViolation(RuntimeError):
    """Raised when the frame stack would lose its root or headings are out of order.

    Signals a programming or input-data error in the caller; never raised for
    ordinary irregular heading usage.
    """


# ---------------------------------------------------------------------------
# Data types
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class HeadingRecord:
    """One heading as seen by the builder."""

    depth: int        # 1..6, from the tag name
    identifier: str   # anchor target, unique within the document
    text: str         # rendered heading text
    position: int | None = None  # index among all headings in document order

    def __post_init__(self) -> None:
        if not MIN_DEPTH <= self.depth <= MAX_DEPTH:
            raise ValueError(
                f"depth must be between {MIN_DEPTH} and {MAX_DEPTH}, got {self.depth}"
            )


@dataclass(slots=True)
class OutlineNode:
    """A list item linking to one heading, optionally owning a nested list."""

    identifier: str
    text: str
    depth: int
    children: OutlineList | None = None

    @property
    def href(self) -> str:
        return f"#{self.identifier}"


@dataclass(slots=True)
class OutlineList:
    """Ordered list of outline items; ``ordered`` selects ``<ol>`` over ``<ul>``."""

    ordered: bool = False
    items: list[OutlineNode] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def __len__(self) -> int:
        return len(self.items)

    def iter_nodes(self, level: int = 1) -> Iterator[tuple[int, OutlineNode]]:
        """Depth-first walk yielding ``(nesting_level, node)``; root items are level 1."""
        for node in self.items:
            yield level, node
            if node.children is not None:
                yield from node.children.iter_nodes(level + 1)

    def nesting_depth(self) -> int:
        """Deepest nesting level reached, 0 for an empty outline."""
        return max((level for level, _ in self.iter_nodes()), default=0)

    def as_records(self) -> list[dict[str, object]]:
        return [
            {
                "identifier": node.identifier,
                "text": node.text,
                "depth": node.depth,
                "level": level,
            }
            for level, node in self.iter_nodes()
        ]


# ---------------------------------------------------------------------------
# Build state
# ---------------------------------------------------------------------------


@dataclass(slots=True)
class _Frame:
    depth: int
    items: OutlineList


class BuildState:
    """Stack of open lists for a single build; the root frame is never popped."""

    __slots__ = ("_frames",)

    def __init__(self, root: OutlineList, depth: int) -> None:
        self._frames: list[_Frame] = [_Frame(depth=depth, items=root)]

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def top(self) -> _Frame:
        return self._frames[-1]

    @property
    def root(self) -> OutlineList:
        return self._frames[0].items

    @property
    def depths(self) -> tuple[int, ...]:
        return tuple(frame.depth for frame in self._frames)

    def below_top_depth(self) -> int | None:
        """Depth of the frame under the top one, None when only the root is open."""
        if len(self._frames) < 2:
            return None
        return self._frames[-2].depth

    def push(self, items: OutlineList, depth: int) -> None:
        if depth <= self.top.depth:
            raise InvariantViolation(
                f"cannot open depth {depth} above depth {self.top.depth}"
            )
        self._frames.append(_Frame(depth=depth, items=items))

    def pop(self) -> _Frame:
        if len(self._frames) == 1:
            raise InvariantViolation(
                "frame stack underflow: headings are not in document order"
            )
        return self._frames.pop()

    def retag(self, depth: int) -> None:
        """Lower the top frame's depth so a shallower heading can join it."""
        below = self.below_top_depth()
        if below is not None and depth <= below:
            raise InvariantViolation(
                f"cannot retag depth {self.top.depth} to {depth} over depth {below}"
            )
        self.top.depth = depth


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def _eligible(
    headings: Iterable[HeadingRecord],
    max_depth: int,
) -> list[HeadingRecord]:
    eligible: list[HeadingRecord] = []
    last_position: int | None = None
    for heading in headings:
        if heading.position is not None:
            if last_position is not None and heading.position <= last_position:
                raise InvariantViolation(
                    f"heading {heading.identifier!r} at position {heading.position} "
                    f"follows position {last_position}"
                )
            last_position = heading.position
        if heading.depth > max_depth:
            continue
        eligible.append(heading)
    return eligible


def build_outline(
    headings: Iterable[HeadingRecord],
    max_depth: int = 3,
    ordered: bool = False,
) -> OutlineList:
    """Nest *headings* into an outline.

    Args:
        headings: Heading records in document order. May be empty.
        max_depth: Headings deeper than this are dropped before nesting.
        ordered: Render kind shared by the root and every nested list.

    Returns:
        The root OutlineList (empty if no heading is eligible).

    Raises:
        InvariantViolation: If the records are not in document order or the
            frame stack would lose its root.
    """
    root = OutlineList(ordered=ordered)
    eligible = _eligible(headings, max_depth)
    if not eligible:
        return root

    state = BuildState(root, eligible[0].depth)

    for heading in eligible:
        node = OutlineNode(
            identifier=heading.identifier,
            text=heading.text,
            depth=heading.depth,
        )

        if heading.depth > state.top.depth:
            parent = state.top.items.items[-1]
            nested = OutlineList(ordered=ordered)
            parent.children = nested
            state.push(nested, heading.depth)
        elif heading.depth < state.top.depth:
            while True:
                below = state.below_top_depth()
                if below is None or below < heading.depth:
                    break
                state.pop()
            if state.top.depth > heading.depth:
                # Lands between two open levels (or above the root): the
                # current list takes the heading's depth.
                state.retag(heading.depth)

        state.top.items.items.append(node)

    log.debug(
        "Built outline: %d items from %d eligible headings, nesting depth %d",
        sum(1 for _ in root.iter_nodes()),
        len(eligible),
        root.nesting_depth(),
    )
    return state.root
