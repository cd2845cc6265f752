"""Corner-containment intersection test for boxes."""

from __future__ import annotations

from dataclasses import dataclass

from bbox.geometry import Box, Point


@dataclass(frozen=True, slots=True)
class CornerHits:
    """Result of each corner check performed by ``intersects``."""

    a_top_left: bool
    b_top_left: bool
    a_top_right: bool
    b_top_right: bool

    @property
    def any(self) -> bool:
        return self.a_top_left or self.b_top_left or self.a_top_right or self.b_top_right


def corner_inside(corner: Point, box: Box) -> bool:
    """Return whether ``corner`` lies strictly inside ``box``.

    Touching an edge does not count. Horizontally the span is
    ``top_left.x .. top_right.x``; vertically ``bottom_right.y .. top_left.y``.
    """
    top_left = box.top_left
    return (top_left.x < corner.x < box.top_right.x) and (
        box.bottom_right.y < corner.y < top_left.y
    )


def corner_hits(a: Box, b: Box) -> CornerHits:
    """Evaluate the four top-corner checks between two boxes."""
    return CornerHits(
        a_top_left=corner_inside(a.top_left, b),
        b_top_left=corner_inside(b.top_left, a),
        a_top_right=corner_inside(a.top_right, b),
        b_top_right=corner_inside(b.top_right, a),
    )


def intersects(a: Box, b: Box) -> bool:
    """Return whether a top corner of either box lies strictly inside the other.

    Only the top-left and top-right corners are tested, so some overlapping
    configurations (two boxes crossing like a plus sign) report ``False``.
    """
    return corner_hits(a, b).any
