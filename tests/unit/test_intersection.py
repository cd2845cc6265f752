from __future__ import annotations

import math
import random

from bbox.geometry import Box, Point
from bbox.intersection import CornerHits, corner_hits, corner_inside, intersects


def _box(x1: float, y1: float, x2: float, y2: float) -> Box:
    return Box(Point(x1, y1), Point(x2, y2))


def test_disjoint_boxes_do_not_intersect() -> None:
    b1 = _box(1, 1, 2, 2)
    b2 = _box(3, 3, 4, 4)
    assert not intersects(b1, b2)
    assert not intersects(b2, b1)


def test_overlap_detected_through_top_left_corner() -> None:
    b1 = _box(2, 3, 4, 1)
    b2 = _box(1, 4, 3, 2)
    assert intersects(b1, b2)
    assert intersects(b2, b1)
    assert corner_hits(b1, b2) == CornerHits(
        a_top_left=True, b_top_left=False, a_top_right=False, b_top_right=False
    )


def test_overlap_detected_through_top_right_corner() -> None:
    b1 = _box(2, 3, 4, 1)
    b2 = _box(3, 4, 5, 2)
    assert intersects(b1, b2)
    assert intersects(b2, b1)
    assert corner_hits(b1, b2) == CornerHits(
        a_top_left=False, b_top_left=False, a_top_right=True, b_top_right=False
    )
    assert corner_hits(b2, b1) == CornerHits(
        a_top_left=False, b_top_left=False, a_top_right=False, b_top_right=True
    )


def test_boxes_sharing_an_edge_do_not_intersect() -> None:
    left = _box(0, 2, 2, 0)
    right = _box(2, 2, 2, 0)
    assert not intersects(left, right)
    assert not intersects(right, left)


def test_boxes_sharing_a_single_point_do_not_intersect() -> None:
    lower = _box(0, 2, 2, 0)
    upper = _box(2, 4, 2, 2)
    assert not intersects(lower, upper)
    assert not intersects(upper, lower)


def test_corner_on_top_edge_is_not_inside() -> None:
    outer = _box(0, 2, 2, 0)
    aligned = _box(1, 2, 2, 1)
    assert not intersects(outer, aligned)
    assert not intersects(aligned, outer)

    lowered = _box(1, 1.5, 2, 1)
    assert intersects(outer, lowered)
    assert intersects(lowered, outer)


def test_crossing_boxes_without_a_top_corner_inside_do_not_intersect() -> None:
    wide = _box(0, 6, 10, 4)
    tall = _box(4, 10, 2, 0)
    assert not intersects(wide, tall)
    assert not intersects(tall, wide)


def test_contained_box_detected_through_its_top_left_corner() -> None:
    outer = _box(0, 10, 10, 0)
    inner = _box(2, 5, 2, 2)
    assert intersects(outer, inner)
    assert intersects(inner, outer)
    assert corner_hits(outer, inner).b_top_left


def test_nan_coordinates_never_intersect() -> None:
    good = _box(0, 10, 10, 0)
    bad = _box(math.nan, 5, 2, 2)
    assert not intersects(good, bad)
    assert not intersects(bad, good)


def test_corner_inside_uses_strict_bounds() -> None:
    box = _box(0, 4, 4, 0)
    assert corner_inside(Point(2, 2), box)
    assert not corner_inside(Point(0, 2), box)
    assert not corner_inside(Point(4, 2), box)
    assert not corner_inside(Point(2, 0), box)
    assert not corner_inside(Point(2, 4), box)


def test_intersects_matches_corner_hits_for_random_boxes() -> None:
    rng = random.Random(2024)
    for _ in range(500):
        a = _box(*(rng.uniform(-5.0, 5.0) for _ in range(4)))
        b = _box(*(rng.uniform(-5.0, 5.0) for _ in range(4)))
        hits = corner_hits(a, b)
        assert intersects(a, b) is hits.any
        assert hits.any == any(
            (hits.a_top_left, hits.b_top_left, hits.a_top_right, hits.b_top_right)
        )
