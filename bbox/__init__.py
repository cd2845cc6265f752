"""Immutable 2D points and boxes with a corner-containment intersection test."""

__version__ = "0.1.0"

from bbox.errors import BboxError, BoxParseError
from bbox.geometry import Box, Point
from bbox.intersection import CornerHits, corner_hits, corner_inside, intersects
from bbox.parsing import parse_box, parse_coord, parse_point

__all__ = [
    "BboxError",
    "Box",
    "BoxParseError",
    "CornerHits",
    "Point",
    "corner_hits",
    "corner_inside",
    "intersects",
    "parse_box",
    "parse_coord",
    "parse_point",
]
