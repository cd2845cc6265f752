"""Parse coordinates, points and boxes from text."""

from __future__ import annotations

from bbox.errors import BoxParseError
from bbox.geometry import Box, Point


def parse_coord(text: str) -> float:
    """Parse a single coordinate, accepting ``nan`` and ``inf``."""
    try:
        return float(text)
    except ValueError:
        raise BoxParseError(text, "not a number") from None


def _numbers(text: str, count: int) -> list[float]:
    parts = text.split(",")
    if len(parts) != count:
        raise BoxParseError(text, f"expected {count} comma-separated numbers, got {len(parts)}")
    values: list[float] = []
    for part in parts:
        try:
            values.append(parse_coord(part))
        except BoxParseError as exc:
            raise BoxParseError(text, f"not a number: {part.strip()!r}") from exc
    return values


def parse_point(text: str) -> Point:
    """Parse ``"x,y"`` into a point."""
    x, y = _numbers(text, 2)
    return Point(x, y)


def parse_box(text: str) -> Box:
    """Parse ``"x1,y1,x2,y2"`` (top-left then bottom-right) into a box."""
    x1, y1, x2, y2 = _numbers(text, 4)
    return Box(Point(x1, y1), Point(x2, y2))
