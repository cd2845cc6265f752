"""Exception types raised at the package boundaries."""

from __future__ import annotations


class BboxError(Exception):
    """Base class for package errors."""


class BoxParseError(BboxError, ValueError):
    """Raised when text cannot be parsed into a point or box."""

    def __init__(self, text: str, reason: str) -> None:
        super().__init__(f"cannot parse {text!r}: {reason}")
        self.text = text
        self.reason = reason
