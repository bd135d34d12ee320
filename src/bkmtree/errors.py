"""Errors raised while reading .bkm files.

Every error is a whole-file failure: callers discard the file and fall back to the
document's native outline.
"""

from __future__ import annotations


class BookmarksError(ValueError):
    """Base class for .bkm parse failures."""

    def __init__(self, message: str, *, line_no: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_no = line_no

    def __str__(self) -> str:
        if self.line_no is None:
            return self.message
        return f"line {self.line_no}: {self.message}"


class MalformedIndentation(BookmarksError):
    """Odd number of leading spaces."""


class MissingHeader(BookmarksError):
    """`file:` or `title:` header absent or empty."""


class MalformedTitle(BookmarksError):
    """No valid quoted title where one is required."""


class EmptyDocument(BookmarksError):
    """Headers present but no node lines."""
