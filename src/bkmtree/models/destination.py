"""Destination models.

A destination is supplied by the document engine and stored verbatim; nothing in this
package interprets it beyond reading and writing its fields.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class Rect(BaseModel):
    """Axis-aligned rectangle in page coordinates."""

    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0

    def is_empty(self) -> bool:
        return self.dx == 0 or self.dy == 0


class Destination(BaseModel):
    """A target location within a document."""

    kind: str
    name: str | None = None
    value: str | None = None
    page_no: int | None = Field(default=None, ge=1)
    rect: Rect | None = None
