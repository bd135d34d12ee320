"""Pydantic models used across the project."""

from __future__ import annotations

from bkmtree.models.destination import Destination, Rect
from bkmtree.models.outline import Color, FontFlag, OutlineNode, OutlineSet, OutlineTree

__all__ = [
    "Color",
    "Destination",
    "FontFlag",
    "OutlineNode",
    "OutlineSet",
    "OutlineTree",
    "Rect",
]
