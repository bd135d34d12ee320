"""Serialization of outline trees to .bkm text."""

from __future__ import annotations

from bkmtree.bkm.lexer import quote
from bkmtree.bkm.parser import INDENT
from bkmtree.colors import format_color
from bkmtree.models import Destination, OutlineNode, OutlineSet, OutlineTree

__all__ = ["serialize_node", "serialize_set", "serialize_tree"]

DEFAULT_VIEW_TITLE = "default view"


def _serialize_key_val(key: str, val: str | None, parts: list[str]) -> None:
    if val is None:
        return
    parts.append(f" {key}:{quote(val)}")


def _serialize_dest(dest: Destination | None, parts: list[str]) -> None:
    if dest is None:
        return
    parts.append(f" destkind:{dest.kind}")
    _serialize_key_val("destname", dest.name, parts)
    _serialize_key_val("destvalue", dest.value, parts)
    if dest.page_no is not None and dest.page_no > 0:
        parts.append(f" destpage:{dest.page_no}")
    r = dest.rect
    if r is not None and not r.is_empty():
        parts.append(f" destrect:{r.x:f},{r.y:f},{r.dx:f},{r.dy:f}")


def serialize_node(node: OutlineNode, depth: int) -> str:
    """One node line, newline included."""

    parts = [INDENT * depth, quote(node.title)]
    if node.is_italic:
        parts.append(" font:italic")
    if node.is_bold:
        parts.append(" font:bold")
    if node.color is not None:
        parts.append(" " + format_color(node.color))
    if node.page_no is not None and node.page_no > 0:
        parts.append(f" page:{node.page_no}")
    if node.is_open_default:
        parts.append(" open-default")
    # written whenever open-default is set; is_open_toggled itself is never consulted
    if node.is_open_default:
        parts.append(" open-toggled")
    if node.is_unchecked:
        parts.append(" unchecked")
    _serialize_dest(node.destination, parts)
    parts.append("\n")
    return "".join(parts)


def serialize_tree(tree: OutlineTree) -> str:
    """The `title:` header followed by every node in pre-order."""

    lines = [f"title: {DEFAULT_VIEW_TITLE}\n"]
    for depth, node in tree.walk():
        lines.append(serialize_node(node, depth))
    return "".join(lines)


def serialize_set(outline_set: OutlineSet) -> str:
    """Every tree of `outline_set`, each preceded by its `file:` header."""

    chunks: list[str] = []
    for i, tree in enumerate(outline_set.trees):
        if i > 0:
            # a blank line ends the previous node list
            chunks.append("\n")
        chunks.append(f"file: {tree.source_path}\n")
        chunks.append(serialize_tree(tree))
    return "".join(chunks)
