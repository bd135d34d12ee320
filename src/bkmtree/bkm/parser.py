"""Parsing of a single node line.

A node line is::

    <indentation> "quoted title" metadata*

Indentation is two spaces per level. Metadata tokens are matched in a fixed order and
unknown tokens are skipped, so files written by newer versions still load.
"""

from __future__ import annotations

from dataclasses import dataclass

from bkmtree.bkm.lexer import parse_quoted
from bkmtree.bkm.scanner import Token, iter_tokens
from bkmtree.colors import parse_color
from bkmtree.errors import MalformedIndentation
from bkmtree.models import Destination, FontFlag, OutlineNode

__all__ = ["ParsedLine", "parse_line", "parse_destination", "STUB_DESTINATION_KIND"]

INDENT = "  "
STUB_DESTINATION_KIND = "scrollTo"


@dataclass
class ParsedLine:
    """A freshly parsed node and the depth it was found at."""

    node: OutlineNode
    depth: int


def count_indent(line: str) -> int:
    n = 0
    while n < len(line) and line[n] == " ":
        n += 1
    return n


def parse_destination(token: Token) -> Destination | None:
    """Destination for a `page:` token.

    Only the prefix is recognised: the result always targets page 1.
    """

    if not token.raw.startswith("page:"):
        return None
    return Destination(kind=STUB_DESTINATION_KIND, page_no=1)


def _parse_page_no(value: str | None) -> int | None:
    if value is None or not (value.isascii() and value.isdigit()):
        return None
    page_no = int(value)
    return page_no if page_no > 0 else None


def _apply_token(node: OutlineNode, token: Token) -> None:
    raw = token.raw
    if raw == "font:bold":
        node.font_flags.add(FontFlag.BOLD)
        return
    if raw == "font:italic":
        node.font_flags.add(FontFlag.ITALIC)
        return

    color = parse_color(raw)
    if color is not None:
        node.color = color
        return

    lowered = raw.lower()
    if lowered == "open-default":
        node.is_open_default = True
        return
    if lowered == "open-toggled":
        node.is_open_toggled = True
        return
    if raw == "unchecked":
        node.is_unchecked = True
        return

    dest = parse_destination(token)
    if dest is not None:
        node.destination = dest
        # non-numeric pages fall back to the destination page so `page:` is written back
        node.page_no = _parse_page_no(token.value) or dest.page_no


def parse_line(line: str) -> ParsedLine:
    """Parse one node line (without its trailing newline).

    Raises:
        MalformedIndentation: Odd number of leading spaces.
        MalformedTitle: No quoted title after the indentation.
    """

    indent = count_indent(line)
    if indent % 2 != 0:
        raise MalformedIndentation(f"indentation of {indent} spaces is not a multiple of 2")
    depth = indent // len(INDENT)

    title, pos = parse_quoted(line, indent)
    node = OutlineNode(title=title)
    for token in iter_tokens(line, pos):
        _apply_token(node, token)
    return ParsedLine(node=node, depth=depth)
