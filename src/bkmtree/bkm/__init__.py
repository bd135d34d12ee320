"""Reading and writing of .bkm alternate bookmark files."""

from __future__ import annotations

from bkmtree.bkm.builder import build_tree
from bkmtree.bkm.lexer import parse_quoted, quote
from bkmtree.bkm.parser import ParsedLine, parse_line
from bkmtree.bkm.reader import (
    bookmarks_path_for,
    load_alternate_bookmarks,
    parse_bookmarks,
    parse_bookmarks_file,
)
from bkmtree.bkm.serializer import serialize_set, serialize_tree
from bkmtree.bkm.writer import export_bookmarks

__all__ = [
    "ParsedLine",
    "bookmarks_path_for",
    "build_tree",
    "export_bookmarks",
    "load_alternate_bookmarks",
    "parse_bookmarks",
    "parse_bookmarks_file",
    "parse_line",
    "parse_quoted",
    "quote",
    "serialize_set",
    "serialize_tree",
]
