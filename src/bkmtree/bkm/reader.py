"""Loading of .bkm alternate bookmark files.

File layout::

    file: <source document path>
    title: <outline title>
    "<title>" [metadata ...]
      "<child title>" [metadata ...]
    <blank line or end of input ends the node list>

Any error discards the whole file: no partially built tree is ever returned.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterator

from bkmtree.bkm.builder import build_tree
from bkmtree.bkm.parser import ParsedLine, parse_line
from bkmtree.bkm.scanner import parse_header
from bkmtree.config import Settings, load_settings
from bkmtree.errors import BookmarksError, MissingHeader
from bkmtree.logging import bookmarks_context, get_logger
from bkmtree.models import OutlineSet, OutlineTree

__all__ = [
    "ParseState",
    "bookmarks_path_for",
    "load_alternate_bookmarks",
    "parse_bookmarks",
    "parse_bookmarks_file",
]

logger = get_logger(__name__)


class ParseState(str, Enum):
    EXPECT_FILE_HEADER = "expect_file_header"
    EXPECT_TITLE_HEADER = "expect_title_header"
    PARSING_NODES = "parsing_nodes"
    DONE = "done"


def _iter_lines(text: str) -> Iterator[tuple[int, str]]:
    for line_no, line in enumerate(text.split("\n"), 1):
        yield line_no, line.rstrip("\r")


def parse_bookmarks(text: str) -> OutlineTree:
    """Parse the first outline tree in `text`.

    Raises:
        MissingHeader: `file:` or `title:` header absent or empty.
        MalformedIndentation: A node line has an odd indentation.
        MalformedTitle: A node line has no valid quoted title.
        EmptyDocument: No node lines after the headers.
    """

    state = ParseState.EXPECT_FILE_HEADER
    source_path = ""
    name = ""
    entries: list[ParsedLine] = []

    for line_no, line in _iter_lines(text):
        if state is ParseState.EXPECT_FILE_HEADER:
            source_path = parse_header(line, "file")
            if not source_path:
                raise MissingHeader("expected 'file: <path>' header", line_no=line_no)
            state = ParseState.EXPECT_TITLE_HEADER
        elif state is ParseState.EXPECT_TITLE_HEADER:
            name = parse_header(line, "title")
            if not name:
                raise MissingHeader("expected 'title: <title>' header", line_no=line_no)
            state = ParseState.PARSING_NODES
        elif state is ParseState.PARSING_NODES:
            # TODO: read the trees that follow the blank line as well
            if not line:
                state = ParseState.DONE
                break
            try:
                entries.append(parse_line(line))
            except BookmarksError as e:
                e.line_no = line_no
                raise

    if state is ParseState.EXPECT_TITLE_HEADER:
        raise MissingHeader("expected 'title: <title>' header")

    return build_tree(entries, name=name, source_path=source_path)


def parse_bookmarks_file(path: str | Path, bookmarks: OutlineSet, *, encoding: str = "utf-8") -> bool:
    """Read `path` and append its outline tree to `bookmarks`.

    Returns:
        ``True`` on success. On failure `bookmarks` is left untouched.
    """

    path = Path(path)
    with bookmarks_context(path):
        try:
            data = path.read_bytes()
        except OSError as e:
            logger.debug("cannot read bookmarks file: %s", e)
            return False

        try:
            tree = parse_bookmarks(data.decode(encoding))
        except UnicodeDecodeError as e:
            logger.warning("bookmarks file is not valid %s: %s", encoding, e)
            return False
        except BookmarksError as e:
            logger.warning("invalid bookmarks file (%s): %s", type(e).__name__, e)
            return False

        bookmarks.append(tree)
        logger.info("loaded %d bookmarks for %s", tree.count(), tree.source_path)
        return True


def bookmarks_path_for(base_path: str | Path, suffix: str = ".bkm") -> Path:
    """Companion file of a document: `report.pdf` -> `report.pdf.bkm`."""

    return Path(f"{base_path}{suffix}")


def load_alternate_bookmarks(base_path: str | Path, settings: Settings | None = None) -> OutlineSet | None:
    """Load the alternate outline stored next to a document.

    A missing or invalid companion file is not an error: it means the document has no
    alternate outline and ``None`` is returned.
    """

    settings = settings or load_settings()
    path = bookmarks_path_for(base_path, settings.bookmarks_suffix)
    bookmarks = OutlineSet()
    if not parse_bookmarks_file(path, bookmarks, encoding=settings.encoding):
        return None
    return bookmarks
