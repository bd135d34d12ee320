"""Export of outline sets to .bkm files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from bkmtree.bkm.serializer import serialize_set
from bkmtree.logging import bookmarks_context, get_logger, log_exception
from bkmtree.models import OutlineSet

__all__ = ["export_bookmarks"]

logger = get_logger(__name__)


def export_bookmarks(bookmarks: OutlineSet, path: str | Path, *, encoding: str = "utf-8") -> bool:
    """Write `bookmarks` to `path` in canonical form.

    The text is built in memory and written with a single replace, so a failed export
    never leaves a truncated file at `path`.

    Returns:
        ``True`` if the file was written. Trees without a source path are refused, since
        the `file:` header they would get cannot be read back.
    """

    path = Path(path)
    with bookmarks_context(path):
        unnamed = [i for i, tree in enumerate(bookmarks.trees) if not tree.source_path.strip()]
        if unnamed:
            logger.warning("outline tree(s) %s have no source path", unnamed)
            return False

        try:
            data = serialize_set(bookmarks).encode(encoding)
        except UnicodeEncodeError as e:
            logger.warning("bookmarks cannot be encoded as %s: %s", encoding, e)
            return False

        tmp_name: str | None = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError:
            log_exception(logger, "cannot write bookmarks file", path=str(path))
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    logger.debug("cannot remove temporary file %s", tmp_name)

        logger.info("exported %d outline tree(s)", len(bookmarks.trees))
        return True
