"""Rebuild a bookmark forest from a flat list of (node, depth) entries.

    a
      b1
      b2
    a2
      b3

Each entry is compared with the one before it: same depth makes it the next sibling,
deeper makes it the first child, shallower scans back for the nearest entry at the same
depth and appends to that entry's sibling chain (or to the root chain when none exists).
Deeper-by-more-than-one is accepted and treated like deeper-by-one.
"""

from __future__ import annotations

from typing import Sequence

from bkmtree.bkm.parser import ParsedLine
from bkmtree.errors import EmptyDocument
from bkmtree.logging import get_logger
from bkmtree.models import OutlineTree

__all__ = ["build_tree"]

logger = get_logger(__name__)


def build_tree(entries: Sequence[ParsedLine], *, name: str = "", source_path: str = "") -> OutlineTree:
    """Link `entries` into a new tree that owns all of their nodes.

    Entry `i` becomes arena index `i`. Backward scans make this O(n^2) in the worst case,
    which is fine for outlines of a few hundred nodes.

    Raises:
        EmptyDocument: `entries` is empty.
    """

    if not entries:
        raise EmptyDocument("no bookmark lines")

    tree = OutlineTree(name=name, source_path=source_path)
    for entry in entries:
        tree.add_node(entry.node)
    tree.root = 0

    for i in range(1, len(entries)):
        curr_depth = entries[i].depth
        prev_depth = entries[i - 1].depth
        if curr_depth == prev_depth:
            tree.nodes[i - 1].next = i
        elif curr_depth > prev_depth:
            if curr_depth - prev_depth > 1:
                logger.debug("entry %d jumps from depth %d to %d", i, prev_depth, curr_depth)
            tree.nodes[i - 1].child = i
        else:
            for j in range(i - 1, -1, -1):
                if entries[j].depth == curr_depth:
                    tree.add_sibling(j, i)
                    break
            else:
                tree.add_sibling(tree.root, i)

    return tree
