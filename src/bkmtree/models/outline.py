"""Outline models.

Nodes of one tree live in an arena (`OutlineTree.nodes`) and point at each other by index
through `next` (sibling at the same depth) and `child` (first node one level deeper).
Links only ever point forward, so the forest is acyclic and every node has exactly one
owner: the tree's `root`, a parent's `child` or a preceding sibling's `next`.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, ConfigDict, Field

from bkmtree.models.destination import Destination


class FontFlag(str, Enum):
    """Per-node font styling."""

    BOLD = "bold"
    ITALIC = "italic"


class Color(BaseModel):
    """RGB color with an optional alpha channel."""

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)
    a: int | None = Field(default=None, ge=0, le=255)


class OutlineNode(BaseModel):
    """One bookmark."""

    title: str
    page_no: int | None = Field(default=None, ge=1)
    font_flags: set[FontFlag] = Field(default_factory=set)
    color: Color | None = None

    is_open_default: bool = False
    is_open_toggled: bool = False
    is_unchecked: bool = False

    destination: Destination | None = None

    next: int | None = None
    child: int | None = None

    @property
    def is_bold(self) -> bool:
        return FontFlag.BOLD in self.font_flags

    @property
    def is_italic(self) -> bool:
        return FontFlag.ITALIC in self.font_flags


class OutlineTree(BaseModel):
    """A bookmark forest and the arena that owns its nodes."""

    name: str
    source_path: str = ""
    nodes: list[OutlineNode] = Field(default_factory=list)
    root: int | None = None

    def add_node(self, node: OutlineNode) -> int:
        """Take ownership of `node` and return its arena index."""

        self.nodes.append(node)
        return len(self.nodes) - 1

    def get(self, index: int) -> OutlineNode:
        return self.nodes[index]

    def iter_siblings(self, index: int | None) -> Iterator[OutlineNode]:
        """Yield `index` and every node reachable through `next`."""

        while index is not None:
            node = self.nodes[index]
            yield node
            index = node.next

    def last_sibling(self, index: int) -> int:
        while self.nodes[index].next is not None:
            index = self.nodes[index].next  # type: ignore[assignment]
        return index

    def add_sibling(self, index: int, new_index: int) -> None:
        """Append `new_index` to the end of the sibling chain starting at `index`."""

        self.nodes[self.last_sibling(index)].next = new_index

    def walk(self) -> Iterator[tuple[int, OutlineNode]]:
        """Pre-order traversal yielding `(depth, node)`, children before next siblings.

        Uses an explicit work list so deeply nested outlines cannot exhaust the stack.
        """

        pending: list[tuple[int, int]] = []
        if self.root is not None:
            pending.append((0, self.root))
        while pending:
            depth, index = pending.pop()
            node = self.nodes[index]
            yield depth, node
            # LIFO: push next first so the child subtree is emitted before it
            if node.next is not None:
                pending.append((depth, node.next))
            if node.child is not None:
                pending.append((depth + 1, node.child))

    def count(self) -> int:
        """Number of nodes reachable from `root`."""

        return sum(1 for _ in self.walk())

    def roots(self) -> list[OutlineNode]:
        return list(self.iter_siblings(self.root))

    def children(self, node: OutlineNode) -> list[OutlineNode]:
        return list(self.iter_siblings(node.child))


class OutlineSet(BaseModel):
    """Ordered sequence of outline trees loaded from (or exported to) one file."""

    trees: list[OutlineTree] = Field(default_factory=list)

    def append(self, tree: OutlineTree) -> None:
        self.trees.append(tree)
