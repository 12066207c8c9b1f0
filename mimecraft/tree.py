"""A minimal n-ary tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class TreeNode:
    """A node holding ``data`` and an ordered list of child nodes."""

    def __init__(self, data: Any = None) -> None:
        self.data = data
        self.children: list[TreeNode] = []

    def add_child(self, data: Any) -> "TreeNode":
        """Append a new child holding ``data`` and return it."""
        node = TreeNode(data)
        self.children.append(node)
        return node

    def __iter__(self) -> Iterator["TreeNode"]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __repr__(self) -> str:
        return f"TreeNode({self.data!r}, children={len(self.children)})"


def find_node(nodes: Iterable[TreeNode], data: Any) -> TreeNode | None:
    """Return the first node whose data equals ``data``, or None."""
    return next((node for node in nodes if node.data == data), None)