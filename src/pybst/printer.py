"""
Text rendering of binary trees.

The renderer only talks to a tree through the read-only ``TreeInfo``
protocol, so any binary tree exposing opaque node handles can be printed.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol


class TreeInfo(Protocol):
    """Read-only structural view of a binary tree."""

    def root(self) -> Optional[Any]:
        """Handle of the root node, or None for an empty tree."""
        ...

    def left(self, node: Any) -> Optional[Any]:
        """Handle of the left child of node, or None."""
        ...

    def right(self, node: Any) -> Optional[Any]:
        """Handle of the right child of node, or None."""
        ...

    def string(self, node: Any) -> str:
        """Label printed for node."""
        ...


LEFT_PREFIX = "L---"
RIGHT_PREFIX = "R---"


def render(info: TreeInfo) -> str:
    """
    Render a tree as an indented in-order listing.

    Each node is printed on its own line, prefixed by one ``L---`` or
    ``R---`` per edge on the path from the root, so the left subtree is
    listed above its parent and the right subtree below it.

    Args:
        info: Tree to render

    Returns:
        Rendered tree, empty string for an empty tree
    """
    lines: list[str] = []
    # (node, prefix, expanded)
    stack: list[tuple[Any, str, bool]] = []
    root = info.root()
    if root is not None:
        stack.append((root, "", False))

    while stack:
        node, prefix, expanded = stack.pop()
        if expanded:
            lines.append(prefix + info.string(node))
            continue
        right = info.right(node)
        if right is not None:
            stack.append((right, prefix + RIGHT_PREFIX, False))
        stack.append((node, prefix, True))
        left = info.left(node)
        if left is not None:
            stack.append((left, prefix + LEFT_PREFIX, False))

    return "".join(line + "\n" for line in lines)
