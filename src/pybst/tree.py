"""
Unbalanced binary search tree with parent links.

Nodes are kept in a per-tree arena and addressed by integer handles, so the
parent/child relations are plain handles rather than mutual references.
Every structural edit updates both directions of a link together.

No rebalancing is performed: inserting sorted input degrades the tree into
a chain of height n.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterable, Iterator, Optional, TypeVar
import warnings

from .exceptions import (
    DegenerateTreeWarning,
    InvalidArgumentError,
    OrderingUndefinedError,
)
from .printer import render
from .queue import Queue

T = TypeVar("T")

# Smallest bulk load that triggers a DegenerateTreeWarning when it ends up as a chain
DEGENERATE_WARN_SIZE = 64


class _Node(Generic[T]):
    """Arena slot: an element and the handles of its relatives."""

    __slots__ = ("element", "left", "right", "parent")

    def __init__(self, element: T, parent: Optional[int]):
        self.element = element
        self.left: Optional[int] = None
        self.right: Optional[int] = None
        self.parent = parent

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def has_two_children(self) -> bool:
        return self.left is not None and self.right is not None


class _NodeArena(Generic[T]):
    """
    Storage for the nodes of one tree.

    Handles stay valid until the node is released; released handles are
    reused by later allocations.
    """

    def __init__(self):
        self._slots: list[Optional[_Node[T]]] = []
        self._free: list[int] = []

    def allocate(self, element: T, parent: Optional[int]) -> int:
        """Create a node and return its handle."""
        node = _Node(element, parent)
        if self._free:
            handle = self._free.pop()
            self._slots[handle] = node
        else:
            handle = len(self._slots)
            self._slots.append(node)
        return handle

    def release(self, handle: int) -> None:
        """Drop the node stored under handle."""
        self._slots[handle] = None
        self._free.append(handle)

    def clear(self) -> None:
        self._slots.clear()
        self._free.clear()

    def __getitem__(self, handle: int) -> _Node[T]:
        node = self._slots[handle]
        if node is None:
            raise KeyError(f"stale node handle {handle}")
        return node

    def __len__(self) -> int:
        return len(self._slots) - len(self._free)


class OrderedTree(Generic[T]):
    """
    Binary search tree over a total order of its elements.

    Elements are ordered by ``compare`` when given, otherwise by their own
    ``<`` and ``>``. Adding an element equal to a stored one replaces the
    stored element in place.

    The tree also exposes the read-only ``TreeInfo`` view (``root``,
    ``left``, ``right``, ``string``) used by ``pybst.printer.render``.
    """

    def __init__(
        self,
        iterable: Optional[Iterable[T]] = None,
        compare: Optional[Callable[[T, T], int]] = None,
    ):
        """
        Initialize tree.

        Args:
            iterable: Optional elements to add
            compare: Comparison function returning negative, zero, or positive
        """
        self.compare = compare
        self._nodes: _NodeArena[T] = _NodeArena()
        self._root: Optional[int] = None
        self._size = 0
        if iterable is not None:
            self.update(iterable)

    # ------------------------------------------------------------------
    # Size

    def size(self) -> int:
        """Get number of elements in tree."""
        return self._size

    def is_empty(self) -> bool:
        """Check if tree is empty."""
        return self._size == 0

    def clear(self) -> None:
        """Remove all elements."""
        self._nodes.clear()
        self._root = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    # ------------------------------------------------------------------
    # Mutation

    def add(self, element: T) -> None:
        """
        Insert an element.

        An element comparing equal to a stored one overwrites it without
        changing the size or shape of the tree.

        Args:
            element: Element to insert

        Raises:
            InvalidArgumentError: If element is None
            OrderingUndefinedError: If element cannot be compared
        """
        self._check_element(element)
        nodes = self._nodes

        if self._root is None:
            self._root = nodes.allocate(element, None)
            self._size += 1
            return

        parent = self._root
        handle: Optional[int] = self._root
        cmp = 0
        while handle is not None:
            node = nodes[handle]
            cmp = self._compare(element, node.element)
            parent = handle
            if cmp > 0:
                handle = node.right
            elif cmp < 0:
                handle = node.left
            else:
                node.element = element
                return

        new_node = nodes.allocate(element, parent)
        if cmp > 0:
            nodes[parent].right = new_node
        else:
            nodes[parent].left = new_node
        self._size += 1

    def update(self, iterable: Iterable[T]) -> None:
        """
        Add every element of iterable.

        Warns with DegenerateTreeWarning when a load of at least
        DEGENERATE_WARN_SIZE elements leaves the tree as a single chain.
        """
        count = 0
        for element in iterable:
            self.add(element)
            count += 1

        if count >= DEGENERATE_WARN_SIZE and self.height() == self._size:
            warnings.warn(
                f"Tree of {self._size} elements degraded into a chain; "
                "OrderedTree does not rebalance, shuffle sorted input before loading.",
                DegenerateTreeWarning,
                stacklevel=2,
            )

    def remove(self, element: T) -> None:
        """
        Remove an element if present.

        Removing an element that is not stored is a no-op.

        Raises:
            InvalidArgumentError: If element is None
            OrderingUndefinedError: If element cannot be compared
        """
        self._check_element(element)
        handle = self._node_for(element)
        if handle is not None:
            self._remove_node(handle)

    def _remove_node(self, handle: int) -> None:
        nodes = self._nodes
        node = nodes[handle]

        if node.has_two_children():
            # The successor is the leftmost node of the right subtree, so it
            # has no left child
            successor = self._successor(handle)
            node.element = nodes[successor].element
            handle = successor
            node = nodes[handle]

        # node now has at most one child
        replacement = node.left if node.left is not None else node.right

        if replacement is not None:
            nodes[replacement].parent = node.parent
            if node.parent is None:
                self._root = replacement
            elif handle == nodes[node.parent].left:
                nodes[node.parent].left = replacement
            else:
                nodes[node.parent].right = replacement
        elif node.parent is None:
            self._root = None
        elif handle == nodes[node.parent].left:
            nodes[node.parent].left = None
        else:
            nodes[node.parent].right = None

        nodes.release(handle)
        self._size -= 1

    # ------------------------------------------------------------------
    # Lookup

    def contains(self, element: T) -> bool:
        """Check if an element equal to element is stored."""
        if element is None:
            return False
        return self._node_for(element) is not None

    def __contains__(self, element: object) -> bool:
        return self.contains(element)

    def _node_for(self, element: T) -> Optional[int]:
        nodes = self._nodes
        handle = self._root
        while handle is not None:
            node = nodes[handle]
            cmp = self._compare(element, node.element)
            if cmp == 0:
                return handle
            handle = node.right if cmp > 0 else node.left
        return None

    def minimum(self) -> Optional[T]:
        """Smallest element, or None if tree is empty."""
        if self._root is None:
            return None
        return self._nodes[self._leftmost(self._root)].element

    def maximum(self) -> Optional[T]:
        """Largest element, or None if tree is empty."""
        if self._root is None:
            return None
        return self._nodes[self._rightmost(self._root)].element

    # ------------------------------------------------------------------
    # Ordered navigation

    def successor(self, element: T) -> Optional[T]:
        """
        Find the next larger stored element.

        Args:
            element: A stored element

        Returns:
            Next element in sorted order, or None if element is the maximum

        Raises:
            InvalidArgumentError: If element is None
            KeyError: If element is not stored
        """
        handle = self._successor(self._require_node(element))
        return self._nodes[handle].element if handle is not None else None

    def predecessor(self, element: T) -> Optional[T]:
        """
        Find the next smaller stored element.

        Args:
            element: A stored element

        Returns:
            Previous element in sorted order, or None if element is the minimum

        Raises:
            InvalidArgumentError: If element is None
            KeyError: If element is not stored
        """
        handle = self._predecessor(self._require_node(element))
        return self._nodes[handle].element if handle is not None else None

    def _successor(self, handle: int) -> Optional[int]:
        nodes = self._nodes
        node = nodes[handle]
        if node.right is not None:
            return self._leftmost(node.right)

        # Climb while we are a right child; the first parent reached from
        # its left side is the successor
        while node.parent is not None and handle == nodes[node.parent].right:
            handle = node.parent
            node = nodes[handle]
        return node.parent

    def _predecessor(self, handle: int) -> Optional[int]:
        nodes = self._nodes
        node = nodes[handle]
        if node.left is not None:
            return self._rightmost(node.left)

        while node.parent is not None and handle == nodes[node.parent].left:
            handle = node.parent
            node = nodes[handle]
        return node.parent

    def _leftmost(self, handle: int) -> int:
        nodes = self._nodes
        while nodes[handle].left is not None:
            handle = nodes[handle].left
        return handle

    def _rightmost(self, handle: int) -> int:
        nodes = self._nodes
        while nodes[handle].right is not None:
            handle = nodes[handle].right
        return handle

    def __iter__(self) -> Iterator[T]:
        """Iterate over the elements in sorted order."""
        if self._root is None:
            return
        handle: Optional[int] = self._leftmost(self._root)
        while handle is not None:
            yield self._nodes[handle].element
            handle = self._successor(handle)

    # ------------------------------------------------------------------
    # Traversal
    #
    # A visitor receives each element and returns True to stop the walk.
    # The tree must not be modified while a traversal is running.

    def preorder(self, visitor: Optional[Callable[[T], Optional[bool]]]) -> None:
        """Visit each node before its left and right subtrees."""
        if visitor is None or self._root is None:
            return
        nodes = self._nodes
        stack = [self._root]
        while stack:
            node = nodes[stack.pop()]
            if visitor(node.element):
                return
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def inorder(self, visitor: Optional[Callable[[T], Optional[bool]]]) -> None:
        """Visit the left subtree, then the node, then the right subtree."""
        if visitor is None:
            return
        nodes = self._nodes
        stack: list[int] = []
        handle = self._root
        while stack or handle is not None:
            while handle is not None:
                stack.append(handle)
                handle = nodes[handle].left
            node = nodes[stack.pop()]
            if visitor(node.element):
                return
            handle = node.right

    def postorder(self, visitor: Optional[Callable[[T], Optional[bool]]]) -> None:
        """Visit both subtrees before the node itself."""
        if visitor is None:
            return
        nodes = self._nodes
        stack: list[int] = []
        handle = self._root
        last_visited: Optional[int] = None
        while stack or handle is not None:
            if handle is not None:
                stack.append(handle)
                handle = nodes[handle].left
                continue
            top = nodes[stack[-1]]
            if top.right is not None and top.right != last_visited:
                handle = top.right
            else:
                last_visited = stack.pop()
                if visitor(top.element):
                    return

    def level_order(self, visitor: Optional[Callable[[T], Optional[bool]]]) -> None:
        """Visit the nodes breadth first, left to right within each level."""
        if visitor is None or self._root is None:
            return
        nodes = self._nodes
        queue: Queue[int] = Queue([self._root])
        while not queue.is_empty():
            node = nodes[queue.dequeue()]
            if visitor(node.element):
                return
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)

    # ------------------------------------------------------------------
    # Shape

    def height(self) -> int:
        """
        Number of levels in the tree, 0 when empty.

        Computed breadth first so degenerate trees do not hit the
        recursion limit.
        """
        if self._root is None:
            return 0
        nodes = self._nodes
        height = 0
        level_size = 1
        queue: Queue[int] = Queue([self._root])
        while not queue.is_empty():
            node = nodes[queue.dequeue()]
            level_size -= 1
            if node.left is not None:
                queue.enqueue(node.left)
            if node.right is not None:
                queue.enqueue(node.right)
            if level_size == 0:
                # Next level starts
                level_size = queue.size
                height += 1
        return height

    def _subtree_height(self, handle: Optional[int]) -> int:
        if handle is None:
            return 0
        node = self._nodes[handle]
        return 1 + max(self._subtree_height(node.left), self._subtree_height(node.right))

    def is_complete(self) -> bool:
        """
        Check if the tree is a complete binary tree.

        Every level must be full except possibly the last, whose nodes are
        packed to the left. An empty tree is not considered complete.
        """
        if self._root is None:
            return False
        nodes = self._nodes
        queue: Queue[int] = Queue([self._root])
        leaf_only = False
        while not queue.is_empty():
            node = nodes[queue.dequeue()]
            if leaf_only and not node.is_leaf():
                return False

            if node.has_two_children():
                queue.enqueue(node.left)
                queue.enqueue(node.right)
            elif node.left is None and node.right is not None:
                return False
            else:
                # Missing right child: everything after must be a leaf
                leaf_only = True
                if node.left is not None:
                    queue.enqueue(node.left)
        return True

    def is_valid(self) -> bool:
        """
        Verify order, parent links and count (for testing).

        Returns:
            True if tree is in valid state
        """
        nodes = self._nodes
        if self._root is None:
            return self._size == 0 and len(nodes) == 0
        if nodes[self._root].parent is not None:
            return False

        count = 0
        previous: Optional[T] = None
        stack: list[int] = []
        handle = self._root
        while stack or handle is not None:
            while handle is not None:
                stack.append(handle)
                handle = nodes[handle].left
            current = stack.pop()
            node = nodes[current]
            for child in (node.left, node.right):
                if child is not None and nodes[child].parent != current:
                    return False
            # In-order sequence strictly increasing <=> search order holds
            if count and self._compare(previous, node.element) >= 0:
                return False
            previous = node.element
            count += 1
            handle = node.right

        return count == self._size == len(nodes)

    # ------------------------------------------------------------------
    # TreeInfo view

    def root(self) -> Optional[int]:
        """Handle of the root node, or None if tree is empty."""
        return self._root

    def left(self, node: int) -> Optional[int]:
        return self._nodes[node].left

    def right(self, node: int) -> Optional[int]:
        return self._nodes[node].right

    def string(self, node: int) -> str:
        """Label of a node: its element and its parent's element."""
        current = self._nodes[node]
        parent = "None" if current.parent is None else str(self._nodes[current.parent].element)
        return f"{current.element}_P({parent})"

    def __str__(self) -> str:
        return render(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    # ------------------------------------------------------------------
    # Helpers

    def _compare(self, e1: T, e2: T) -> int:
        if self.compare is not None:
            return self.compare(e1, e2)
        try:
            if e1 < e2:
                return -1
            if e1 > e2:
                return 1
        except TypeError as e:
            raise OrderingUndefinedError(
                f"Cannot order {type(e1).__name__!r} against {type(e2).__name__!r}; "
                "pass a compare function to OrderedTree"
            ) from e
        return 0

    def _require_node(self, element: T) -> int:
        self._check_element(element)
        handle = self._node_for(element)
        if handle is None:
            raise KeyError(element)
        return handle

    @staticmethod
    def _check_element(element: Optional[T]) -> None:
        if element is None:
            raise InvalidArgumentError("element must not be None")
