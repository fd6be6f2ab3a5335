"""
Minimal FIFO queue adapter using collections.deque.

This provides just the interface needed by the level-order walks in tree.py
without implementing a linked list from scratch.
"""

from collections import deque
from typing import Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


class Queue(Generic[T]):
    """
    First-in first-out queue backed by a deque.

    Elements are added at the back and taken from the front.
    """

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._data: deque[T] = deque(items) if items is not None else deque()

    def enqueue(self, item: T) -> None:
        """Add an item at the back of the queue."""
        self._data.append(item)

    def dequeue(self) -> T:
        """
        Remove and return the item at the front of the queue.

        Raises:
            IndexError: If the queue is empty
        """
        if not self._data:
            raise IndexError("dequeue from an empty queue")
        return self._data.popleft()

    def front(self) -> Optional[T]:
        """Get the front item without removing it, or None if empty."""
        return self._data[0] if self._data else None

    def clear(self) -> None:
        self._data.clear()

    @property
    def size(self) -> int:
        """Get number of items in the queue."""
        return len(self._data)

    def is_empty(self) -> bool:
        """Check if queue is empty."""
        return len(self._data) == 0

    def __len__(self) -> int:
        return len(self._data)
