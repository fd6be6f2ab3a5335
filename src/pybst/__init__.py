"""
pybst: ordered binary search tree

Unbalanced binary search tree with parent links, predecessor/successor
navigation, stoppable traversals and shape queries.
"""

__version__ = "0.1.0"

from .exceptions import DegenerateTreeWarning, InvalidArgumentError, OrderingUndefinedError
from .printer import TreeInfo, render
from .queue import Queue
from .tree import OrderedTree

__all__ = [
    "OrderedTree",
    "Queue",
    "TreeInfo",
    "render",
    "InvalidArgumentError",
    "OrderingUndefinedError",
    "DegenerateTreeWarning",
]
