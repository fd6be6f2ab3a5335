"""
Errors and warnings raised by pybst.
"""


class InvalidArgumentError(ValueError):
    """Raised when ``None`` is passed where an element is required."""
    pass


class OrderingUndefinedError(TypeError):
    """
    Raised when two elements cannot be ordered.

    This happens when no comparator was given to the tree and the elements
    do not support ``<`` and ``>`` against each other. It surfaces at the
    first comparison, never up front.
    """
    pass


class DegenerateTreeWarning(UserWarning):
    """Warning about a tree whose height has degraded to its size."""
    pass
