"""
Exceptions raised by the tree operations.
"""

from typing import Optional


class InvalidShapeError(ValueError):
    """
    Raised when a node's children do not follow the single-text-child convention.

    Attributes:
        node: The node whose children were inspected
    """

    def __init__(self, message: str, node: Optional[object] = None):
        super().__init__(message)
        self.node = node


# DOM-style alias
InvalidShape = InvalidShapeError
