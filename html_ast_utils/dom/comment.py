"""
Comment node implementation for the HTML tree.
"""

from .node import Node, NodeType


class Comment(Node):
    """Comment node; a leaf that is neither text nor element."""

    node_type = NodeType.COMMENT_NODE
    node_name = "#comment"

    def __init__(self, data: str = ""):
        super().__init__()
        self.data = data or ""

    def _same_data(self, other: 'Comment') -> bool:
        return self.data == other.data
