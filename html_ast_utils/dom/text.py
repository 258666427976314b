"""
Text node implementation for the HTML tree.
"""

from .node import Node, NodeType


class Text(Node):
    """
    Text node of the HTML tree.

    This class represents a run of literal text; it never has children.
    """

    node_type = NodeType.TEXT_NODE
    node_name = "#text"

    def __init__(self, value: str = ""):
        """
        Initialize a text node.

        Args:
            value: The text content
        """
        super().__init__()
        self.value = value or ""

    def is_text(self) -> bool:
        return True

    def _same_data(self, other: 'Text') -> bool:
        return self.value == other.value

    @property
    def data(self) -> str:
        """Alias for value."""
        return self.value

    @data.setter
    def data(self, value: str) -> None:
        self.value = value or ""

    def __repr__(self) -> str:
        return f"<Text {self.value[:20]!r}>"
