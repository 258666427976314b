"""
Element implementation for the HTML tree.
This module implements tagged nodes with ordered attributes and children.
"""

from typing import List, Optional

from .attr import Attr
from .node import HTML_NAMESPACE, NodeType, ParentNode


class Element(ParentNode):
    """
    Element node of the HTML tree.

    The tag name keeps the case it was created with; the parser already
    lowercases HTML tag names and keeps the adjusted case of SVG/MathML ones.
    """

    node_type = NodeType.ELEMENT_NODE

    def __init__(self, tag_name: str, namespace: Optional[str] = HTML_NAMESPACE):
        """
        Initialize a new Element.

        Args:
            tag_name: Name of the element tag (e.g., "div", "span")
            namespace: Namespace URI, the HTML namespace unless the parser says otherwise
        """
        super().__init__()
        self.tag_name = tag_name
        self.node_name = tag_name
        self.namespace_uri = namespace
        self.attrs: List[Attr] = []

    def has_attributes(self) -> bool:
        return True

    def _same_data(self, other: 'Element') -> bool:
        return (self.tag_name == other.tag_name and
                self.namespace_uri == other.namespace_uri and
                self.attrs == other.attrs)

    @property
    def tagName(self) -> str:
        return self.tag_name

    @property
    def namespaceURI(self) -> Optional[str]:
        return self.namespace_uri

    def __repr__(self) -> str:
        return f"<Element {self.tag_name} attrs={len(self.attrs)} children={len(self.child_nodes)}>"
