"""
Document implementation for the HTML tree.
This module implements the root containers produced by the parser.
"""

from typing import Optional

from .element import Element
from .node import Node, NodeType, ParentNode


class Document(ParentNode):
    """
    Document node representing a complete parsed page.

    The parser always gives it an ``html`` element with ``head`` and
    ``body``, optionally preceded by a doctype and comments.
    """

    node_type = NodeType.DOCUMENT_NODE
    node_name = "#document"

    @property
    def doctype(self) -> Optional['DocumentType']:
        """Get the document's DOCTYPE, if present."""
        for child in self.child_nodes:
            if child.node_type == NodeType.DOCUMENT_TYPE_NODE:
                return child
        return None

    @property
    def document_element(self) -> Optional[Element]:
        """Get the root element (normally ``html``)."""
        for child in self.child_nodes:
            if child.has_attributes():
                return child
        return None

    @property
    def head(self) -> Optional[Element]:
        return self._root_child("head")

    @property
    def body(self) -> Optional[Element]:
        return self._root_child("body")

    def _root_child(self, tag_name: str) -> Optional[Element]:
        root = self.document_element
        if root is None:
            return None
        for child in root.child_nodes:
            if child.has_attributes() and child.tag_name == tag_name:
                return child
        return None


class DocumentFragment(ParentNode):
    """Root node of a parsed subtree without html/head/body wrapping."""

    node_type = NodeType.DOCUMENT_FRAGMENT_NODE
    node_name = "#document-fragment"


class DocumentType(Node):
    """Doctype declaration; a leaf child of a Document."""

    node_type = NodeType.DOCUMENT_TYPE_NODE
    node_name = "#documentType"

    def __init__(self, name: str, public_id: Optional[str] = None, system_id: Optional[str] = None):
        """
        Initialize a doctype node.

        Args:
            name: The doctype name (``html`` for HTML5 documents)
            public_id: Optional public identifier
            system_id: Optional system identifier
        """
        super().__init__()
        self.name = name
        self.public_id = public_id or ""
        self.system_id = system_id or ""

    def _same_data(self, other: 'DocumentType') -> bool:
        return (self.name, self.public_id, self.system_id) == \
            (other.name, other.public_id, other.system_id)
