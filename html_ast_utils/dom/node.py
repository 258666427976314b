"""
Node implementation for the HTML tree.
This module implements the base node shared by every node kind of a parsed HTML tree.
"""

from enum import IntEnum
from typing import List, Optional, Sequence, Union

HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"


class NodeType(IntEnum):
    """Node types as defined in the DOM specification."""
    ELEMENT_NODE = 1
    TEXT_NODE = 3
    COMMENT_NODE = 8
    DOCUMENT_NODE = 9
    DOCUMENT_TYPE_NODE = 10
    DOCUMENT_FRAGMENT_NODE = 11


class Node:
    """
    Base node of the HTML tree.

    A node either owns an ordered list of children (documents, fragments and
    elements) or is a leaf. The parent reference is a plain back-reference:
    the parent's ``child_nodes`` list is the owning collection.
    """

    node_type: NodeType
    node_name: str = "#node"

    def __init__(self):
        """Initialize a new, detached node."""
        self.parent_node: Optional['Node'] = None

    # Capability predicates
    def has_children(self) -> bool:
        """Check if this node can own child nodes."""
        return False

    def has_attributes(self) -> bool:
        """Check if this node carries attributes (only elements do)."""
        return False

    def is_text(self) -> bool:
        """Check if this node is a text node."""
        return False

    @property
    def child_nodes(self) -> Sequence['Node']:
        """Leaves have no children."""
        return ()

    def index_of(self, child: 'Node') -> int:
        """
        Find a child by identity.

        Args:
            child: The node to look for

        Returns:
            The index of the child, or -1 if it is not a child of this node
        """
        for index, candidate in enumerate(self.child_nodes):
            if candidate is child:
                return index
        return -1

    def normalize(self) -> None:
        """
        Normalize the node by merging adjacent text nodes and removing empty text nodes.
        """
        pending = [self] if self.has_children() else []
        while pending:
            node = pending.pop()
            merged: List['Node'] = []
            for child in node.child_nodes:
                if child.is_text():
                    if not child.value:
                        child.parent_node = None
                        continue
                    if merged and merged[-1].is_text():
                        merged[-1].value += child.value
                        child.parent_node = None
                        continue
                elif child.has_children():
                    pending.append(child)
                merged.append(child)
            node.child_nodes[:] = merged

    def is_equal_node(self, other: Optional['Node']) -> bool:
        """
        Check if this node is structurally equal to another node.

        Args:
            other: The node to compare with

        Returns:
            True if kind, name, node data and children match recursively
        """
        if not isinstance(other, Node) or self.node_type != other.node_type:
            return False

        if self.node_name != other.node_name or not self._same_data(other):
            return False

        if len(self.child_nodes) != len(other.child_nodes):
            return False

        return all(mine.is_equal_node(theirs)
                   for mine, theirs in zip(self.child_nodes, other.child_nodes))

    def _same_data(self, other: 'Node') -> bool:
        return True

    def contains(self, other: Optional['Node']) -> bool:
        """
        Check if this node contains another node.

        Args:
            other: The node to check

        Returns:
            True if this node is the other node or one of its ancestors
        """
        current = other
        while current is not None:
            if current is self:
                return True
            current = current.parent_node
        return False

    # DOM-style aliases
    @property
    def parentNode(self) -> Optional['Node']:
        return self.parent_node

    @parentNode.setter
    def parentNode(self, value: Optional['Node']) -> None:
        self.parent_node = value

    @property
    def childNodes(self) -> Sequence['Node']:
        return self.child_nodes

    @property
    def nodeName(self) -> str:
        return self.node_name

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.node_name}>"


class ParentNode(Node):
    """
    Node that owns an ordered list of children.

    Documents, document fragments and elements derive from this class.
    """

    def __init__(self):
        super().__init__()
        self._child_nodes: List[Node] = []

    def has_children(self) -> bool:
        return True

    @property
    def child_nodes(self) -> List[Node]:
        """The owned, ordered list of children (serialization order)."""
        return self._child_nodes

    @child_nodes.setter
    def child_nodes(self, nodes: Union[List[Node], Sequence[Node]]) -> None:
        self._child_nodes = list(nodes)

    @property
    def childNodes(self) -> List[Node]:
        return self._child_nodes

    @childNodes.setter
    def childNodes(self, nodes: Sequence[Node]) -> None:
        self.child_nodes = nodes
