"""
Node model for parsed HTML trees.
This package provides the node kinds every tree operation works on.
"""

from .node import HTML_NAMESPACE, Node, NodeType, ParentNode
from .attr import Attr
from .element import Element
from .text import Text
from .comment import Comment
from .document import Document, DocumentFragment, DocumentType

__all__ = [
    'HTML_NAMESPACE', 'Node', 'NodeType', 'ParentNode', 'Attr', 'Element', 'Text',
    'Comment', 'Document', 'DocumentFragment', 'DocumentType'
]
