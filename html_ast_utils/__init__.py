"""
html-ast-utils - read and rewrite parsed HTML trees in place.
"""

import logging

from html_ast_utils.dom import (
    HTML_NAMESPACE, Attr, Comment, Document, DocumentFragment, DocumentType, Element, Node,
    NodeType, Text
)
from html_ast_utils.errors import InvalidShape, InvalidShapeError
from html_ast_utils.tree import (
    append, attributes_of, create_fragment, create_node, create_text_node, flatten,
    get_attribute, is_document, parse, prepend, remove, remove_attribute, replace,
    set_attribute, set_text, stringify, text_of, to_attrs
)
from html_ast_utils.utils.config import Config

# Library code only emits records; applications configure handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

# Package information
__version__ = "0.1.0"
__author__ = "html-ast-utils contributors"
__description__ = "Attribute, text and structure helpers for html5lib-parsed HTML trees"

# JavaScript-style aliases for the tree functions
attributesOf = attributes_of
toAttrs = to_attrs
setAttribute = set_attribute
getAttribute = get_attribute
removeAttribute = remove_attribute
createNode = create_node
createTextNode = create_text_node
createFragment = create_fragment
textOf = text_of
setText = set_text
isDocument = is_document

__all__ = [
    # Nodes
    'HTML_NAMESPACE', 'Node', 'NodeType', 'Attr', 'Element', 'Text', 'Comment',
    'Document', 'DocumentFragment', 'DocumentType',
    # Errors and configuration
    'InvalidShapeError', 'InvalidShape', 'Config',
    # Tree functions
    'parse', 'create_fragment', 'stringify', 'is_document',
    'create_node', 'create_text_node', 'to_attrs',
    'attributes_of', 'set_attribute', 'get_attribute', 'remove_attribute',
    'prepend', 'append', 'replace', 'remove',
    'text_of', 'set_text', 'flatten',
    # Aliases
    'attributesOf', 'toAttrs', 'setAttribute', 'getAttribute', 'removeAttribute',
    'createNode', 'createTextNode', 'createFragment', 'textOf', 'setText', 'isDocument',
]
