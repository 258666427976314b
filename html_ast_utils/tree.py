"""
Tree manipulation functions for parsed HTML.

Every function works directly on the nodes it is given: nothing is copied and
there is no wrapper object. Structural functions look children up by
identity, so a node must be the very object stored in its parent's
``child_nodes``.

Attribute functions treat non-element nodes as having no attributes and do
nothing with them. ``text_of`` is the only function that raises for an
unexpected tree shape.
"""

import logging
import re
from typing import Dict, List, Mapping, Optional, Sequence, Union

from html_ast_utils.dom import Attr, Document, DocumentFragment, Element, Node, Text
from html_ast_utils.errors import InvalidShapeError
from html_ast_utils.parser.html_parser import HTMLParser
from html_ast_utils.parser.serializer import TreeSerializer
from html_ast_utils.utils.config import Config

logger = logging.getLogger(__name__)

# Leading doctype or html/head/body start tag, after optional whitespace
DOCUMENT_PATTERN = re.compile(r'^\s*<(!doctype|html|head|body)\b', re.IGNORECASE)
DOCUMENT_BYTES_PATTERN = re.compile(rb'^\s*<(!doctype|html|head|body)\b', re.IGNORECASE)


def _is_element(node) -> bool:
    return isinstance(node, Node) and node.has_attributes()


def _require_parent(node) -> None:
    if not isinstance(node, Node) or not node.has_children():
        raise TypeError(f"{node!r} cannot hold child nodes")


# Parsing and serialization

def is_document(string: Union[str, bytes]) -> bool:
    """
    Check if a string is likely a complete HTML document.

    This is a prefix heuristic, not a parse: it only looks for a doctype or an
    ``html``, ``head`` or ``body`` start tag at the beginning of the string.

    Args:
        string: HTML string to check; undecoded bytes are matched as ASCII

    Returns:
        True if the string appears to be a complete document
    """
    pattern = DOCUMENT_BYTES_PATTERN if isinstance(string, bytes) else DOCUMENT_PATTERN
    return pattern.match(string) is not None


def parse(string: Union[str, bytes], smart: bool = False,
          config: Optional[Config] = None) -> Union[Document, DocumentFragment]:
    """
    Parse an HTML string into a document or fragment.

    Args:
        string: HTML string, or bytes left to html5lib to decode
        smart: If true, parse as a fragment unless the string looks like a document
        config: Parser configuration, the process default when omitted

    Returns:
        Parsed document or fragment
    """
    parser = HTMLParser(config)
    if smart and not is_document(string):
        return parser.parse_fragment(string)
    return parser.parse_document(string)


def create_fragment(string: Union[str, bytes], config: Optional[Config] = None) -> DocumentFragment:
    """
    Parse an HTML string into a document fragment.

    Args:
        string: HTML string to parse
        config: Parser configuration, the process default when omitted

    Returns:
        Document fragment
    """
    return HTMLParser(config).parse_fragment(string)


def stringify(node: Node, config: Optional[Config] = None) -> str:
    """
    Serialize a node back to HTML.

    Documents, fragments and elements render their children; the element's
    own tags are not included.

    Args:
        node: Node to serialize
        config: Serializer configuration, the process default when omitted

    Returns:
        HTML string
    """
    return TreeSerializer(config).serialize(node)


# Creation

def create_node(tag_name: str) -> Element:
    """
    Create a new, detached element in the HTML namespace.

    Args:
        tag_name: Tag name for the new element

    Returns:
        New element with no attributes and no children
    """
    return Element(tag_name)


def create_text_node(text: str = "") -> Text:
    """
    Create a new, detached text node.

    Args:
        text: Text content; falsy values give an empty string

    Returns:
        New text node
    """
    return Text(text or "")


def to_attrs(mapping: Mapping[str, str]) -> List[Attr]:
    """
    Convert a mapping to a list of attributes, in the mapping's order.

    Args:
        mapping: Attribute names to values

    Returns:
        List of attributes
    """
    return [Attr(name, value) for name, value in mapping.items()]


# Attributes

def attributes_of(node: Node) -> Dict[str, str]:
    """
    Convert a node's attributes to a dict.

    Non-element nodes give an empty dict. If an element carries the same name
    twice, the later value wins.

    Args:
        node: Node to extract attributes from

    Returns:
        Dict of attribute name to value
    """
    if not _is_element(node):
        return {}
    return {attr.name: attr.value for attr in node.attrs}


def set_attribute(node: Node, name: str, value: str) -> Node:
    """
    Set an attribute, updating it in place if present or appending it otherwise.

    Args:
        node: Node to set the attribute on; non-elements are returned untouched
        name: Attribute name
        value: Attribute value

    Returns:
        The node
    """
    if not _is_element(node):
        return node

    for attr in node.attrs:
        if attr.name == name:
            attr.value = value
            break
    else:
        node.attrs.append(Attr(name, value))

    return node


def get_attribute(node: Node, name: str) -> Optional[str]:
    """
    Get an attribute value.

    Args:
        node: Node to read from
        name: Attribute name

    Returns:
        The value, or None for non-elements and absent attributes
    """
    if not _is_element(node):
        return None
    for attr in node.attrs:
        if attr.name == name:
            return attr.value
    return None


def remove_attribute(node: Node, name: str) -> None:
    """
    Remove an attribute, keeping the order of the others.

    Args:
        node: Node to remove the attribute from
        name: Attribute name to remove
    """
    if not _is_element(node):
        return
    for index, attr in enumerate(node.attrs):
        if attr.name == name:
            del node.attrs[index]
            return


# Structure

def prepend(parent: Node, node: Node) -> Node:
    """
    Insert a node as the first child of a parent.

    The node is not detached from a previous parent; call ``remove`` first
    when moving a node.

    Args:
        parent: Parent node
        node: Node to prepend

    Returns:
        The prepended node

    Raises:
        TypeError: If parent cannot hold children
    """
    _require_parent(parent)
    node.parent_node = parent
    parent.child_nodes.insert(0, node)
    return node


def append(parent: Node, node: Node) -> Node:
    """
    Insert a node as the last child of a parent.

    The node is not detached from a previous parent; call ``remove`` first
    when moving a node.

    Args:
        parent: Parent node
        node: Node to append

    Returns:
        The appended node

    Raises:
        TypeError: If parent cannot hold children
    """
    _require_parent(parent)
    node.parent_node = parent
    parent.child_nodes.append(node)
    return node


def replace(original: Node, node: Node) -> Optional[Node]:
    """
    Put a node at the position another node occupies in its parent.

    The original node is detached: its parent reference is cleared.

    Args:
        original: Node to replace
        node: New node

    Returns:
        The new node, or None if the original is not attached to a parent
    """
    parent = original.parent_node
    if parent is None:
        return None

    index = parent.index_of(original)
    if index == -1:
        logger.debug(f"{original!r} is not a child of its recorded parent {parent!r}")
        return None

    node.parent_node = parent
    parent.child_nodes[index] = node
    if node is not original:
        original.parent_node = None
    return node


def remove(node: Node) -> Node:
    """
    Remove a node from its parent.

    Nothing happens when the node has no parent or is not in its parent's
    children. Otherwise its parent reference is cleared.

    Args:
        node: Node to remove

    Returns:
        The node
    """
    parent = node.parent_node
    if parent is not None:
        index = parent.index_of(node)
        if index != -1:
            del parent.child_nodes[index]
            node.parent_node = None
    return node


# Content

def text_of(node: Node) -> str:
    """
    Get the text of a node holding a single text child.

    Args:
        node: Node to get text from

    Returns:
        The text, or an empty string when the node has no children

    Raises:
        InvalidShapeError: If the node has several children or a non-text child
    """
    child_nodes = node.child_nodes
    if not child_nodes:
        return ""
    if len(child_nodes) != 1:
        raise InvalidShapeError("Node must have exactly one child node", node)

    child = child_nodes[0]
    if not child.is_text():
        raise InvalidShapeError("Child node must be a text node", node)
    return child.value or ""


def set_text(node: Node, text: str = "") -> Node:
    """
    Replace all children of a node with a single text node.

    Args:
        node: Node to set text on
        text: Text content; falsy values give an empty string

    Returns:
        The node

    Raises:
        TypeError: If the node cannot hold children
    """
    _require_parent(node)
    for child in node.child_nodes:
        if child.parent_node is node:
            child.parent_node = None
    node.child_nodes = []
    append(node, create_text_node(text))
    return node


# Traversal

def flatten(node: Union[Node, Sequence[Node]], arr: Optional[List[Node]] = None) -> List[Node]:
    """
    List a node and all its descendants in pre-order.

    A list or tuple is treated as a forest: each root is listed and then
    flattened as a single node, which lists the root a second time before its
    descendants.

    Args:
        node: Node or sequence of nodes to flatten
        arr: Optional list to append the results to

    Returns:
        The list of nodes (``arr`` when given)

    Raises:
        TypeError: If an item is not a node
    """
    result = arr if arr is not None else []
    if isinstance(node, (list, tuple)):
        for root in node:
            if not isinstance(root, Node):
                raise TypeError(f"Cannot flatten {type(root).__name__}")
            result.append(root)
            _flatten_node(root, result)
    else:
        _flatten_node(node, result)
    return result


def _flatten_node(node: Node, result: List[Node]) -> None:
    pending = [node]
    while pending:
        current = pending.pop()
        if not isinstance(current, Node):
            raise TypeError(f"Cannot flatten {type(current).__name__}")
        result.append(current)
        if current.has_children():
            pending.extend(reversed(current.child_nodes))
