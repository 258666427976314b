"""
HTML serializer implementation.
This module renders the package's node model through html5lib's serializer.
"""

import logging
from typing import Dict, Iterator, Optional, Tuple
from xml.sax.saxutils import escape

from html5lib.constants import namespaces, rcdataElements, voidElements
from html5lib.serializer import HTMLSerializer
from html5lib.treewalkers.base import TreeWalker as BaseTreeWalker

from html_ast_utils.dom import Element, Node, NodeType
from html_ast_utils.utils.config import Config, get_default_config

logger = logging.getLogger(__name__)

_CONTAINERS = (NodeType.DOCUMENT_NODE, NodeType.DOCUMENT_FRAGMENT_NODE)


def _is_void(element: Element) -> bool:
    namespace = element.namespace_uri
    return (not namespace or namespace == namespaces["html"]) and element.tag_name in voidElements


def _is_linked_raw_text(text: Node, container: Optional[Node]) -> bool:
    return (container is not None and container.has_attributes()
            and container.tag_name in rcdataElements and text.parent_node is container)


class TreeWalker(BaseTreeWalker):
    """
    html5lib tree walker over the package's node model.

    Walks the child lists only, never parent references, so trees assembled
    by appending to ``child_nodes`` directly serialize the same way. A node
    that can hold children is serialized by its contents; a leaf by itself.

    With ``escape_unlinked_raw_text`` set, text the serializer would write
    verbatim inside ``script``, ``style`` and the other raw-text elements is
    escaped here unless it is a child whose ``parent_node`` is that element.
    Parsed script and style bodies stay verbatim; text placed into the child
    list by hand is escaped.
    """

    def __init__(self, tree: Node, escape_unlinked_raw_text: bool = False):
        super().__init__(tree)
        self.escape_unlinked_raw_text = escape_unlinked_raw_text

    def __iter__(self) -> Iterator[Dict]:
        root = self.tree
        if root.has_children():
            pending = [(child, root, False) for child in reversed(root.child_nodes)]
        else:
            pending = [(root, None, False)]
        # Mirrors HTMLSerializer's raw-text state, keyed on tag names only
        raw_text = False

        while pending:
            node, container, closing = pending.pop()
            if closing:
                if node.tag_name in rcdataElements:
                    raw_text = False
                yield self.endTag(node.namespace_uri, node.tag_name)
                continue

            node_type = node.node_type
            if node_type == NodeType.ELEMENT_NODE:
                attrs = self._attributes(node)
                if _is_void(node):
                    yield from self.emptyTag(node.namespace_uri, node.tag_name, attrs,
                                             bool(node.child_nodes))
                    continue
                if node.tag_name in rcdataElements:
                    raw_text = True
                yield self.startTag(node.namespace_uri, node.tag_name, attrs)
                pending.append((node, container, True))
                pending.extend((child, node, False) for child in reversed(node.child_nodes))
            elif node_type == NodeType.TEXT_NODE:
                data = node.value or ""
                if raw_text and self.escape_unlinked_raw_text and not _is_linked_raw_text(node, container):
                    data = escape(data)
                yield from self.text(data)
            elif node_type == NodeType.COMMENT_NODE:
                yield self.comment(node.data)
            elif node_type == NodeType.DOCUMENT_TYPE_NODE:
                yield self.doctype(node.name, node.public_id or None, node.system_id or None)
            elif node_type in _CONTAINERS:
                pending.extend((child, node, False) for child in reversed(node.child_nodes))
            else:
                yield self.unknown(node.node_name)

    @staticmethod
    def _attributes(element: Element) -> Dict[Tuple[Optional[str], str], str]:
        # html5lib keys attributes by (namespace, name); duplicates collapse here
        return {(None, attr.name): attr.value for attr in element.attrs}


class TreeSerializer:
    """Serializer turning trees back into HTML text."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the serializer.

        Args:
            config: Serializer configuration, the process default when omitted
        """
        self.config = config or get_default_config()
        self.errors = []

    def serialize(self, node: Node) -> str:
        """
        Serialize a node.

        Args:
            node: Document, fragment or element (its contents are rendered),
                or a leaf node (rendered on its own)

        Returns:
            str: HTML text

        Raises:
            TypeError: If node is not a tree node, or a serializer option is unknown
        """
        if not isinstance(node, Node):
            raise TypeError(f"Cannot serialize {type(node).__name__}")

        options = self.config.serializer_options()
        serializer = HTMLSerializer(**options)
        walker = TreeWalker(node, escape_unlinked_raw_text=not options.get("escape_rcdata", False))
        output = serializer.render(walker)
        self.errors = list(serializer.errors)
        if self.errors:
            logger.debug(f"Serializer reported {len(self.errors)} problems: {self.errors}")
        return output
