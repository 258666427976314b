"""
HTML parser implementation.
This module parses HTML with html5lib and converts the result into the package's node model.
"""

import logging
from typing import List, Optional, Union

import html5lib
from html5lib.html5parser import ParseError

from html_ast_utils.dom import (
    Attr, Comment, Document, DocumentFragment, DocumentType, Element, Node, ParentNode, Text
)
from html_ast_utils.utils.config import Config, get_default_config
from html_ast_utils.utils.logging import log_exception

logger = logging.getLogger(__name__)

# minidom node types
_ELEMENT_NODE = 1
_TEXT_NODE = 3
_CDATA_SECTION_NODE = 4
_COMMENT_NODE = 8
_DOCUMENT_TYPE_NODE = 10


class HTMLParser:
    """HTML parser backed by html5lib's tree construction with the dom tree builder."""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the HTML parser.

        Args:
            config: Parser configuration, the process default when omitted
        """
        self.config = config or get_default_config()
        self.errors: List[str] = []

    def _create_parser(self) -> html5lib.HTMLParser:
        options = self.config.parser_options()
        return html5lib.HTMLParser(
            tree=html5lib.treebuilders.getTreeBuilder("dom"),
            strict=options.get("strict", False),
            namespaceHTMLElements=options.get("namespace_html_elements", True),
        )

    def parse_document(self, html_content: Union[str, bytes]) -> Document:
        """
        Parse HTML content as a full document.

        Args:
            html_content: HTML content to parse

        Returns:
            Document: Parsed document, always with html/head/body

        Raises:
            TypeError: If html_content is None
            ParseError: In strict mode, on the first parse error
        """
        if html_content is None:
            raise TypeError("Cannot parse None HTML content")

        parser = self._create_parser()
        try:
            parsed = parser.parse(html_content)
        except ParseError as e:
            log_exception(logger, e, "Strict document parse failed")
            raise
        finally:
            self._collect_errors(parser)

        document = Document()
        self._convert_children(parsed, document)
        logger.debug(f"Parsed document with {len(document.child_nodes)} top-level nodes")
        return document

    def parse_fragment(self, html_content: Union[str, bytes], container: Optional[str] = None) -> DocumentFragment:
        """
        Parse HTML content as a fragment, without html/head/body wrapping.

        Args:
            html_content: HTML content to parse
            container: Context element name, defaults to ``parser.fragment_container``

        Returns:
            DocumentFragment: Parsed fragment

        Raises:
            TypeError: If html_content is None
            ParseError: In strict mode, on the first parse error
        """
        if html_content is None:
            raise TypeError("Cannot parse None HTML content")

        container = container or self.config.get("parser.fragment_container", "div")
        parser = self._create_parser()
        try:
            parsed = parser.parseFragment(html_content, container=container)
        except ParseError as e:
            log_exception(logger, e, "Strict fragment parse failed")
            raise
        finally:
            self._collect_errors(parser)

        fragment = DocumentFragment()
        self._convert_children(parsed, fragment)
        logger.debug(f"Parsed fragment in <{container}> context with {len(fragment.child_nodes)} top-level nodes")
        return fragment

    def _collect_errors(self, parser: html5lib.HTMLParser) -> None:
        self.errors = []
        for position, error_code, _ in parser.errors:
            line, column = position if position else (0, 0)
            self.errors.append(f"line {line}, col {column}: {error_code}")
        if self.errors:
            logger.debug(f"html5lib reported {len(self.errors)} parse errors")

    def _convert_children(self, parsed, root: ParentNode) -> None:
        """
        Convert the children of a parsed minidom node into ``root``.

        Uses an explicit worklist so deep trees do not hit the recursion limit.

        Args:
            parsed: The minidom Document or DocumentFragment from html5lib
            root: The empty container to fill
        """
        pending = [(parsed, root)]
        while pending:
            source, target = pending.pop()
            for child in source.childNodes:
                converted = self._convert_node(child)
                if converted is None:
                    continue
                converted.parent_node = target
                target.child_nodes.append(converted)
                if isinstance(converted, Element) and child.hasChildNodes():
                    pending.append((child, converted))

        # html5lib emits leading whitespace as its own text node
        root.normalize()

    def _convert_node(self, node) -> Optional[Node]:
        node_type = node.nodeType
        if node_type == _ELEMENT_NODE:
            element = Element(node.tagName, node.namespaceURI)
            for name, value in node.attributes.items():
                element.attrs.append(Attr(name, value))
            return element
        if node_type in (_TEXT_NODE, _CDATA_SECTION_NODE):
            return Text(node.data)
        if node_type == _COMMENT_NODE:
            return Comment(node.data)
        if node_type == _DOCUMENT_TYPE_NODE:
            return DocumentType(node.name or "", node.publicId, node.systemId)

        logger.warning(f"Skipping unsupported parsed node type {node_type}")
        return None
