"""Tests for document classification and the parse entry points."""

import pytest
from html5lib.html5parser import ParseError

from html_ast_utils import (
    HTML_NAMESPACE, Document, DocumentFragment, NodeType, create_fragment, is_document, parse,
    stringify, text_of
)
from html_ast_utils.parser import HTMLParser
from html_ast_utils.utils.config import Config


class TestIsDocument:
    @pytest.mark.parametrize("html", [
        "<html><body></body></html>",
        "  <!doctype html>",
        "<!DOCTYPE html><p>x</p>",
        "\n\t<HEAD><title>t</title></HEAD>",
        "<body class='x'>",
    ])
    def test_documents(self, html):
        assert is_document(html)

    @pytest.mark.parametrize("html", [
        "<div></div>",
        "",
        "text <html>",
        "<htmlx>",
        "<header></header>",
        "<!-- comment --><html>",
    ])
    def test_fragments(self, html):
        assert not is_document(html)

    def test_bytes(self):
        assert is_document(b"  <!DOCTYPE html><p>x</p>")
        assert not is_document(b"<div></div>")


class TestParse:
    def test_default_is_document(self):
        node = parse("<div></div>")
        assert isinstance(node, Document)
        assert node.node_name == "#document"

    def test_smart_fragment(self):
        node = parse("<div></div>", True)
        assert isinstance(node, DocumentFragment)
        assert node.node_name == "#document-fragment"

    def test_smart_document(self):
        node = parse("<!doctype html><title>t</title>", smart=True)
        assert isinstance(node, Document)

    def test_smart_bytes(self):
        fragment = parse(b"\n<p>plain</p>", smart=True)
        assert isinstance(fragment, DocumentFragment)
        assert text_of(fragment.child_nodes[1]) == "plain"
        assert isinstance(parse(b"<html><body></body></html>", smart=True), Document)

    def test_document_structure(self):
        document = parse("<!DOCTYPE html><p>hi</p>")
        assert document.doctype.name == "html"
        assert document.document_element.tag_name == "html"
        assert document.head is not None
        assert text_of(document.body.child_nodes[0]) == "hi"

    def test_parent_links(self):
        fragment = create_fragment("<ul><li>a</li></ul>")
        ul = fragment.child_nodes[0]
        li = ul.child_nodes[0]
        assert ul.parent_node is fragment
        assert li.parent_node is ul
        assert li.child_nodes[0].parent_node is li

    def test_attribute_order_preserved(self):
        fragment = create_fragment('<img src="a.png" alt="a" width="1" class="c">')
        assert [attr.name for attr in fragment.child_nodes[0].attrs] == ["src", "alt", "width", "class"]

    def test_html_namespace(self):
        element = create_fragment("<span></span>").child_nodes[0]
        assert element.namespace_uri == HTML_NAMESPACE

    def test_comments_and_doctype_round_trip(self):
        html = "<!DOCTYPE html><!-- top --><html><head></head><body><!-- x --><p>a</p></body></html>"
        assert stringify(parse(html)) == html

    def test_comment_node(self):
        fragment = create_fragment("<!-- note -->")
        assert fragment.child_nodes[0].node_type == NodeType.COMMENT_NODE
        assert fragment.child_nodes[0].data == " note "

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            parse(None)


class TestHTMLParser:
    def test_collects_errors(self):
        parser = HTMLParser(Config())
        parser.parse_document("<div></div>")
        assert parser.errors
        assert all(error.startswith("line ") for error in parser.errors)

    def test_no_errors_for_clean_document(self):
        parser = HTMLParser(Config())
        parser.parse_document("<!DOCTYPE html><html><head></head><body></body></html>")
        assert parser.errors == []

    def test_strict_mode_raises(self):
        config = Config(overrides={"parser.strict": True})
        with pytest.raises(ParseError):
            parse("<div></div>", config=config)

    def test_fragment_container(self):
        config = Config(overrides={"parser.fragment_container": "tr"})
        fragment = HTMLParser(config).parse_fragment("<td>cell</td>")
        assert fragment.child_nodes[0].tag_name == "td"

    def test_explicit_container(self):
        fragment = HTMLParser(Config()).parse_fragment("<td>cell</td>", container="div")
        assert [node.node_name for node in fragment.child_nodes] == ["#text"]
