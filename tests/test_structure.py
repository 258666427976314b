"""Tests for creation and structural mutators."""

import pytest

from html_ast_utils import (
    HTML_NAMESPACE, append, create_fragment, create_node, create_text_node, prepend, remove,
    replace, stringify
)


class TestCreation:
    def test_create_node(self):
        fragment = create_fragment("")
        fragment.child_nodes.append(create_node("div"))
        assert stringify(fragment) == "<div></div>"

    def test_create_node_is_detached(self):
        node = create_node("div")
        assert node.parent_node is None
        assert node.child_nodes == []
        assert node.attrs == []
        assert node.namespace_uri == HTML_NAMESPACE

    def test_create_text_node(self, first_child):
        fragment, node = first_child("<div></div>")
        node.child_nodes.append(create_text_node("lol"))
        assert stringify(fragment) == "<div>lol</div>"

    def test_create_text_node_falsy(self):
        assert create_text_node(None).value == ""
        assert create_text_node().value == ""
        assert create_text_node("x").parent_node is None


class TestPrependAppend:
    def test_prepend(self, first_child):
        fragment, parent = first_child("<div><a></a></div>")
        prepend(parent, create_node("br"))
        assert stringify(fragment) == "<div><br><a></a></div>"

    def test_append(self, first_child):
        fragment, parent = first_child("<div><a></a></div>")
        append(parent, create_node("br"))
        assert stringify(fragment) == "<div><a></a><br></div>"

    def test_sets_parent_and_returns_node(self):
        parent = create_node("ul")
        first, last = create_node("li"), create_node("li")
        assert append(parent, last) is last
        assert prepend(parent, first) is first
        assert parent.child_nodes == [first, last]
        assert first.parent_node is parent
        assert last.parent_node is parent

    def test_does_not_detach_from_previous_parent(self):
        old_parent, new_parent = create_node("div"), create_node("div")
        child = append(old_parent, create_node("span"))
        append(new_parent, child)
        assert child in old_parent.child_nodes
        assert child.parent_node is new_parent

    def test_leaf_parent_rejected(self):
        with pytest.raises(TypeError):
            append(create_text_node("x"), create_node("b"))
        with pytest.raises(TypeError):
            prepend(create_text_node("x"), create_node("b"))


class TestReplace:
    def test_replace_sole_script_child(self, first_child):
        fragment, script = first_child("<script>old()</script>")
        text = create_text_node("a && b")
        assert replace(script.child_nodes[0], text) is text
        assert script.child_nodes == [text]
        assert text.parent_node is script
        # Linked to the script, so written as script source
        assert stringify(fragment) == "<script>a && b</script>"

    def test_replace_script_child_with_unlinked_text(self, first_child):
        fragment, script = first_child("<script>old()</script>")
        replace(script.child_nodes[0], create_text_node("a && b"))
        script.child_nodes[0].parent_node = None
        assert stringify(fragment) == "<script>a &amp;&amp; b</script>"

    def test_assigning_children_directly(self, first_child):
        fragment, script = first_child("<script></script>")
        script.child_nodes = [create_text_node("a && b")]
        assert stringify(fragment) == "<script>a &amp;&amp; b</script>"

    def test_preserves_position(self, first_child):
        fragment, parent = first_child("<p><a></a><b></b><i></i></p>")
        original = parent.child_nodes[1]
        new = create_node("em")
        replace(original, new)
        assert stringify(fragment) == "<p><a></a><em></em><i></i></p>"
        assert parent.child_nodes[1] is new
        assert new.parent_node is parent
        assert original.parent_node is None

    def test_detached_original(self):
        assert replace(create_node("a"), create_node("b")) is None

    def test_original_not_in_parent(self):
        parent = create_node("div")
        orphan = create_node("span")
        orphan.parent_node = parent
        new = create_node("b")
        assert replace(orphan, new) is None
        assert new.parent_node is None
        assert parent.child_nodes == []

    def test_identity_lookup(self):
        parent = create_node("div")
        first = append(parent, create_text_node("same"))
        second = append(parent, create_text_node("same"))
        replace(second, create_node("br"))
        assert parent.child_nodes[0] is first
        assert parent.child_nodes[1].tag_name == "br"


class TestRemove:
    def test_remove_only_child(self):
        fragment = create_fragment("<div><a></a></div>")
        remove(fragment.child_nodes[0])
        assert stringify(fragment) == ""

    def test_remove_middle(self, first_child):
        fragment, parent = first_child("<p><a></a><b></b><i></i></p>")
        removed = parent.child_nodes[1]
        assert remove(removed) is removed
        assert stringify(fragment) == "<p><a></a><i></i></p>"
        assert removed.parent_node is None

    def test_detached_node_is_noop(self):
        node = create_node("a")
        assert remove(node) is node

    def test_not_found_is_noop(self):
        parent = create_node("div")
        child = append(parent, create_node("p"))
        stale = create_node("span")
        stale.parent_node = parent
        remove(stale)
        assert parent.child_nodes == [child]
        assert stale.parent_node is parent

    def test_remove_then_reparent(self):
        left, right = create_node("div"), create_node("div")
        child = append(left, create_node("span"))
        append(right, remove(child))
        assert left.child_nodes == []
        assert right.child_nodes == [child]
        assert child.parent_node is right
