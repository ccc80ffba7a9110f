"""
Tests for the Node wrapper: attribute cache, removal and insertion.
"""

import pytest
from bs4 import Tag

from flattenhtml import ErrorKind, Node, NodeManager, NodeType, ParentlessNodeError, TagFlattener


def _first(manager, tag):
    cursor = manager.parse(TagFlattener()).first()
    return cursor.select_nodes(tag).first()


class TestAttributes:
    def test_attributes_are_materialized(self):
        node = Node(Tag(name="div", attrs={"class": "test"}))
        assert node.attributes == {"class": "test"}
        assert node.attribute("class") == "test"
        assert node.has_attribute("class")

    def test_missing_attribute(self):
        node = Node(Tag(name="div", attrs={"class": "test"}))
        assert node.attribute("non-existent") is None
        assert not node.has_attribute("non-existent")

    def test_empty_value_is_found(self):
        node = Node(Tag(name="input", attrs={"disabled": ""}))
        assert node.attribute("disabled") == ""
        assert node.has_attribute("disabled")

    def test_set_new_attribute(self):
        node = Node(Tag(name="div", attrs={"class": "test"}))
        node.set_attribute("new-attr", node.tag_name)
        assert node.attribute("new-attr") == "div"
        assert len(node.attributes) == 2
        assert node.element["new-attr"] == "div"

    def test_remove_attribute(self):
        node = Node(Tag(name="div", attrs={"class": "test"}))
        node.set_attribute("new-attr", "x")
        node.remove_attribute("new-attr")
        assert node.attribute("new-attr") is None
        assert len(node.attributes) == 1
        assert "new-attr" not in node.element.attrs

    def test_remove_missing_attribute_is_noop(self):
        node = Node(Tag(name="div", attrs={"class": "test"}))
        node.remove_attribute("nope")
        assert node.attributes == {"class": "test"}

    def test_overwrite_keeps_position(self):
        manager = NodeManager.from_string('<html><head></head><body><div a="1" b="2"></div></body></html>')
        div = _first(manager, "div")
        div.set_attribute("a", "9")
        div.set_attribute("c", "3")
        assert list(div.attributes) == ["a", "b", "c"]
        assert '<div a="9" b="2" c="3"></div>' in manager.render_string()

    def test_attributes_returns_copy(self):
        node = Node(Tag(name="div", attrs={"class": "test"}))
        node.attributes["class"] = "changed"
        assert node.attribute("class") == "test"

    def test_text_nodes_have_no_attributes(self, sample_manager):
        paragraph = _first(sample_manager, "p")
        text = Node(paragraph.element.contents[0])
        assert text.node_type is NodeType.TEXT
        assert text.tag_name is None
        assert text.attributes == {}
        with pytest.raises(TypeError):
            text.set_attribute("class", "x")


class TestRemove:
    def test_remove_detaches_element(self, sample_manager):
        paragraph = _first(sample_manager, "p")
        paragraph.remove()
        assert paragraph.is_removed
        assert paragraph.element.parent is None
        assert "hello" not in sample_manager.render_string()

    def test_removed_node_keeps_stale_attributes(self, sample_manager):
        paragraph = _first(sample_manager, "p")
        paragraph.remove()
        assert paragraph.attribute("class") == "p1"

    def test_parentless_node(self):
        node = Node(Tag(name="div"))
        with pytest.raises(ParentlessNodeError) as excinfo:
            node.remove()
        assert excinfo.value.kind is ErrorKind.PARENTLESS_NODE
        assert not node.is_removed

    def test_document_root_cannot_be_removed(self, sample_manager):
        before = sample_manager.render_string()
        root = Node(sample_manager.root)
        assert root.node_type is NodeType.DOCUMENT
        with pytest.raises(ParentlessNodeError):
            root.remove()
        assert not root.is_removed
        assert sample_manager.render_string() == before

    def test_second_remove_fails(self, sample_manager):
        paragraph = _first(sample_manager, "p")
        paragraph.remove()
        with pytest.raises(ParentlessNodeError):
            paragraph.remove()
        assert paragraph.is_removed


class TestInsertion:
    HTML = "<html><head></head><body><div></div></body></html>"

    def test_append_child(self):
        manager = NodeManager.from_string(self.HTML)
        div = _first(manager, "div")
        div.append_child(NodeType.ELEMENT, "span", {"id": "a"})
        span = div.append_child(NodeType.ELEMENT, "span", {"id": "b"})
        assert span.tag_name == "span"
        assert span.attribute("id") == "b"
        assert not span.is_removed
        assert manager.render_string() == (
            '<html><head></head><body><div><span id="a"></span><span id="b"></span></div></body></html>'
        )

    def test_prepend_child_text(self):
        manager = NodeManager.from_string(self.HTML)
        div = _first(manager, "div")
        div.append_child(NodeType.ELEMENT, "span")
        text = div.prepend_child(NodeType.TEXT, "hi")
        assert text.node_type is NodeType.TEXT
        assert text.text == "hi"
        assert manager.render_string() == "<html><head></head><body><div>hi<span></span></div></body></html>"

    def test_prepend_child_into_empty_element(self):
        manager = NodeManager.from_string(self.HTML)
        div = _first(manager, "div")
        div.prepend_child(NodeType.ELEMENT, "em")
        assert "<div><em></em></div>" in manager.render_string()

    def test_append_sibling(self):
        manager = NodeManager.from_string(self.HTML)
        div = _first(manager, "div")
        div.append_sibling(NodeType.ELEMENT, "p", {"class": "after"})
        assert manager.render_string() == (
            '<html><head></head><body><div></div><p class="after"></p></body></html>'
        )

    def test_prepend_sibling(self):
        manager = NodeManager.from_string(self.HTML)
        div = _first(manager, "div")
        div.prepend_sibling(NodeType.COMMENT, "note")
        assert manager.render_string() == "<html><head></head><body><!--note--><div></div></body></html>"

    def test_sibling_needs_parent(self):
        node = Node(Tag(name="div"))
        with pytest.raises(ParentlessNodeError):
            node.append_sibling(NodeType.ELEMENT, "p")
        with pytest.raises(ParentlessNodeError):
            node.prepend_sibling(NodeType.TEXT, "x")

    def test_child_of_detached_element(self):
        parent = Node(Tag(name="ul"))
        child = parent.append_child(NodeType.ELEMENT, "li", {"class": "item"})
        assert child.element.parent is parent.element
        assert str(parent.element) == '<ul><li class="item"></li></ul>'

    def test_unsupported_node_type(self):
        parent = Node(Tag(name="ul"))
        with pytest.raises(ValueError):
            parent.append_child(NodeType.DOCUMENT, "x")

    def test_new_node_can_be_removed(self):
        manager = NodeManager.from_string(self.HTML)
        div = _first(manager, "div")
        span = div.append_child(NodeType.ELEMENT, "span")
        span.remove()
        assert "<div></div>" in manager.render_string()
