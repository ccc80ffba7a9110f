"""Read/write wrapper around a single element of a parsed HTML tree."""

from __future__ import annotations

import enum
from typing import Dict, Mapping, Optional

from bs4 import BeautifulSoup, Comment, Doctype, NavigableString, Tag
from bs4.element import PageElement

from .errors import ParentlessNodeError


class NodeType(enum.Enum):
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"
    DOCTYPE = "doctype"
    DOCUMENT = "document"


def node_type_of(element: PageElement) -> NodeType:
    if isinstance(element, BeautifulSoup):
        return NodeType.DOCUMENT
    if isinstance(element, Tag):
        return NodeType.ELEMENT
    if isinstance(element, Comment):
        return NodeType.COMMENT
    if isinstance(element, Doctype):
        return NodeType.DOCTYPE
    return NodeType.TEXT


def _attribute_value(value) -> str:
    # Builders that split multi-valued attributes hand us lists.
    if isinstance(value, (list, tuple)):
        return " ".join(value)
    return str(value)


class Node:
    """Wrapper around a bs4 element that keeps the tree structure intact.

    The wrapper does not own the element; the tree does. Attribute values are
    materialized once into a cache which every mutation made through this
    class keeps in sync with the element. Once :meth:`remove` succeeds the
    node is a tombstone: iterators skip it, but attribute reads still answer
    from the cache.
    """

    def __init__(self, element: PageElement):
        self._element = element
        self._attributes: Dict[str, str] = {}
        if isinstance(element, Tag):
            self._attributes = {key: _attribute_value(value) for key, value in element.attrs.items()}
        self._removed = False

    def __repr__(self) -> str:
        state = " removed" if self._removed else ""
        label = self.tag_name if self.tag_name is not None else self.node_type.value
        return f"<Node {label}{state}>"

    @property
    def element(self) -> PageElement:
        """The underlying bs4 element.

        Writing to it directly bypasses the attribute cache and the removal
        bookkeeping.
        """
        return self._element

    @property
    def node_type(self) -> NodeType:
        return node_type_of(self._element)

    @property
    def tag_name(self) -> Optional[str]:
        if isinstance(self._element, Tag):
            return self._element.name
        return None

    @property
    def text(self) -> str:
        if isinstance(self._element, Tag):
            return self._element.get_text()
        return str(self._element)

    @property
    def is_removed(self) -> bool:
        return self._removed

    @property
    def attributes(self) -> Dict[str, str]:
        return dict(self._attributes)

    def attribute(self, key: str) -> Optional[str]:
        """Return the value of ``key``, or ``None`` when the node lacks it."""
        return self._attributes.get(key)

    def has_attribute(self, key: str) -> bool:
        return key in self._attributes

    def set_attribute(self, key: str, value: str) -> None:
        """Set ``key`` on the node, keeping its position if it already exists."""
        tag = self._require_tag()
        tag.attrs[key] = value
        self._attributes[key] = value

    def remove_attribute(self, key: str) -> None:
        tag = self._require_tag()
        tag.attrs.pop(key, None)
        self._attributes.pop(key, None)

    def remove(self) -> None:
        """Detach the node from the tree and mark it as removed.

        Raises :class:`ParentlessNodeError` when the element is the document
        root or was already detached; the node is left untouched in that case.
        """
        if self._element.parent is None:
            raise ParentlessNodeError()
        self._element.extract()
        self._removed = True

    def append_child(
        self,
        node_type: NodeType,
        tag_or_content: str,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> "Node":
        """Insert a new node as the last child of this node.

        ``tag_or_content`` is the tag name for :attr:`NodeType.ELEMENT` and the
        content for text and comment nodes. The new node is rendered with the
        document but no flattener knows about it until it is passed to
        ``register_new_node`` on a cursor.
        """
        tag = self._require_tag()
        new_element = self._new_element(node_type, tag_or_content, attributes)
        tag.append(new_element)
        return Node(new_element)

    def prepend_child(
        self,
        node_type: NodeType,
        tag_or_content: str,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> "Node":
        """Insert a new node as the first child of this node."""
        tag = self._require_tag()
        new_element = self._new_element(node_type, tag_or_content, attributes)
        tag.insert(0, new_element)
        return Node(new_element)

    def append_sibling(
        self,
        node_type: NodeType,
        tag_or_content: str,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> "Node":
        """Insert a new node right after this one.

        Raises :class:`ParentlessNodeError` if this node has no parent.
        """
        self._require_parent()
        new_element = self._new_element(node_type, tag_or_content, attributes)
        self._element.insert_after(new_element)
        return Node(new_element)

    def prepend_sibling(
        self,
        node_type: NodeType,
        tag_or_content: str,
        attributes: Optional[Mapping[str, str]] = None,
    ) -> "Node":
        """Insert a new node right before this one.

        Raises :class:`ParentlessNodeError` if this node has no parent.
        """
        self._require_parent()
        new_element = self._new_element(node_type, tag_or_content, attributes)
        self._element.insert_before(new_element)
        return Node(new_element)

    def _require_tag(self) -> Tag:
        if not isinstance(self._element, Tag):
            raise TypeError(f"{self.node_type.value} nodes have no attributes or children")
        return self._element

    def _require_parent(self) -> None:
        if self._element.parent is None:
            raise ParentlessNodeError("node with no parent cannot have siblings")

    def _document(self) -> Optional[BeautifulSoup]:
        top = self._element
        while top.parent is not None:
            top = top.parent
        return top if isinstance(top, BeautifulSoup) else None

    def _new_element(
        self,
        node_type: NodeType,
        tag_or_content: str,
        attributes: Optional[Mapping[str, str]],
    ) -> PageElement:
        if node_type is NodeType.ELEMENT:
            attrs = dict(attributes or {})
            soup = self._document()
            if soup is not None:
                return soup.new_tag(tag_or_content, attrs=attrs)
            return Tag(name=tag_or_content, attrs=attrs)
        if node_type is NodeType.TEXT:
            return NavigableString(tag_or_content)
        if node_type is NodeType.COMMENT:
            return Comment(tag_or_content)
        raise ValueError(f"Cannot create a node of type {node_type.value}")
