"""Flatten a parsed HTML tree into category indexes for repeated lookups.

The tree is walked once by :meth:`NodeManager.parse` with one or more
:class:`Flattener` strategies; lookups afterwards go through a
:class:`Cursor` selected from the returned :class:`MultiCursor`::

    manager = NodeManager.from_string("<html><body><p>hi</p></body></html>")
    cursor = manager.parse(TagFlattener()).select_cursor(TagFlattener())
    paragraphs = cursor.select_nodes("p")
"""

from .cursor import Cursor, MultiCursor
from .errors import ErrorKind, FlattenHTMLError, NoFlattenerError, ParentlessNodeError
from .filters import with_attribute, with_attribute_value, with_tag
from .flattener import Flattener
from .iterator import FilterOption, NodeIterator
from .manager import ManagerOptions, NodeManager
from .node import Node, NodeType
from .tag_flattener import TagFlattener

__all__ = [
    "Cursor",
    "ErrorKind",
    "FilterOption",
    "FlattenHTMLError",
    "Flattener",
    "ManagerOptions",
    "MultiCursor",
    "NoFlattenerError",
    "Node",
    "NodeIterator",
    "NodeManager",
    "NodeType",
    "ParentlessNodeError",
    "TagFlattener",
    "with_attribute",
    "with_attribute_value",
    "with_tag",
]
