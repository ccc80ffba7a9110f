"""Flattener grouping element nodes by their tag name."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from .flattener import Flattener
from .iterator import NodeIterator
from .node import Node, NodeType


class TagFlattener(Flattener):
    """Categorize element nodes by tag name (``meta``, ``a``, ``p``, ...).

    Text, comment and doctype nodes, and the document object itself, are
    skipped.
    """

    kind = "tag"

    def __init__(self) -> None:
        self._flattened: Dict[str, NodeIterator] = {}

    def flatten(self, node: Node) -> None:
        if node.node_type is not NodeType.ELEMENT:
            return
        self._flattened.setdefault(node.tag_name, NodeIterator()).add(node)

    def get_nodes_by_key(self, key: str) -> Optional[NodeIterator]:
        return self._flattened.get(key)

    def keys(self) -> Iterable[str]:
        return list(self._flattened)

    def __len__(self) -> int:
        return len(self._flattened)
