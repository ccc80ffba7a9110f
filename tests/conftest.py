from __future__ import annotations

from typing import List, Optional

import pytest

from flattenhtml import Flattener, Node, NodeIterator, NodeManager, NodeType

SAMPLE_HTML = '<html><body><div><p class="p1">hello</p><p class="p2">world</p></div></body></html>'
EMPTY_HTML = "<html><head></head><body></body></html>"


class SampleError(Exception):
    pass


class CountingFlattener(Flattener):
    """Counts the nodes it is fed; optionally fails on the first one."""

    kind = "counting"

    def __init__(self, *, with_err: bool = False, default_keys: Optional[List[str]] = None):
        self.called = 0
        self.with_err = with_err
        self.default_keys = default_keys or []
        self.seen: List[Node] = []

    def flatten(self, node: Node) -> None:
        if self.with_err:
            raise SampleError("sample error")
        self.called += 1
        self.seen.append(node)

    def get_nodes_by_key(self, key: str) -> Optional[NodeIterator]:
        if key in self.default_keys:
            return NodeIterator()
        return None

    def keys(self):
        return list(self.default_keys)

    def __len__(self) -> int:
        return self.called


class ClassFlattener(Flattener):
    """Groups element nodes by the value of their ``class`` attribute."""

    kind = "class"

    def __init__(self) -> None:
        self._flattened = {}

    def flatten(self, node: Node) -> None:
        if node.node_type is not NodeType.ELEMENT or not node.has_attribute("class"):
            return
        self._flattened.setdefault(node.attribute("class"), NodeIterator()).add(node)

    def get_nodes_by_key(self, key: str) -> Optional[NodeIterator]:
        return self._flattened.get(key)

    def keys(self):
        return list(self._flattened)

    def __len__(self) -> int:
        return len(self._flattened)


@pytest.fixture
def sample_manager() -> NodeManager:
    return NodeManager.from_string(SAMPLE_HTML)


@pytest.fixture
def empty_manager() -> NodeManager:
    return NodeManager.from_string(EMPTY_HTML)
