"""Ordered node collections with tombstone removal and filtering."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional

from .node import Node

FilterOption = Callable[[Node], bool]


class NodeIterator:
    """Append-only sequence of :class:`Node` references.

    Removed nodes stay in the backing list; every read skips them instead.
    That keeps positions stable, so an iterator handed out earlier (and its
    :meth:`next` cursor) stays valid after a node is removed through any
    reference to it.
    """

    def __init__(self) -> None:
        self._nodes: List[Node] = []
        self._cursor = 0

    def __repr__(self) -> str:
        return f"<NodeIterator {len(self)} nodes>"

    def __len__(self) -> int:
        return sum(1 for node in self._nodes if not node.is_removed)

    def __iter__(self) -> Iterator[Node]:
        for node in self._nodes:
            if not node.is_removed:
                yield node

    def add(self, node: Node) -> "NodeIterator":
        self._nodes.append(node)
        return self

    def each(self, visit: Callable[[Node], None]) -> None:
        for node in self:
            visit(node)

    def first(self) -> Optional[Node]:
        return next(iter(self), None)

    def next(self) -> Optional[Node]:
        """Return the next live node, or ``None`` once the end is reached.

        The position is kept between calls; use :meth:`reset` to start over.
        """
        while self._cursor < len(self._nodes):
            node = self._nodes[self._cursor]
            self._cursor += 1
            if not node.is_removed:
                return node
        return None

    def reset(self) -> None:
        self._cursor = 0

    def filter(self, option: FilterOption) -> "NodeIterator":
        filtered = NodeIterator()
        for node in self:
            if option(node):
                filtered.add(node)
        return filtered

    def filter_or(self, *options: FilterOption) -> "NodeIterator":
        """Keep the nodes for which any of ``options`` holds."""
        filtered = NodeIterator()
        for node in self:
            if any(option(node) for option in options):
                filtered.add(node)
        return filtered

    def filter_and(self, *options: FilterOption) -> "NodeIterator":
        """Keep the nodes for which every one of ``options`` holds."""
        filtered = NodeIterator()
        for node in self:
            if all(option(node) for option in options):
                filtered.add(node)
        return filtered
