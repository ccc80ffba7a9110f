"""Contract shared by all categorization strategies."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from .iterator import NodeIterator
from .node import Node


class Flattener(ABC):
    """Decides how the nodes met during a traversal are grouped.

    A flattener is fed every node of the tree once, in document order, and
    files the ones it cares about under string keys. Subclasses set
    :attr:`kind` to a name unique to their strategy; two flatteners with the
    same kind are interchangeable for cursor selection, whatever they have
    indexed so far.
    """

    kind: str = ""

    @abstractmethod
    def flatten(self, node: Node) -> None:
        """Index ``node``. Raising aborts the traversal that called it."""

    @abstractmethod
    def get_nodes_by_key(self, key: str) -> Optional[NodeIterator]:
        """Return the nodes filed under ``key``, or ``None`` if it was never seen."""

    @abstractmethod
    def keys(self) -> Iterable[str]:
        """Return the observed keys in the order they were first seen."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of distinct keys."""

    def is_my_type(self, other: Optional["Flattener"]) -> bool:
        return other is not None and bool(self.kind) and other.kind == self.kind
