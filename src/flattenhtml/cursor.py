"""Views for selecting one flattener out of a parse and querying it."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence, Tuple

from .errors import NoFlattenerError
from .flattener import Flattener
from .iterator import NodeIterator
from .node import Node

logger = logging.getLogger(__name__)


class Cursor:
    """Lookups and registration through a single selected flattener."""

    def __init__(self, flattener: Flattener):
        self._flattener = flattener

    def __repr__(self) -> str:
        return f"<Cursor {type(self._flattener).__name__} keys={len(self)}>"

    @property
    def flattener(self) -> Flattener:
        return self._flattener

    def select_nodes(self, key: str) -> NodeIterator:
        """Return the nodes filed under ``key``.

        Unknown keys give an empty iterator rather than ``None``, so the result
        can always be filtered or measured.
        """
        nodes = self._flattener.get_nodes_by_key(key)
        if nodes is None:
            return NodeIterator()
        return nodes

    def keys(self) -> Iterable[str]:
        return self._flattener.keys()

    def __len__(self) -> int:
        return len(self._flattener)

    def register_new_node(self, node: Node) -> None:
        """Make a node inserted after the parse visible to this cursor's flattener."""
        self._flattener.flatten(node)


class MultiCursor:
    """All the flatteners that took part in one parse, in the order given.

    Pick one with :meth:`first` or :meth:`select_cursor` before doing lookups.
    """

    def __init__(self, *flatteners: Flattener):
        self._flatteners: Tuple[Flattener, ...] = tuple(flatteners)

    def __repr__(self) -> str:
        names = ", ".join(type(flattener).__name__ for flattener in self._flatteners)
        return f"<MultiCursor [{names}]>"

    def __len__(self) -> int:
        return len(self._flatteners)

    @property
    def flatteners(self) -> Sequence[Flattener]:
        return self._flatteners

    def first(self) -> Optional[Cursor]:
        if not self._flatteners:
            return None
        return Cursor(self._flatteners[0])

    def select_cursor(self, flattener: Optional[Flattener]) -> Cursor:
        """Return a cursor over the registered flattener of the same kind as ``flattener``.

        ``flattener`` is only a sample of the wanted type; its own state is
        ignored. Raises :class:`NoFlattenerError` if it is ``None`` or nothing
        registered matches.
        """
        if flattener is None:
            raise NoFlattenerError("a sample flattener is required to select a cursor")
        for candidate in self._flatteners:
            if candidate.is_my_type(flattener):
                return Cursor(candidate)
        raise NoFlattenerError(f"no registered flattener matches {type(flattener).__name__}")

    def register_new_node(self, node: Node) -> None:
        """Feed a node inserted after the parse to every flattener.

        Registration is not transactional: flatteners are called in order and
        the first exception propagates unchanged, leaving the node registered
        with the flatteners that ran before the failing one.
        """
        if not self._flatteners:
            raise NoFlattenerError()
        for flattener in self._flatteners:
            flattener.flatten(node)
        logger.debug("Registered %r with %s flattener(s)", node, len(self._flatteners))
