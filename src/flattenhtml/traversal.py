"""Single-pass, pre-order walk of a bs4 tree."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

from bs4 import Tag
from bs4.element import PageElement

from .flattener import Flattener
from .node import Node

logger = logging.getLogger(__name__)


def walk(root: PageElement) -> Iterator[PageElement]:
    """Yield ``root`` and every descendant in document order.

    The walk is iterative so deeply nested documents do not hit the
    recursion limit. Children are snapshotted when their parent is visited.
    """
    stack = [root]
    while stack:
        element = stack.pop()
        yield element
        if isinstance(element, Tag):
            stack.extend(reversed(element.contents))


def flatten_tree(root: PageElement, flatteners: Sequence[Flattener]) -> int:
    """Feed every node under ``root`` to every flattener.

    Each element is wrapped once and the same :class:`Node` goes to all
    flatteners, so removing it through one index hides it from the others.
    The first exception raised by a flattener stops the walk and propagates;
    whatever the flatteners indexed up to that point is left as is.

    Returns the number of nodes visited.
    """
    visited = 0
    for element in walk(root):
        node = Node(element)
        for flattener in flatteners:
            flattener.flatten(node)
        visited += 1
    logger.debug("Flattened %s nodes with %s flattener(s)", visited, len(flatteners))
    return visited

