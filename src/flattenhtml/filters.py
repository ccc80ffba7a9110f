"""Reference predicates for :meth:`NodeIterator.filter` and friends."""

from __future__ import annotations

from .iterator import FilterOption
from .node import Node


def with_tag(tag: str) -> FilterOption:
    """Match nodes whose tag name equals ``tag``."""

    def _option(node: Node) -> bool:
        return node.tag_name == tag

    return _option


def with_attribute(key: str) -> FilterOption:
    """Match nodes carrying attribute ``key``, whatever its value."""

    def _option(node: Node) -> bool:
        return node.has_attribute(key)

    return _option


def with_attribute_value(key: str, value: str) -> FilterOption:
    def _option(node: Node) -> bool:
        return node.attribute(key) == value

    return _option
