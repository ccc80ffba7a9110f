"""Error kinds raised by the flattening core."""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    NO_FLATTENER = "no_flattener"
    PARENTLESS_NODE = "parentless_node"


class FlattenHTMLError(Exception):
    """Base class for errors raised by :mod:`flattenhtml`.

    Every subclass carries a :class:`ErrorKind` so callers can branch on the
    kind without matching on the exception type.
    """

    kind: ErrorKind
    default_message = "flattenhtml error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class NoFlattenerError(FlattenHTMLError):
    """No flattener was supplied, or none matches the requested type."""

    kind = ErrorKind.NO_FLATTENER
    default_message = "at least one flattener should be provided"


class ParentlessNodeError(FlattenHTMLError):
    """The node is not attached to a parent in the tree."""

    kind = ErrorKind.PARENTLESS_NODE
    default_message = "node with no parent cannot be removed"
