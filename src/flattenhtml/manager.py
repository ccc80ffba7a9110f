"""Entry point tying the parsed tree, the traversal and the cursors together."""

from __future__ import annotations

import dataclasses
import logging
from typing import IO, Any, BinaryIO, Dict, Optional, Union

import requests
from bs4 import BeautifulSoup, Tag

from .cursor import MultiCursor
from .errors import NoFlattenerError
from .flattener import Flattener
from .traversal import flatten_tree

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "flattenhtml/0.1 (+https://pypi.org/project/flattenhtml/)",
    "Accept": "text/html,application/xhtml+xml",
}


@dataclasses.dataclass
class ManagerOptions:
    """Parsing, rendering and fetching settings for :class:`NodeManager`."""

    features: str = "html5lib"
    from_encoding: Optional[str] = None
    encoding: str = "utf-8"
    formatter: str = "minimal"
    timeout: float = 30.0
    headers: Dict[str, str] = dataclasses.field(default_factory=lambda: dict(DEFAULT_HEADERS))

    def make_soup(self, markup: Union[str, bytes]) -> BeautifulSoup:
        kwargs: Dict[str, Any] = {}
        if self.from_encoding and isinstance(markup, bytes):
            kwargs["from_encoding"] = self.from_encoding
        # Attribute values stay plain strings; ``class`` is not split into a list.
        return BeautifulSoup(markup, self.features, multi_valued_attributes=None, **kwargs)


class NodeManager:
    """Owns the root of an HTML tree for the length of a session.

    There are several ways to get one:

    1. ``NodeManager(root)`` around a tree parsed elsewhere.
    2. :meth:`from_string` / :meth:`from_reader` to parse markup.
    3. :meth:`from_url` to fetch and parse a page.

    :meth:`parse` walks the tree once with the given flatteners and
    :meth:`render` writes the (possibly modified) tree back out.
    """

    def __init__(self, root: Tag, *, options: Optional[ManagerOptions] = None):
        self._root = root
        self.options = options or ManagerOptions()

    @classmethod
    def from_string(cls, markup: Union[str, bytes], *, options: Optional[ManagerOptions] = None) -> "NodeManager":
        options = options or ManagerOptions()
        return cls(options.make_soup(markup), options=options)

    @classmethod
    def from_reader(cls, reader: IO, *, options: Optional[ManagerOptions] = None) -> "NodeManager":
        """Parse the whole content of a text or binary stream."""
        return cls.from_string(reader.read(), options=options)

    @classmethod
    def from_url(
        cls,
        url: str,
        *,
        options: Optional[ManagerOptions] = None,
        session: Optional[requests.Session] = None,
    ) -> "NodeManager":
        """Fetch ``url`` and parse the response body.

        Transport errors and non-2xx responses surface as the usual
        :mod:`requests` exceptions. ``options.timeout`` bounds the request.
        """
        options = options or ManagerOptions()
        http = session or requests
        logger.info("Fetching %s", url)
        response = http.get(url, headers=options.headers, timeout=options.timeout)
        response.raise_for_status()
        logger.debug("Fetched %s bytes from %s", len(response.content), url)
        return cls.from_string(response.content, options=options)

    @property
    def root(self) -> Tag:
        return self._root

    def parse(self, *flatteners: Flattener) -> MultiCursor:
        """Traverse the tree once, feeding every node to each flattener.

        Raises :class:`NoFlattenerError` when called without flatteners. If a
        flattener raises, the traversal stops and the exception propagates;
        the flatteners passed in should then be thrown away.
        """
        if not flatteners:
            raise NoFlattenerError()
        flatten_tree(self._root, flatteners)
        return MultiCursor(*flatteners)

    def render_string(self) -> str:
        return self._root.decode(eventual_encoding=self.options.encoding, formatter=self.options.formatter)

    def render(self, sink: BinaryIO) -> None:
        """Write the current tree, encoded with ``options.encoding``, to ``sink``."""
        sink.write(self.render_string().encode(self.options.encoding))
