"""TreeBuilder: populates a Node tree from request paths.

Each request path is parsed into node names and a format.  Intermediate
nodes are created lazily with ``Node.add_child``, so adding
``/docs/guide.html`` and then ``/docs/guide.txt`` reuses the same ``docs``
and ``guide`` nodes and stores two resources on ``guide``.

``index`` segments collapse onto their parent: ``/docs/index.html`` is
stored on ``docs`` itself.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from resource_tree.config import TreeConfig
from resource_tree.node import Node
from resource_tree.path import PathParser
from resource_tree.protocols import ParsedPath
from resource_tree.resources import Resource

__all__ = ["TreeBuilder"]

logger = logging.getLogger(__name__)

Entries = Mapping[str, Any] | Iterable[tuple[str, Any]]


class TreeBuilder:
    """Builds and extends request-path trees.

    Example::

        builder = TreeBuilder()
        root = builder.build({"/index.html": "home", "/docs/guide.html": "guide"})
        root.get("/docs/guide.html").data    # "guide"
        root.get("/").data                   # "home"
    """

    def __init__(
        self,
        config: TreeConfig | None = None,
        max_cache_size: int = 512,
    ) -> None:
        """Initialise the builder.

        Args:
            config: Tree defaults.  Defaults to ``TreeConfig()`` when None.
            max_cache_size: Maximum number of parsed paths held in the
                builder's LRU cache.  Defaults to 512.
        """
        self._config: TreeConfig = config if config is not None else TreeConfig()
        self._parser = PathParser(max_size=max_cache_size)

    @property
    def config(self) -> TreeConfig:
        return self._config

    def build(self, entries: Entries) -> Node:
        """Return a new root holding one resource per ``(path, data)`` entry.

        Args:
            entries: A mapping of request path to payload, or an iterable of
                ``(request_path, payload)`` pairs.
        """
        root = self._config.new_root()
        pairs = entries.items() if isinstance(entries, Mapping) else entries
        for path, data in pairs:
            self.add(root, path, data)
        return root

    def add(self, root: Node, path: str | ParsedPath, data: Any = None) -> Resource:
        """Store ``data`` at ``path`` beneath ``root``, creating nodes as needed.

        An existing resource for the same node and format has its payload
        replaced.

        Returns:
            The created or updated ``Resource``.
        """
        parsed = self._parser.parse(path)
        node = root
        for name in parsed.node_names:
            node = node.add_child(name)
        resource: Resource = node.resources.add_data(data, format=parsed.format)
        logger.debug("Added %s at %r", path, resource.request_path)
        return resource
